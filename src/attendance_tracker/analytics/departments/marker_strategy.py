from __future__ import annotations

from typing import Sequence

from ...core.constants import DEFAULT_DEPARTMENT
from .base import DepartmentStrategy

# (department, employee ID marker, employee name marker)
DEFAULT_MARKERS: tuple[tuple[str, str, str], ...] = (
    ("IT", "EMP001", "IT"),
    ("HR", "EMP002", "HR"),
    ("Finance", "EMP003", "Finance"),
    ("Marketing", "EMP004", "Marketing"),
)


class MarkerDepartmentStrategy(DepartmentStrategy):
    """Substring rule: an ID or name containing a marker maps to its department.

    Markers are checked in order and a later match overrides an earlier one.
    Matching is case-sensitive so that e.g. "Smith" does not land in IT.
    This is a stand-in for a real employee/department relation.
    """

    def __init__(self, markers: Sequence[tuple[str, str, str]] = DEFAULT_MARKERS, *, default: str = DEFAULT_DEPARTMENT):
        self._markers = tuple(markers)
        self._default = default

    @property
    def departments(self) -> list[str]:
        return [name for name, _, _ in self._markers]

    def department_for(self, employee_id: str, employee_name: str) -> str:
        department = self._default
        for name, id_marker, name_marker in self._markers:
            if id_marker in employee_id or name_marker in employee_name:
                department = name
        return department


DEFAULT_DEPARTMENT_STRATEGY = MarkerDepartmentStrategy()
