from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

# Any callable (employee_id, employee_name) -> department name works where a
# strategy is expected, e.g. a lookup against a real employee directory.
DepartmentResolver = Callable[[str, str], str]


class DepartmentStrategy(ABC):
    """Strategy interface: infer a department from record identity."""

    @abstractmethod
    def department_for(self, employee_id: str, employee_name: str) -> str:
        raise NotImplementedError

    def __call__(self, employee_id: str, employee_name: str) -> str:
        return self.department_for(employee_id or "", employee_name or "")
