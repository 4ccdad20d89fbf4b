from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import to_date
from .departments.base import DepartmentResolver
from .departments.marker_strategy import DEFAULT_DEPARTMENT_STRATEGY

ALL = "all"


def _constraint(value) -> Optional[str]:
    """Normalize a text criterion; empty and "All" mean unconstrained."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() == ALL:
        return None
    return text


def _limit(value) -> Optional[int]:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return None
    return limit if limit > 0 else None


@dataclass(frozen=True)
class FilterSpec:
    """Active search/date/status/department/page-size constraints."""

    search: Optional[str] = None
    work_date: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    department: Optional[str] = None
    limit: Optional[int] = None

    def __post_init__(self):
        # Dates may arrive as raw strings; unparsable ones mean "no constraint".
        for name in ("work_date", "start_date", "end_date"):
            object.__setattr__(self, name, to_date(getattr(self, name)))

    @classmethod
    def from_mapping(cls, args: Mapping) -> "FilterSpec":
        """Build from query args or JSON; invalid values become "no constraint"."""

        def pick(*keys):
            for key in keys:
                value = args.get(key)
                if value not in (None, ""):
                    return value
            return None

        return cls(
            search=_constraint(pick("search")),
            work_date=pick("date", "work_date"),
            start_date=pick("startDate", "start_date"),
            end_date=pick("endDate", "end_date"),
            status=_constraint(pick("status")),
            department=_constraint(pick("department")),
            limit=_limit(pick("limit")),
        )

    def is_empty(self) -> bool:
        return self == FilterSpec(limit=self.limit)


def matches(
    record: AttendanceRecord,
    spec: FilterSpec,
    department_of: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
) -> bool:
    search = _constraint(spec.search)
    if search:
        needle = search.lower()
        if needle not in record.employee_name.lower() and needle not in record.employee_id.lower():
            return False

    d = record.work_date
    if spec.work_date and d != spec.work_date:
        return False
    if spec.start_date and (d is None or d < spec.start_date):
        return False
    if spec.end_date and (d is None or d > spec.end_date):
        return False

    status = _constraint(spec.status)
    if status and record.status_key != status.lower():
        return False

    department = _constraint(spec.department)
    if department and department_of(record.employee_id, record.employee_name).lower() != department.lower():
        return False

    return True


def filter_records(
    records: Iterable[AttendanceRecord],
    spec: FilterSpec,
    department_of: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
) -> list[AttendanceRecord]:
    """Stable filter: keeps the input order, ignores ``spec.limit``."""
    return [r for r in records if matches(r, spec, department_of)]


def paginate(records: Sequence[AttendanceRecord], limit: Optional[int]) -> list[AttendanceRecord]:
    if limit is None or limit <= 0:
        return list(records)
    return list(records[:limit])


def recent_first(records: Iterable[AttendanceRecord], limit: Optional[int] = None) -> list[AttendanceRecord]:
    """Newest date first; ties keep input order and undated records go last."""
    ordered = sorted(
        records,
        key=lambda r: (r.work_date is not None, r.work_date or date.min),
        reverse=True,
    )
    return paginate(ordered, limit)


@dataclass(frozen=True)
class FilterResult:
    matched: list[AttendanceRecord] = field(default_factory=list)
    visible: list[AttendanceRecord] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return len(self.matched)

    @property
    def showing(self) -> int:
        return len(self.visible)


def apply_filters(
    records: Iterable[AttendanceRecord],
    spec: FilterSpec,
    department_of: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
) -> FilterResult:
    matched = filter_records(records, spec, department_of)
    return FilterResult(matched=matched, visible=paginate(matched, spec.limit))
