from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..analytics.aggregator import summarize
from ..analytics.departments.base import DepartmentResolver
from ..analytics.departments.marker_strategy import DEFAULT_DEPARTMENT_STRATEGY
from ..analytics.filters import FilterSpec, apply_filters
from ..analytics.model import SummaryStats
from ..common.datetime_utils import format_date, parse_iso_date, today_local
from ..common.validators import validate_employee_id, validate_employee_name
from ..core.constants import DEFAULT_DEPARTMENT, PAGE_SIZE_OPTIONS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, NewAttendance, RecordId
from .repository import AttendanceRepository
from .store import AttendanceStore, RecordQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    rows: list[dict] = field(default_factory=list)
    stats: SummaryStats = field(default_factory=SummaryStats)
    total_matches: int = 0
    showing: int = 0
    notice: Optional[str] = None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        store: AttendanceStore,
        *,
        department_strategy: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
    ):
        self._attendance = attendance
        self._store = store
        self._department_of = department_strategy

    def dashboard(self, spec: FilterSpec, *, refresh: bool = False) -> DashboardView:
        """Rows for the visible page, stats for every match."""
        query = RecordQuery(work_date=spec.work_date, search=spec.search)
        records = self._store.records(query, refresh=refresh)

        result = apply_filters(records, spec, self._department_of)
        return DashboardView(
            rows=[self._to_row(r) for r in result.visible],
            stats=summarize(result.matched),
            total_matches=result.total_matches,
            showing=result.showing,
        )

    @staticmethod
    def empty_dashboard(notice: str) -> DashboardView:
        return DashboardView(notice=notice)

    def mark_attendance(
        self,
        *,
        employee_name: str,
        employee_id: str,
        work_date: Optional[str] = None,
        status: str = AttendanceStatus.PRESENT.label,
    ) -> str:
        record = NewAttendance(
            employee_name=validate_employee_name(employee_name),
            employee_id=validate_employee_id(employee_id),
            work_date=self._parse_work_date(work_date),
            status=self._parse_status(status),
        )

        message = self._attendance.create_record(record)
        self._store.invalidate()
        logger.info("Marked %s as %s on %s", record.employee_id, record.status.value, format_date(record.work_date))
        return message

    def add_employee(self, *, employee_name: str, employee_id: str) -> str:
        """Register a new employee by posting a Present record dated today."""
        employee_id = validate_employee_id(employee_id)
        validate_employee_name(employee_name)

        if any(r.employee_id == employee_id for r in self._store.records()):
            raise ValidationError("Employee ID already exists!")

        return self.mark_attendance(employee_name=employee_name, employee_id=employee_id)

    def delete_record(self, record_id: RecordId) -> None:
        self._attendance.delete_record(record_id)
        self._store.invalidate()
        logger.info("Deleted attendance record %s", record_id)

    def refresh(self) -> None:
        self._store.invalidate()

    def filter_options(self) -> dict:
        departments = list(getattr(self._department_of, "departments", []))
        if DEFAULT_DEPARTMENT not in departments:
            departments.append(DEFAULT_DEPARTMENT)
        return {
            "statuses": ["All", AttendanceStatus.PRESENT.label, AttendanceStatus.ABSENT.label],
            "departments": ["All", *departments],
            "page_sizes": list(PAGE_SIZE_OPTIONS),
        }

    def _parse_work_date(self, value: Optional[str]):
        if not value or not str(value).strip():
            return today_local()
        try:
            return parse_iso_date(str(value).strip())
        except ValueError:
            raise ValidationError("Date must be in YYYY-MM-DD format")

    def _parse_status(self, value: str) -> AttendanceStatus:
        status = AttendanceStatus.from_raw(value)
        if status is AttendanceStatus.UNKNOWN:
            raise ValidationError("Status must be Present or Absent")
        return status

    def _to_row(self, r: AttendanceRecord) -> dict:
        label = r.status.label if r.status is not AttendanceStatus.UNKNOWN else (r.raw_status or "-")
        return {
            "id": r.record_id,
            "employee_name": r.employee_name,
            "employee_id": r.employee_id,
            "date": format_date(r.work_date) or "-",
            "status": label,
            "css_class": r.status.value,
            "department": self._department_of(r.employee_id, r.employee_name),
        }
