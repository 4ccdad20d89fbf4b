from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from ..analytics.aggregator import build_report, employee_aggregates
from ..analytics.departments.base import DepartmentResolver
from ..analytics.departments.marker_strategy import DEFAULT_DEPARTMENT_STRATEGY
from ..analytics.model import AttendanceReport, EmployeeAggregate
from ..attendance.store import AttendanceStore
from ..common.datetime_utils import format_date
from ..core.constants import RECENT_ACTIVITY_LIMIT

EXPORT_FIELDS = ["Employee Name", "Employee ID", "Date", "Status", "Department", "Record ID"]


class ReportService:
    """Use case: reports page, employee directory and CSV export."""

    def __init__(
        self,
        store: AttendanceStore,
        *,
        department_strategy: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
        recent_limit: int = RECENT_ACTIVITY_LIMIT,
    ):
        self._store = store
        self._department_of = department_strategy
        self._recent_limit = int(recent_limit)

    def build_report(self, *, refresh: bool = False) -> AttendanceReport:
        records = self._store.records(refresh=refresh)
        return build_report(records, department_of=self._department_of, recent_limit=self._recent_limit)

    def empty_report(self) -> AttendanceReport:
        return build_report([], department_of=self._department_of)

    def employees(self, *, search: Optional[str] = None) -> list[EmployeeAggregate]:
        rows = employee_aggregates(self._store.records(), self._department_of)
        term = (search or "").strip().lower()
        if not term:
            return rows
        return [
            e
            for e in rows
            if term in e.employee_name.lower()
            or term in e.employee_id.lower()
            or term in e.department.lower()
            or term in e.position.lower()
        ]

    def export_rows(self) -> list[dict]:
        out = []
        for r in self._store.records():
            out.append(
                {
                    "Employee Name": r.employee_name,
                    "Employee ID": r.employee_id,
                    "Date": format_date(r.work_date) or "",
                    "Status": r.raw_status or r.status.label,
                    "Department": self._department_of(r.employee_id, r.employee_name),
                    "Record ID": "" if r.record_id is None else r.record_id,
                }
            )
        return out


def report_to_dict(report: AttendanceReport) -> dict:
    """JSON-ready view of a report (dates as YYYY-MM-DD)."""
    window = report.window
    return {
        "summary": asdict(report.summary),
        "departments": [asdict(d) for d in report.departments],
        "best_department": report.best_department or "N/A",
        "worst_department": report.worst_department or "N/A",
        "daily": {format_date(d): asdict(day) for d, day in report.daily.items()},
        "trend": report.trend.value,
        "recent_activity": [
            {
                "id": r.record_id,
                "employee_name": r.employee_name,
                "employee_id": r.employee_id,
                "date": format_date(r.work_date),
                "status": r.raw_status or r.status.label,
            }
            for r in report.recent_activity
        ],
        "window": {
            "record_count": window.record_count,
            "unique_employees": window.unique_employees,
            "first_date": format_date(window.first_date),
            "last_date": format_date(window.last_date),
        },
    }


def employee_to_dict(e: EmployeeAggregate) -> dict:
    data = asdict(e)
    data["first_record_date"] = format_date(e.first_record_date)
    data["last_record_date"] = format_date(e.last_record_date)
    return data
