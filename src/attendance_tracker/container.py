from __future__ import annotations

from dataclasses import dataclass

from .analytics.departments.marker_strategy import MarkerDepartmentStrategy
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.store import AttendanceStore
from .client.connection import ApiConfig, ApiConnection
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    store: AttendanceStore

    attendance_service: AttendanceService
    report_service: ReportService


def build_services(attendance_repo: AttendanceRepository) -> Container:
    store = AttendanceStore(attendance_repo)
    departments = MarkerDepartmentStrategy()

    return Container(
        attendance_repo=attendance_repo,
        store=store,
        attendance_service=AttendanceService(attendance_repo, store, department_strategy=departments),
        report_service=ReportService(store, department_strategy=departments),
    )


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", 20)),
    )
    conn = ApiConnection(config)
    return build_services(HttpAttendanceRepository(conn))
