from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import DailyTrend


@dataclass(frozen=True)
class SummaryStats:
    total: int = 0
    present_count: int = 0
    absent_count: int = 0
    present_rate: float = 0
    absent_rate: float = 0


@dataclass(frozen=True)
class DepartmentBreakdown:
    department_name: str
    present_count: int
    absent_count: int
    total: int
    attendance_rate: float
    unique_employee_count: int


@dataclass(frozen=True)
class DailyBreakdown:
    present: int = 0
    absent: int = 0
    total: int = 0


@dataclass(frozen=True)
class EmployeeAggregate:
    employee_id: str
    employee_name: str
    department: str
    position: str
    email: str
    total_records: int
    present_count: int
    absent_count: int
    first_record_date: Optional[date]
    last_record_date: Optional[date]
    attendance_rate: float = 0


@dataclass(frozen=True)
class DataWindow:
    """What the report header shows about the fetched collection."""

    record_count: int = 0
    unique_employees: int = 0
    first_date: Optional[date] = None
    last_date: Optional[date] = None


@dataclass(frozen=True)
class AttendanceReport:
    summary: SummaryStats
    departments: list[DepartmentBreakdown] = field(default_factory=list)
    best_department: Optional[str] = None
    worst_department: Optional[str] = None
    daily: dict[date, DailyBreakdown] = field(default_factory=dict)
    trend: DailyTrend = DailyTrend.STABLE
    recent_activity: list[AttendanceRecord] = field(default_factory=list)
    window: DataWindow = field(default_factory=DataWindow)
