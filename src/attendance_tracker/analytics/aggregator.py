from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import RATE_PRECISION, RECENT_ACTIVITY_LIMIT
from ..core.enums import DailyTrend
from .departments.base import DepartmentResolver
from .departments.marker_strategy import DEFAULT_DEPARTMENT_STRATEGY
from .employee_profile import email_for, position_for
from .filters import recent_first
from .model import (
    AttendanceReport,
    DailyBreakdown,
    DataWindow,
    DepartmentBreakdown,
    EmployeeAggregate,
    SummaryStats,
)


def rate(part: int, total: int) -> float:
    """Percentage of ``part`` in ``total``, 0 for an empty total."""
    if total <= 0:
        return 0
    return round(part / total * 100, RATE_PRECISION)


@dataclass
class _Tally:
    present: int = 0
    absent: int = 0
    total: int = 0
    employees: set = field(default_factory=set)

    def add(self, record: AttendanceRecord) -> None:
        self.total += 1
        if record.is_present:
            self.present += 1
        elif record.is_absent:
            self.absent += 1
        self.employees.add(record.employee_id)


def summarize(records: Iterable[AttendanceRecord]) -> SummaryStats:
    tally = _Tally()
    for r in records:
        tally.add(r)

    return SummaryStats(
        total=tally.total,
        present_count=tally.present,
        absent_count=tally.absent,
        present_rate=rate(tally.present, tally.total),
        absent_rate=rate(tally.absent, tally.total),
    )


def department_breakdown(
    records: Iterable[AttendanceRecord],
    department_of: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
) -> list[DepartmentBreakdown]:
    tallies: dict[str, _Tally] = {}
    for r in records:
        name = department_of(r.employee_id, r.employee_name)
        tallies.setdefault(name, _Tally()).add(r)

    return [
        DepartmentBreakdown(
            department_name=name,
            present_count=t.present,
            absent_count=t.absent,
            total=t.total,
            attendance_rate=rate(t.present, t.total),
            unique_employee_count=len(t.employees),
        )
        for name, t in sorted(tallies.items())
    ]


def daily_breakdown(records: Iterable[AttendanceRecord]) -> dict[date, DailyBreakdown]:
    """Per-day counts, ascending by date. Undated records are left out."""
    tallies: dict[date, _Tally] = {}
    for r in records:
        if r.work_date is None:
            continue
        tallies.setdefault(r.work_date, _Tally()).add(r)

    return {
        d: DailyBreakdown(present=t.present, absent=t.absent, total=t.total)
        for d, t in sorted(tallies.items())
    }


def daily_trend(daily: dict[date, DailyBreakdown]) -> DailyTrend:
    dates = sorted(d for d, day in daily.items() if day.total > 0)
    if len(dates) < 2:
        return DailyTrend.STABLE

    recent, previous = daily[dates[-1]], daily[dates[-2]]
    recent_rate = recent.present / recent.total
    previous_rate = previous.present / previous.total
    if recent_rate > previous_rate:
        return DailyTrend.IMPROVING
    if recent_rate < previous_rate:
        return DailyTrend.DECLINING
    return DailyTrend.STABLE


@dataclass
class _EmployeeFold:
    name: str
    name_date: date
    tally: _Tally = field(default_factory=_Tally)
    first: Optional[date] = None
    last: Optional[date] = None

    def add(self, record: AttendanceRecord) -> None:
        self.tally.add(record)

        d = record.work_date
        if d is not None:
            self.first = d if self.first is None else min(self.first, d)
            self.last = d if self.last is None else max(self.last, d)

        # Display the name from the most recent record so the result does not
        # depend on input order.
        key = d or date.min
        if key > self.name_date or (key == self.name_date and record.employee_name < self.name):
            self.name, self.name_date = record.employee_name, key


def employee_aggregates(
    records: Iterable[AttendanceRecord],
    department_of: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
) -> list[EmployeeAggregate]:
    folds: dict[str, _EmployeeFold] = {}
    for r in records:
        fold = folds.get(r.employee_id)
        if fold is None:
            fold = _EmployeeFold(name=r.employee_name, name_date=r.work_date or date.min)
            folds[r.employee_id] = fold
        fold.add(r)

    out = []
    for employee_id, f in sorted(folds.items()):
        out.append(
            EmployeeAggregate(
                employee_id=employee_id,
                employee_name=f.name,
                department=department_of(employee_id, f.name),
                position=position_for(employee_id),
                email=email_for(f.name, employee_id),
                total_records=f.tally.total,
                present_count=f.tally.present,
                absent_count=f.tally.absent,
                first_record_date=f.first,
                last_record_date=f.last,
                attendance_rate=rate(f.tally.present, f.tally.total),
            )
        )
    return out


def data_window(records: Sequence[AttendanceRecord]) -> DataWindow:
    dates = [r.work_date for r in records if r.work_date is not None]
    return DataWindow(
        record_count=len(records),
        unique_employees=len({r.employee_id for r in records}),
        first_date=min(dates) if dates else None,
        last_date=max(dates) if dates else None,
    )


def build_report(
    records: Sequence[AttendanceRecord],
    *,
    department_of: DepartmentResolver = DEFAULT_DEPARTMENT_STRATEGY,
    recent_limit: int = RECENT_ACTIVITY_LIMIT,
) -> AttendanceReport:
    """Everything the reports page shows, computed from one record collection."""
    records = list(records)
    departments = department_breakdown(records, department_of)
    daily = daily_breakdown(records)

    best = worst = None
    if departments:
        # Ties keep the first department in name order.
        best = max(departments, key=lambda d: d.attendance_rate).department_name
        worst = min(departments, key=lambda d: d.attendance_rate).department_name

    return AttendanceReport(
        summary=summarize(records),
        departments=departments,
        best_department=best,
        worst_department=worst,
        daily=daily,
        trend=daily_trend(daily),
        recent_activity=recent_first(records, recent_limit),
        window=data_window(records),
    )
