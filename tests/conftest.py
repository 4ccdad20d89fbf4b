from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from attendance_tracker.attendance.model import NewAttendance, normalize_record


class InMemoryAttendance:
    """Fake remote store: keeps payload dicts, answers like the HTTP repository."""

    def __init__(self, payloads=None):
        self.payloads = list(payloads or [])
        self.list_calls: list[dict] = []
        self.created: list[NewAttendance] = []
        self.deleted: list = []
        self.fail_with: Optional[Exception] = None

    def list_records(self, *, work_date: Optional[date] = None, search: Optional[str] = None):
        self.list_calls.append({"work_date": work_date, "search": search})
        if self.fail_with:
            raise self.fail_with
        return [normalize_record(p) for p in self.payloads]

    def create_record(self, record: NewAttendance) -> str:
        if self.fail_with:
            raise self.fail_with
        self.created.append(record)
        self.payloads.append({"id": len(self.payloads) + 1, **record.to_payload()})
        return "Attendance marked successfully"

    def delete_record(self, record_id) -> bool:
        if self.fail_with:
            raise self.fail_with
        self.deleted.append(record_id)
        self.payloads = [p for p in self.payloads if str(p.get("id")) != str(record_id)]
        return True


SCENARIO = [
    {"id": 1, "employeeName": "Ann Lee", "employeeID": "EMP1", "status": "Present", "date": "2024-01-01"},
    {"id": 2, "employeeName": "Ann Lee", "employeeID": "EMP1", "status": "Absent", "date": "2024-01-02"},
    {"id": 3, "employeeName": "Bo Chen", "employeeID": "EMP2", "status": "present", "date": "2024-01-01"},
]


@pytest.fixture
def scenario_payloads():
    return [dict(p) for p in SCENARIO]


@pytest.fixture
def scenario_records(scenario_payloads):
    return [normalize_record(p) for p in scenario_payloads]


@pytest.fixture
def fake_repo(scenario_payloads):
    return InMemoryAttendance(scenario_payloads)
