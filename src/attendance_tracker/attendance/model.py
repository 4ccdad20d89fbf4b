from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Union

from ..common.datetime_utils import format_date, to_date
from ..core.constants import UNKNOWN_EMPLOYEE_ID, UNKNOWN_EMPLOYEE_NAME
from ..core.enums import AttendanceStatus

RecordId = Union[int, str]

# Payload field aliases seen across the remote service versions.
_NAME_KEYS = ("employeeName", "name", "employee_name")
_EMPLOYEE_ID_KEYS = ("employeeID", "employee_id", "employeeId")
_DATE_KEYS = ("date", "work_date")


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry for one employee on one date.

    Note: Plain data object, read-only. Any change on the remote side is
    picked up by a full re-fetch.
    """

    record_id: Optional[RecordId]
    employee_name: str
    employee_id: str
    work_date: Optional[date]
    status: AttendanceStatus
    raw_status: str = ""
    created_at: Optional[str] = None

    @property
    def status_key(self) -> str:
        """Lower-cased status text, also for values outside Present/Absent."""
        return self.raw_status.strip().lower() or self.status.value

    @property
    def is_present(self) -> bool:
        return self.status is AttendanceStatus.PRESENT

    @property
    def is_absent(self) -> bool:
        return self.status is AttendanceStatus.ABSENT


@dataclass(frozen=True)
class NewAttendance:
    """Validated form input for ``POST /attendance``."""

    employee_name: str
    employee_id: str
    work_date: date
    status: AttendanceStatus

    def to_payload(self) -> dict:
        return {
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "date": format_date(self.work_date),
            "status": self.status.label,
        }


def _first_text(payload: Mapping, keys) -> Optional[str]:
    for key in keys:
        value = payload.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


def normalize_record(payload: Any) -> AttendanceRecord:
    """Build an AttendanceRecord from one remote payload item.

    Missing or malformed fields are replaced by defaults instead of failing,
    so one bad item never aborts a whole listing.
    """
    if not isinstance(payload, Mapping):
        payload = {}

    raw_status = payload.get("status")
    raw_status = "" if raw_status is None else str(raw_status)

    return AttendanceRecord(
        record_id=payload.get("id"),
        employee_name=_first_text(payload, _NAME_KEYS) or UNKNOWN_EMPLOYEE_NAME,
        employee_id=_first_text(payload, _EMPLOYEE_ID_KEYS) or UNKNOWN_EMPLOYEE_ID,
        work_date=to_date(next((payload.get(k) for k in _DATE_KEYS if payload.get(k)), None)),
        status=AttendanceStatus.from_raw(raw_status),
        raw_status=raw_status,
        created_at=payload.get("created_at"),
    )


def unwrap_listing(payload: Any) -> list:
    """The list endpoint answers with either a bare array or ``{data: [...]}``."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        data = payload.get("data")
        if isinstance(data, list):
            return data
    return []
