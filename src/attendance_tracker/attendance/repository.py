from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, NewAttendance, RecordId


class AttendanceRepository(Protocol):
    def list_records(self, *, work_date: Optional[date] = None, search: Optional[str] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_record(self, record: NewAttendance) -> str:
        """Submit a new record; returns the confirmation message."""

        raise NotImplementedError

    def delete_record(self, record_id: RecordId) -> bool:
        raise NotImplementedError
