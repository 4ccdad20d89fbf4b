from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Canonical lower-case attendance status, normalized once at ingestion."""

    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value) -> "AttendanceStatus":
        text = str(value or "").strip().lower()
        if text == cls.PRESENT.value:
            return cls.PRESENT
        if text == cls.ABSENT.value:
            return cls.ABSENT
        return cls.UNKNOWN

    @property
    def label(self) -> str:
        return self.value.capitalize()


class DailyTrend(str, Enum):
    """Direction of the present rate between the two most recent days."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
