from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..client.connection import ApiConnection
from ..client.http_base import api_session, request_json
from ..common.datetime_utils import format_date
from .model import AttendanceRecord, NewAttendance, RecordId, normalize_record, unwrap_listing
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_records(self, *, work_date: Optional[date] = None, search: Optional[str] = None) -> Sequence[AttendanceRecord]:
        params = {}
        if work_date:
            params["date"] = format_date(work_date)
        if search:
            params["search"] = search

        config = self._conn.config
        with api_session(self._conn) as session:
            payload = request_json(session, "GET", config.url("attendance"), timeout=config.timeout, params=params)

        items = unwrap_listing(payload)
        logger.debug("Fetched %d attendance records (params=%s)", len(items), params)
        return [normalize_record(item) for item in items]

    def create_record(self, record: NewAttendance) -> str:
        config = self._conn.config
        with api_session(self._conn) as session:
            payload = request_json(
                session,
                "POST",
                config.url("attendance"),
                timeout=config.timeout,
                json=record.to_payload(),
            )

        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return "Attendance marked successfully"

    def delete_record(self, record_id: RecordId) -> bool:
        config = self._conn.config
        with api_session(self._conn) as session:
            request_json(session, "DELETE", config.url("attendance", record_id), timeout=config.timeout)
        return True
