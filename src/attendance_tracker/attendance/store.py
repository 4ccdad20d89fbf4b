from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..core.exceptions import AttendanceServiceError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordQuery:
    """Server-side narrowing sent with the list request."""

    work_date: Optional[date] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class FetchToken:
    generation: int
    query: RecordQuery


@dataclass(frozen=True)
class RecordSnapshot:
    query: RecordQuery
    records: tuple[AttendanceRecord, ...]
    generation: int
    fetched_at: datetime


class AttendanceStore:
    """Shared read-through access to the remote record collection.

    All views read the same snapshot instead of each keeping its own copy.
    Every fetch gets a token; only the most recently issued token may replace
    the snapshot, so a slow older fetch can never overwrite a newer one.
    """

    def __init__(self, repo: AttendanceRepository, *, clock: Callable[[], datetime] = datetime.now):
        self._repo = repo
        self._clock = clock
        self._lock = threading.Lock()
        self._issued = 0
        self._snapshot: Optional[RecordSnapshot] = None

    @property
    def snapshot(self) -> Optional[RecordSnapshot]:
        return self._snapshot

    def begin_fetch(self, query: RecordQuery) -> FetchToken:
        with self._lock:
            self._issued += 1
            return FetchToken(generation=self._issued, query=query)

    def complete_fetch(self, token: FetchToken, records) -> bool:
        """Publish fetched records; returns False when the token was superseded."""
        with self._lock:
            if token.generation != self._issued:
                logger.debug("Discarding superseded fetch #%d (latest is #%d)", token.generation, self._issued)
                return False
            self._snapshot = RecordSnapshot(
                query=token.query,
                records=tuple(records),
                generation=token.generation,
                fetched_at=self._clock(),
            )
            return True

    def fetch(self, query: RecordQuery) -> tuple[AttendanceRecord, ...]:
        token = self.begin_fetch(query)
        try:
            records = tuple(self._repo.list_records(work_date=query.work_date, search=query.search))
        except AttendanceServiceError:
            self._drop_snapshot(token)
            raise
        self.complete_fetch(token, records)
        return records

    def _drop_snapshot(self, token: FetchToken) -> None:
        """A failed latest fetch must not leave older rows on display."""
        with self._lock:
            if token.generation == self._issued:
                self._snapshot = None

    def records(self, query: Optional[RecordQuery] = None, *, refresh: bool = False) -> tuple[AttendanceRecord, ...]:
        query = query or RecordQuery()
        snapshot = self._snapshot
        if not refresh and snapshot is not None and snapshot.query == query:
            return snapshot.records
        return self.fetch(query)

    def invalidate(self) -> None:
        """Drop the snapshot after a write; in-flight fetches are superseded too."""
        with self._lock:
            self._issued += 1
            self._snapshot = None
