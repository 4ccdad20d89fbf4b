from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value) -> Optional[date]:
    """Best-effort conversion of a payload/query value into a calendar date.

    Accepts date/datetime objects, ``YYYY-MM-DD`` strings and full ISO
    timestamps such as ``2024-01-01T00:00:00.000Z``. Anything else (empty,
    malformed) returns None, which callers treat as "no constraint".
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    # Full timestamps keep their date part; anything else after the date is junk.
    if len(text) > 10 and text[10] not in ("T", " "):
        return None
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return None


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
