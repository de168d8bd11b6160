from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import ABSENT_MARKER


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    """Like parse_iso_date, but empty values and the absent marker map to None."""
    if value is None:
        return None
    v = str(value).strip()
    if not v or v == ABSENT_MARKER:
        return None
    return parse_iso_date(v[:10])


def format_iso_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_hhmm(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def _minutes_of_day(value: str) -> Optional[int]:
    parts = (value or "").strip().split(":")
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]) * 60 + int(parts[1])
    except ValueError:
        return None


def working_hours(check_in: str, check_out: str) -> str:
    """Duration between two HH:MM values as ``"8h 30m"``.

    Returns the absent marker when either side is missing.
    """
    if check_in == ABSENT_MARKER or check_out == ABSENT_MARKER:
        return ABSENT_MARKER

    start = _minutes_of_day(check_in)
    end = _minutes_of_day(check_out)
    if start is None or end is None or end < start:
        return ABSENT_MARKER

    minutes = end - start
    return f"{minutes // 60}h {minutes % 60}m"
