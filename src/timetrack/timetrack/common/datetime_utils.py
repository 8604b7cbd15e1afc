from __future__ import annotations

from datetime import date, datetime

from ..core.constants import MINUTES_PER_DAY


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def time_to_minutes(value: str) -> int:
    """Convert a zero-padded "HH:mm" string to minutes from midnight."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_between(start: str, end: str) -> int:
    """Minutes from start to end; an end before start wraps past midnight."""
    minutes = time_to_minutes(end) - time_to_minutes(start)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def format_hhmm(total_minutes: int) -> str:
    """Format minutes from midnight as "HH:mm", wrapping the hour modulo 24."""
    hours = (total_minutes // 60) % 24
    return f"{hours:02d}:{total_minutes % 60:02d}"


def short_date_label(value: date) -> str:
    """e.g. "Oct 19"."""
    return f"{value:%b} {value.day}"


def weekday_label(value: date) -> str:
    return f"{value:%a}"


def month_label(value: date) -> str:
    return f"{value:%B} {value.year}"
