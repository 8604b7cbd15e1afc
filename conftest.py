from __future__ import annotations

from datetime import date, datetime

import pytest

from src.timetrack.timetrack.core.enums import EntryType
from src.timetrack.timetrack.entries.model import TimeEntry, WorkSession


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 2, 4, 10, 0, 0)


def _make_entry(
    day: str,
    *spans: tuple,
    entry_type: EntryType = EntryType.WORK,
    notes: str = "",
) -> TimeEntry:
    """Build an entry from ``(clock_in, clock_out[, break_start, break_end])`` tuples."""
    sessions = []
    for idx, span in enumerate(spans):
        clock_in, clock_out, *brk = span
        sessions.append(
            WorkSession(
                session_id=f"{day}-{idx}",
                clock_in=clock_in,
                clock_out=clock_out,
                break_start=brk[0] if brk else None,
                break_end=brk[1] if len(brk) > 1 else None,
            )
        )
    return TimeEntry(
        entry_id=day,
        work_date=date.fromisoformat(day),
        entry_type=entry_type,
        sessions=tuple(sessions),
        notes=notes,
    )


@pytest.fixture
def make_entry():
    return _make_entry
