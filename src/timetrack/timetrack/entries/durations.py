"""Duration and day-bound helpers over time entries.

All helpers are pure and read-only. Times are zero-padded ``HH:mm`` strings, so
string comparison orders them correctly.
"""
from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import minutes_between
from ..core.constants import EMPTY_DURATION
from .model import TimeEntry, WorkSession


def session_minutes(session: WorkSession) -> int:
    if not session.is_complete:
        return 0
    return minutes_between(session.clock_in, session.clock_out)


def work_minutes(entry: TimeEntry) -> int:
    """Total clocked minutes for the day, breaks included."""
    total = sum(session_minutes(s) for s in entry.sessions)
    return max(0, total)


def total_break_minutes(sessions: Iterable[WorkSession]) -> int:
    return sum(minutes_between(s.break_start, s.break_end) for s in sessions if s.has_break)


def earliest_clock_in(entry: TimeEntry) -> Optional[str]:
    clock_ins = [s.clock_in for s in entry.sessions if s.clock_in]
    return min(clock_ins) if clock_ins else None


def latest_clock_out(entry: TimeEntry) -> Optional[str]:
    clock_outs = [s.clock_out for s in entry.sessions if s.clock_out]
    return max(clock_outs) if clock_outs else None


def day_bounds(sessions: Iterable[WorkSession]) -> tuple[Optional[str], Optional[str]]:
    sessions = list(sessions)
    clock_ins = [s.clock_in for s in sessions if s.clock_in]
    clock_outs = [s.clock_out for s in sessions if s.clock_out]
    return (min(clock_ins) if clock_ins else None, max(clock_outs) if clock_outs else None)


def _label(total_minutes: int) -> str:
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def duration_label(start: Optional[str], end: Optional[str]) -> str:
    if not start or not end:
        return EMPTY_DURATION
    return _label(minutes_between(start, end))


def office_duration_label(sessions: Iterable[WorkSession]) -> str:
    complete = [s for s in sessions if s.is_complete]
    if not complete:
        return EMPTY_DURATION
    return _label(sum(session_minutes(s) for s in complete))
