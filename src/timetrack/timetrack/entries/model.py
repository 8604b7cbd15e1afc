from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EntryType


@dataclass(frozen=True)
class WorkSession:
    """Một lượt có mặt liên tục trong ngày (vào ca -> tan ca), tối đa một lần nghỉ."""

    session_id: str
    clock_in: str
    clock_out: Optional[str] = None
    break_start: Optional[str] = None
    break_end: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.clock_in and self.clock_out)

    @property
    def has_break(self) -> bool:
        return bool(self.break_start and self.break_end)


@dataclass(frozen=True)
class TimeEntry:
    """Thực thể miền (domain): Bản ghi thời gian của một ngày."""

    entry_id: str
    work_date: date
    entry_type: EntryType
    sessions: tuple[WorkSession, ...] = ()
    notes: str = ""

    @property
    def is_work(self) -> bool:
        return self.entry_type == EntryType.WORK
