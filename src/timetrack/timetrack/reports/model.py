from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..common.serializers import camel_keys


@dataclass(frozen=True)
class DaySummary:
    date: str
    day_label: str
    total_minutes: int
    break_minutes: int
    net_minutes: int
    sessions: int


@dataclass(frozen=True)
class WeekSummary:
    """Read-model phục vụ biểu đồ tuần."""

    days: tuple[DaySummary, ...]
    total_hours: float
    avg_hours_per_day: float
    total_break_minutes: int
    longest_day: Optional[DaySummary]
    days_worked: int

    def to_dict(self) -> dict:
        return camel_keys(asdict(self))


@dataclass(frozen=True)
class WeekTotal:
    label: str
    total_hours: float


@dataclass(frozen=True)
class MonthSummary:
    week_summaries: tuple[WeekTotal, ...]
    month_label: str

    def to_dict(self) -> dict:
        return camel_keys(asdict(self))
