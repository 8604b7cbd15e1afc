from __future__ import annotations

import csv
import io
import logging
from datetime import date, timedelta
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from ..common.datetime_utils import month_label, short_date_label, weekday_label
from ..core.constants import EXPORT_PREFIX
from ..entries.durations import day_bounds, office_duration_label, total_break_minutes, work_minutes
from ..entries.model import TimeEntry
from ..entries.parser import entries_from_payload
from ..forecast.estimators import round_half_up
from .model import DaySummary, MonthSummary, WeekSummary, WeekTotal

log = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Date", "Type", "Start", "End", "Break (min)", "Office Time", "Sessions", "Notes"]

Payload = Optional[Sequence[Mapping[str, Any]]]


def week_dates(today: date, week_offset: int = 0) -> list[date]:
    """Monday..Sunday of the week ``week_offset`` weeks away from ``today``."""
    monday = today - timedelta(days=today.weekday()) + timedelta(weeks=week_offset)
    return [monday + timedelta(days=i) for i in range(7)]


def summarize_week(entries: Sequence[TimeEntry], today: date, week_offset: int = 0) -> WeekSummary:
    work_entries = [e for e in entries if e.is_work]

    days: list[DaySummary] = []
    for day in week_dates(today, week_offset):
        entry = next((e for e in work_entries if e.work_date == day), None)
        total = work_minutes(entry) if entry else 0
        breaks = total_break_minutes(entry.sessions) if entry else 0
        days.append(
            DaySummary(
                date=day.isoformat(),
                day_label=weekday_label(day),
                total_minutes=total,
                break_minutes=breaks,
                net_minutes=max(0, total - breaks),
                sessions=len(entry.sessions) if entry else 0,
            )
        )

    worked = [d for d in days if d.total_minutes > 0]
    total_minutes = sum(d.total_minutes for d in days)

    longest: Optional[DaySummary] = None
    for d in worked:
        if longest is None or d.total_minutes > longest.total_minutes:
            longest = d

    return WeekSummary(
        days=tuple(days),
        total_hours=total_minutes / 60,
        avg_hours_per_day=total_minutes / 60 / len(worked) if worked else 0,
        total_break_minutes=sum(d.break_minutes for d in days),
        longest_day=longest,
        days_worked=len(worked),
    )


def summarize_month(entries: Sequence[TimeEntry], today: date, month_offset: int = 0) -> MonthSummary:
    """Four consecutive weeks (oldest first) ending at week ``month_offset * 4``."""
    base = month_offset * 4

    totals: list[WeekTotal] = []
    for week_offset in range(base - 3, base + 1):
        dates = week_dates(today, week_offset)
        summary = summarize_week(entries, today, week_offset)
        totals.append(
            WeekTotal(
                label=f"{short_date_label(dates[0])} - {short_date_label(dates[6])}",
                total_hours=round_half_up(summary.total_hours, 1),
            )
        )

    # Thursday of the middle week decides which month the range belongs to.
    middle = week_dates(today, base - 2)[3]
    return MonthSummary(week_summaries=tuple(totals), month_label=month_label(middle))


def export_rows(entries: Sequence[TimeEntry]) -> list[dict]:
    rows: list[dict] = []
    for entry in sorted(entries, key=lambda e: e.work_date):
        earliest_in, latest_out = day_bounds(entry.sessions)
        rows.append(
            {
                "Date": entry.work_date.isoformat(),
                "Type": entry.entry_type.value,
                "Start": earliest_in or "",
                "End": latest_out or "",
                "Break (min)": total_break_minutes(entry.sessions),
                "Office Time": office_duration_label(entry.sessions) if entry.is_work else "",
                "Sessions": len(entry.sessions),
                "Notes": entry.notes,
            }
        )
    return rows


class ReportService:
    def __init__(self, *, export_prefix: str = EXPORT_PREFIX):
        self._export_prefix = export_prefix

    def week_summary(self, payload: Payload, *, today: date, week_offset: int = 0) -> WeekSummary:
        return summarize_week(entries_from_payload(payload), today, week_offset)

    def month_summary(self, payload: Payload, *, today: date, month_offset: int = 0) -> MonthSummary:
        return summarize_month(entries_from_payload(payload), today, month_offset)

    def export_filename(self, today: date, ext: str) -> str:
        return f"{self._export_prefix}-{today.isoformat()}.{ext}"

    def export_csv(self, payload: Payload) -> str:
        rows = export_rows(entries_from_payload(payload))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS, lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        log.info("csv export: %d rows", len(rows))
        return out.getvalue()

    def export_xlsx(self, payload: Payload) -> bytes:
        rows = export_rows(entries_from_payload(payload))
        df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Timesheet")

        log.info("xlsx export: %d rows", len(rows))
        return output.getvalue()
