"""Near-term predictions for yesterday, today and tomorrow."""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_hhmm, now_local, time_to_minutes
from ..core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_CLOCK_IN_MINUTES,
    DEFAULT_DEPARTURE,
    DEFAULT_WORK_HOURS,
    EWMA_ALPHA,
)
from ..core.enums import DayLabel
from ..entries.durations import earliest_clock_in, latest_clock_out, total_break_minutes, work_minutes
from ..entries.model import TimeEntry
from .estimators import ewma, round_half_up
from .model import DayPrediction
from .sampling import SameWeekdayStrategy, SampleStrategy

log = logging.getLogger(__name__)

_OFFSETS = (
    (DayLabel.YESTERDAY, -1),
    (DayLabel.TODAY, 0),
    (DayLabel.TOMORROW, 1),
)


def build_corpus(entries: Iterable[TimeEntry]) -> list[TimeEntry]:
    """Work entries that have at least one session, oldest first."""
    corpus = [e for e in entries if e.is_work and e.sessions]
    corpus.sort(key=lambda e: e.work_date)
    return corpus


def find_entry(corpus: Sequence[TimeEntry], target: date) -> Optional[TimeEntry]:
    return next((e for e in corpus if e.work_date == target), None)


def _actual(label: DayLabel, target: date, entry: TimeEntry) -> DayPrediction:
    return DayPrediction(
        label=label.value,
        date=target.isoformat(),
        predicted_work_hours=None,
        predicted_break_minutes=None,
        predicted_departure=None,
        actual_work_hours=work_minutes(entry) / 60,
        actual_break_minutes=total_break_minutes(entry.sessions),
        actual_departure=latest_clock_out(entry),
        is_actual=True,
    )


def _predicted(label: DayLabel, target: date, work_hours: float, break_minutes: int, departure: str) -> DayPrediction:
    return DayPrediction(
        label=label.value,
        date=target.isoformat(),
        predicted_work_hours=work_hours,
        predicted_break_minutes=break_minutes,
        predicted_departure=departure,
        actual_work_hours=None,
        actual_break_minutes=None,
        actual_departure=None,
        is_actual=False,
    )


def _estimate(label: DayLabel, target: date, sample: Sequence[TimeEntry]) -> DayPrediction:
    if not sample:
        return _predicted(label, target, DEFAULT_WORK_HOURS, DEFAULT_BREAK_MINUTES, DEFAULT_DEPARTURE)

    work = [work_minutes(e) for e in sample]
    breaks = [total_break_minutes(e.sessions) for e in sample]
    clock_ins = [time_to_minutes(t) for t in (earliest_clock_in(e) for e in sample) if t is not None]

    pred_work = ewma(work, EWMA_ALPHA)
    pred_break = ewma(breaks, EWMA_ALPHA)
    pred_clock_in = ewma(clock_ins, EWMA_ALPHA) if clock_ins else DEFAULT_CLOCK_IN_MINUTES
    departure = format_hhmm(round_half_up(pred_clock_in + pred_work))

    return _predicted(
        label,
        target,
        round_half_up(pred_work / 60, 1),
        round_half_up(pred_break),
        departure,
    )


def get_predictions(
    entries: Iterable[TimeEntry],
    *,
    now: datetime | date | None = None,
    strategy: SampleStrategy | None = None,
) -> list[DayPrediction]:
    """Return exactly three records: yesterday, today, tomorrow.

    Yesterday and tomorrow report actual aggregates when an entry exists for
    that date. Today is always estimated, since an in-progress day would skew
    the numbers.
    """
    now = now or now_local()
    today = now.date() if isinstance(now, datetime) else now
    strategy = strategy or SameWeekdayStrategy()
    corpus = build_corpus(entries)

    out: list[DayPrediction] = []
    for label, offset in _OFFSETS:
        target = today + timedelta(days=offset)
        actual = find_entry(corpus, target) if label != DayLabel.TODAY else None
        if actual:
            out.append(_actual(label, target, actual))
            continue
        out.append(_estimate(label, target, strategy.select(corpus, target)))

    log.debug("predictions for %s from %d work entries", today.isoformat(), len(corpus))
    return out
