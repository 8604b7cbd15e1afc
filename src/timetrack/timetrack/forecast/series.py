"""Historical + forecast time series for the prediction chart."""
from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import now_local, short_date_label, time_to_minutes
from ..core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_DEPARTURE_MINUTES,
    DEFAULT_FUTURE_DAYS,
    DEFAULT_WORK_HOURS,
    EWMA_ALPHA,
    HISTORY_DAYS,
    VARIANCE_GROWTH_PER_DAY,
)
from ..core.exceptions import ValidationError
from ..entries.durations import latest_clock_out, total_break_minutes, work_minutes
from ..entries.model import TimeEntry
from .estimators import ewma, round_half_up, variance
from .model import ForecastPoint
from .predictor import build_corpus, find_entry
from .sampling import SameWeekdayStrategy, SampleStrategy

log = logging.getLogger(__name__)


def _departures(entries: Iterable[TimeEntry]) -> list[int]:
    return [time_to_minutes(t) for t in (latest_clock_out(e) for e in entries) if t is not None]


def _history_point(day: date, entry: TimeEntry | None) -> ForecastPoint:
    if entry is None:
        return ForecastPoint(
            date=day.isoformat(),
            label=short_date_label(day),
            total_office_hours=None,
            break_minutes=None,
            departure_minutes=None,
            is_forecast=False,
        )

    clock_out = latest_clock_out(entry)
    return ForecastPoint(
        date=day.isoformat(),
        label=short_date_label(day),
        total_office_hours=round_half_up(work_minutes(entry) / 60, 2),
        break_minutes=total_break_minutes(entry.sessions),
        departure_minutes=time_to_minutes(clock_out) if clock_out else None,
        is_forecast=False,
    )


def _forecast_point(
    day: date,
    offset: int,
    sample: Sequence[TimeEntry],
    *,
    all_office: Sequence[float],
    all_break: Sequence[int],
    all_departure: Sequence[int],
) -> ForecastPoint:
    if not sample:
        return ForecastPoint(
            date=day.isoformat(),
            label=short_date_label(day),
            total_office_hours=DEFAULT_WORK_HOURS,
            break_minutes=DEFAULT_BREAK_MINUTES,
            departure_minutes=DEFAULT_DEPARTURE_MINUTES,
            is_forecast=True,
            variance_office=0,
            variance_break=0,
            variance_departure=0,
        )

    departures = _departures(sample)
    pred_office = ewma([work_minutes(e) for e in sample], EWMA_ALPHA) / 60
    pred_break = ewma([total_break_minutes(e.sessions) for e in sample], EWMA_ALPHA)
    pred_departure = ewma(departures, EWMA_ALPHA) if departures else DEFAULT_DEPARTURE_MINUTES

    # Uncertainty widens linearly with the horizon; offset 0 is today.
    scale = 1 + offset * VARIANCE_GROWTH_PER_DAY
    spread_office = math.sqrt(variance(all_office, pred_office)) * scale
    spread_break = math.sqrt(variance(all_break, pred_break)) * scale
    spread_departure = math.sqrt(variance(all_departure, pred_departure)) * scale

    return ForecastPoint(
        date=day.isoformat(),
        label=short_date_label(day),
        total_office_hours=round_half_up(pred_office, 1),
        break_minutes=round_half_up(pred_break),
        departure_minutes=round_half_up(pred_departure),
        is_forecast=True,
        variance_office=round_half_up(spread_office, 1),
        variance_break=round_half_up(spread_break),
        variance_departure=round_half_up(spread_departure),
    )


def get_forecast_time_series(
    entries: Iterable[TimeEntry],
    future_days: int = DEFAULT_FUTURE_DAYS,
    *,
    now: datetime | date | None = None,
    strategy: SampleStrategy | None = None,
) -> list[ForecastPoint]:
    """Thirty days of history followed by today plus ``future_days`` forecasts.

    Today never counts as history. Variance bands are measured against the
    spread of the whole history, not only the same-weekday sample.
    """
    if future_days < 0:
        raise ValidationError("future_days must be >= 0")

    now = now or now_local()
    today = now.date() if isinstance(now, datetime) else now
    strategy = strategy or SameWeekdayStrategy()
    historical = [e for e in build_corpus(entries) if e.work_date < today]

    points: list[ForecastPoint] = []
    for back in range(HISTORY_DAYS, 0, -1):
        day = today - timedelta(days=back)
        points.append(_history_point(day, find_entry(historical, day)))

    all_office = [work_minutes(e) / 60 for e in historical]
    all_break = [total_break_minutes(e.sessions) for e in historical]
    all_departure = _departures(historical)

    for offset in range(future_days + 1):
        day = today + timedelta(days=offset)
        points.append(
            _forecast_point(
                day,
                offset,
                strategy.select(historical, day),
                all_office=all_office,
                all_break=all_break,
                all_departure=all_departure,
            )
        )

    log.debug(
        "forecast series for %s: %d historical entries, %d future days",
        today.isoformat(),
        len(historical),
        future_days,
    )
    return points
