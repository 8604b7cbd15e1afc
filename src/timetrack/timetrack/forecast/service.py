from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_int_range
from ..core.constants import DEFAULT_FUTURE_DAYS, MAX_FUTURE_DAYS
from ..entries.parser import entries_from_payload
from .model import DayPrediction, ForecastPoint
from .predictor import get_predictions
from .sampling import SameWeekdayStrategy, SampleStrategy
from .series import get_forecast_time_series

log = logging.getLogger(__name__)


class ForecastService:
    def __init__(
        self,
        *,
        strategy: SampleStrategy | None = None,
        default_future_days: int = DEFAULT_FUTURE_DAYS,
        max_future_days: int = MAX_FUTURE_DAYS,
    ):
        self._strategy = strategy or SameWeekdayStrategy()
        self._default_future_days = int(default_future_days)
        self._max_future_days = int(max_future_days)

    def predictions(
        self,
        payload: Optional[Sequence[Mapping[str, Any]]],
        *,
        now: datetime | None = None,
    ) -> list[DayPrediction]:
        entries = entries_from_payload(payload)
        result = get_predictions(entries, now=now, strategy=self._strategy)
        log.info("predictions computed from %d entries", len(entries))
        return result

    def forecast(
        self,
        payload: Optional[Sequence[Mapping[str, Any]]],
        *,
        future_days: Any = None,
        now: datetime | None = None,
    ) -> list[ForecastPoint]:
        if future_days is None:
            days = self._default_future_days
        else:
            days = require_int_range(future_days, "future_days", minimum=0, maximum=self._max_future_days)

        entries = entries_from_payload(payload)
        result = get_forecast_time_series(entries, days, now=now, strategy=self._strategy)
        log.info("forecast series computed from %d entries (%d future days)", len(entries), days)
        return result
