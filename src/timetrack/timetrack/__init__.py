"""TimeTrack forecasting package.

Organized by feature modules (entries, forecast, reports) with a thin Flask
controller layer over pure services. The forecast engine itself lives in
``forecast.predictor`` and ``forecast.series`` and has no I/O.
"""
from __future__ import annotations

from .entries.model import TimeEntry, WorkSession
from .entries.parser import entries_from_payload
from .forecast.model import DayPrediction, ForecastPoint
from .forecast.predictor import get_predictions
from .forecast.series import get_forecast_time_series

__all__ = [
    "DayPrediction",
    "ForecastPoint",
    "TimeEntry",
    "WorkSession",
    "entries_from_payload",
    "get_forecast_time_series",
    "get_predictions",
]
