from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from .core.constants import DEFAULT_FUTURE_DAYS, EXPORT_PREFIX, MAX_FUTURE_DAYS
from .forecast.sampling import SameWeekdayStrategy
from .forecast.service import ForecastService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    forecast_service: ForecastService
    report_service: ReportService


def build_container(*, settings: ModuleType | object) -> Container:
    forecast_service = ForecastService(
        strategy=SameWeekdayStrategy(),
        default_future_days=int(getattr(settings, "FORECAST_FUTURE_DAYS", DEFAULT_FUTURE_DAYS)),
        max_future_days=int(getattr(settings, "FORECAST_MAX_FUTURE_DAYS", MAX_FUTURE_DAYS)),
    )
    report_service = ReportService(export_prefix=str(getattr(settings, "EXPORT_PREFIX", EXPORT_PREFIX)))

    return Container(
        forecast_service=forecast_service,
        report_service=report_service,
    )
