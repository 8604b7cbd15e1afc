from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..common.serializers import camel_keys


@dataclass(frozen=True)
class DayPrediction:
    """Kết quả cho một ngày tương đối: số liệu thực tế HOẶC số liệu dự đoán."""

    label: str
    date: str
    predicted_work_hours: Optional[float]
    predicted_break_minutes: Optional[int]
    predicted_departure: Optional[str]
    actual_work_hours: Optional[float]
    actual_break_minutes: Optional[int]
    actual_departure: Optional[str]
    is_actual: bool

    def to_dict(self) -> dict:
        return camel_keys(asdict(self))


@dataclass(frozen=True)
class ForecastPoint:
    """Một điểm trên biểu đồ dự báo (lịch sử hoặc dự báo kèm biên độ)."""

    date: str
    label: str
    total_office_hours: Optional[float]
    break_minutes: Optional[int]
    departure_minutes: Optional[int]
    is_forecast: bool
    variance_office: Optional[float] = None
    variance_break: Optional[int] = None
    variance_departure: Optional[int] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        if not self.is_forecast:
            for key in ("variance_office", "variance_break", "variance_departure"):
                data.pop(key)
        return camel_keys(data)
