from __future__ import annotations

import pytest

from src.timetrack.timetrack.core.exceptions import ValidationError
from src.timetrack.timetrack.forecast.series import get_forecast_time_series


def test_series_shape(fixed_now):
    points = get_forecast_time_series([], 7, now=fixed_now)

    assert len(points) == 38
    assert [p.is_forecast for p in points] == [False] * 30 + [True] * 8
    assert points[0].date == "2026-01-05"
    assert points[29].date == "2026-02-03"
    assert points[30].date == "2026-02-04"
    assert points[30].label == "Feb 4"
    assert points[-1].date == "2026-02-11"


def test_empty_history_uses_defaults(fixed_now):
    points = get_forecast_time_series([], now=fixed_now)

    for p in points[:30]:
        assert (p.total_office_hours, p.break_minutes, p.departure_minutes) == (None, None, None)
    for p in points[30:]:
        assert (p.total_office_hours, p.break_minutes, p.departure_minutes) == (8, 45, 1050)
        assert (p.variance_office, p.variance_break, p.variance_departure) == (0, 0, 0)


def test_historical_point_reports_actuals(fixed_now, make_entry):
    entries = [make_entry("2026-02-02", ("09:00", "17:20", "12:00", "12:45"))]

    point = get_forecast_time_series(entries, now=fixed_now)[28]

    assert point.date == "2026-02-02"
    assert point.is_forecast is False
    assert point.total_office_hours == 8.33
    assert point.break_minutes == 45
    assert point.departure_minutes == 17 * 60 + 20
    assert "varianceOffice" not in point.to_dict()


def test_today_is_not_history(fixed_now, make_entry):
    entries = [make_entry("2026-02-04", ("06:00", "20:00"))]

    today = get_forecast_time_series(entries, now=fixed_now)[30]

    assert today.is_forecast is True
    assert today.total_office_hours == 8
    assert today.departure_minutes == 1050


def test_constant_monday_history_forecasts_that_constant(fixed_now, make_entry):
    mondays = ["2026-01-05", "2026-01-12", "2026-01-19", "2026-01-26", "2026-02-02"]
    entries = [make_entry(d, ("08:00", "16:30")) for d in mondays]

    monday = get_forecast_time_series(entries, now=fixed_now)[35]

    assert monday.date == "2026-02-09"
    assert monday.total_office_hours == 8.5
    assert monday.departure_minutes == 990
    assert monday.variance_office == 0
    assert monday.variance_departure == 0


def test_variance_band_widens_with_horizon(fixed_now, make_entry):
    entries = [
        make_entry("2026-01-26", ("09:00", "17:00")),
        make_entry("2026-01-27", ("09:00", "19:00")),
    ]

    points = get_forecast_time_series(entries, now=fixed_now)
    today, next_day, last = points[30], points[31], points[37]

    assert today.total_office_hours == 8.7
    assert today.break_minutes == 0
    assert today.departure_minutes == 1062
    assert today.variance_office == 1.5
    assert today.variance_break == 0
    assert today.variance_departure == 89
    assert next_day.variance_office == 1.7
    assert next_day.variance_departure == 102
    assert last.variance_office == 3.0


def test_future_days_controls_length(fixed_now):
    assert len(get_forecast_time_series([], 0, now=fixed_now)) == 31
    assert len(get_forecast_time_series([], 14, now=fixed_now)) == 45


def test_negative_horizon_rejected(fixed_now):
    with pytest.raises(ValidationError):
        get_forecast_time_series([], -1, now=fixed_now)


def test_open_session_has_no_departure(fixed_now, make_entry):
    entries = [make_entry("2026-02-02", ("09:00", None))]

    points = get_forecast_time_series(entries, now=fixed_now)
    history, today = points[28], points[30]

    assert history.date == "2026-02-02"
    assert history.departure_minutes is None
    assert history.total_office_hours == 0
    assert today.departure_minutes == 1050
    assert today.variance_departure == 0
