from src.timetrack.timetrack.entries.durations import (
    day_bounds,
    duration_label,
    earliest_clock_in,
    latest_clock_out,
    office_duration_label,
    total_break_minutes,
    work_minutes,
)


def test_work_minutes_single_session(make_entry):
    assert work_minutes(make_entry("2026-02-02", ("09:00", "17:00"))) == 480


def test_work_minutes_wraps_past_midnight(make_entry):
    assert work_minutes(make_entry("2026-02-02", ("23:00", "01:00"))) == 120


def test_work_minutes_sums_sessions_and_skips_open_ones(make_entry):
    entry = make_entry("2026-02-02", ("08:00", "12:00"), ("13:00", "17:30"), ("18:00", None))
    assert work_minutes(entry) == 240 + 270


def test_break_minutes_needs_both_ends(make_entry):
    entry = make_entry(
        "2026-02-02",
        ("08:00", "12:00", "10:00", "10:15"),
        ("13:00", "17:00", "15:00", None),
        ("20:00", "01:00", "23:50", "00:10"),
    )
    assert total_break_minutes(entry.sessions) == 15 + 20


def test_bounds_use_earliest_in_and_latest_out(make_entry):
    entry = make_entry("2026-02-02", ("13:00", "18:45"), ("07:55", "12:00"))

    assert earliest_clock_in(entry) == "07:55"
    assert latest_clock_out(entry) == "18:45"
    assert day_bounds(entry.sessions) == ("07:55", "18:45")


def test_bounds_are_none_without_data(make_entry):
    entry = make_entry("2026-02-02", ("09:00", None))

    assert latest_clock_out(entry) is None
    assert day_bounds(()) == (None, None)


def test_labels(make_entry):
    entry = make_entry("2026-02-02", ("09:00", "12:30"), ("13:00", "17:45"))

    assert office_duration_label(entry.sessions) == "8h 15m"
    assert office_duration_label(make_entry("2026-02-02", ("09:00", None)).sessions) == "--:--"
    assert duration_label("22:30", "00:15") == "1h 45m"
    assert duration_label("09:00", None) == "--:--"
