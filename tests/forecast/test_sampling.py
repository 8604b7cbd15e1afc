from datetime import date

from src.timetrack.timetrack.forecast.sampling import AllHistoryStrategy, SameWeekdayStrategy


def test_same_weekday_used_when_enough_samples(make_entry):
    thursdays = [make_entry(d, ("08:00", "18:00")) for d in ("2026-01-15", "2026-01-22", "2026-01-29")]
    corpus = [make_entry("2026-01-26", ("09:00", "17:00"))] + thursdays

    sample = SameWeekdayStrategy().select(corpus, date(2026, 2, 5))

    assert sample == thursdays


def test_falls_back_to_all_history(make_entry):
    corpus = [make_entry("2026-01-26", ("09:00", "17:00")), make_entry("2026-01-29", ("09:00", "19:00"))]

    assert SameWeekdayStrategy().select(corpus, date(2026, 2, 5)) == corpus
    assert AllHistoryStrategy().select(corpus, date(2026, 2, 5)) == corpus
