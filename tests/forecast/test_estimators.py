import pytest

from src.timetrack.timetrack.forecast.estimators import ewma, round_half_up, variance


def test_ewma_edge_cases():
    assert ewma([], 0.35) == 0
    assert ewma([42.0], 0.35) == 42.0


def test_ewma_two_values_weights_newest():
    assert ewma([100, 200], 0.35) == pytest.approx(0.35 * 200 + 0.65 * 100)


def test_ewma_constant_series_is_constant():
    assert ewma([480] * 6, 0.35) == pytest.approx(480)


def test_variance_needs_two_values():
    assert variance([], 5) == 0
    assert variance([3], 5) == 0


def test_variance_uses_sample_denominator_around_given_mean():
    assert variance([8, 10], 8.7) == pytest.approx(0.49 + 1.69)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(8.0833, 1) == 8.1
    assert isinstance(round_half_up(44.6), int)
