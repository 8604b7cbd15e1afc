from __future__ import annotations

import math
from typing import Sequence


def ewma(values: Sequence[float], alpha: float) -> float:
    """Exponentially weighted moving average, seeded with the oldest value.

    ``values`` must be ordered oldest to newest; later values weigh more.
    """
    if not values:
        return 0
    estimate = values[0]
    for value in values[1:]:
        estimate = alpha * value + (1 - alpha) * estimate
    return estimate


def variance(values: Sequence[float], mean: float) -> float:
    """Sample variance around ``mean`` (n - 1 denominator); 0 below two values."""
    if len(values) < 2:
        return 0
    return sum((v - mean) ** 2 for v in values) / (len(values) - 1)


def round_half_up(value: float, digits: int = 0):
    """Round with halves going up, e.g. 2.5 -> 3 (``round`` would give 2)."""
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5)
    if digits == 0:
        return int(rounded)
    return rounded / factor
