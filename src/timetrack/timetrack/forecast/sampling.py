from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from ..core.constants import MIN_SAME_WEEKDAY_SAMPLES
from ..entries.model import TimeEntry


class SampleStrategy(ABC):
    """Strategy Pattern: decide which history an estimate for ``target`` is built from."""

    @abstractmethod
    def select(self, corpus: Sequence[TimeEntry], target: date) -> list[TimeEntry]:
        raise NotImplementedError


class AllHistoryStrategy(SampleStrategy):
    """Use every entry in the corpus."""

    def select(self, corpus: Sequence[TimeEntry], target: date) -> list[TimeEntry]:
        return list(corpus)


class SameWeekdayStrategy(SampleStrategy):
    """Prefer entries on the target's weekday; fall back when there are too few.

    Corpus order (oldest first) is preserved in the returned sample.
    """

    def __init__(
        self,
        *,
        min_samples: int = MIN_SAME_WEEKDAY_SAMPLES,
        fallback: SampleStrategy | None = None,
    ):
        self._min_samples = int(min_samples)
        self._fallback = fallback or AllHistoryStrategy()

    def select(self, corpus: Sequence[TimeEntry], target: date) -> list[TimeEntry]:
        weekday = target.weekday()
        same_day = [e for e in corpus if e.work_date.weekday() == weekday]
        if len(same_day) >= self._min_samples:
            return same_day
        return self._fallback.select(corpus, target)
