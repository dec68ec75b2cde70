"""Strength and spread of collocates (Smadja, Step 1.3)."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ._errors import DegenerateStatisticsError
from ._types import N_SLOTS

if TYPE_CHECKING:
    from ._table import BigramTable
    from ._types import CollocateRecord


def spread(record: CollocateRecord) -> float:
    """Population variance of the ten slot counts around ``frequency // 10``.

    Zero iff every slot holds the same count.
    """
    mean = record.frequency // N_SLOTS
    u = 0.0
    for p in record.histogram:
        d = p - mean
        u += d * d
    return u / N_SLOTS


class StatisticsEngine:
    """Frequency statistics over all collocates of one anchor."""

    __slots__ = ("_table", "_mean", "_sigma")

    def __init__(self, table: BigramTable) -> None:
        self._table = table
        self._mean: float | None = None
        self._sigma: float | None = None

    def mean_frequency(self) -> float:
        """Average collocate frequency (f-bar)."""
        if self._mean is None:
            n = len(self._table)
            if n == 0:
                raise DegenerateStatisticsError(
                    f"no collocates for {self._table.anchor!r}"
                )
            self._mean = self._table.total_occurrences / n
        return self._mean

    def std_dev_frequency(self) -> float:
        """Sample standard deviation (n - 1) of collocate frequencies."""
        if self._sigma is None:
            n = len(self._table)
            if n < 2:
                raise DegenerateStatisticsError(
                    f"need at least 2 collocates for {self._table.anchor!r}, got {n}"
                )
            fbar = self.mean_frequency()
            total = 0.0
            for record in self._table.records():
                x = record.frequency - fbar
                total += x * x
            self._sigma = math.sqrt(total / (n - 1))
        return self._sigma

    def strength(self, record: CollocateRecord) -> float:
        """z-score of the record's frequency against all collocates."""
        sigma = self.std_dev_frequency()
        if sigma == 0.0:
            raise DegenerateStatisticsError(
                f"all collocates of {self._table.anchor!r} are equally frequent"
            )
        return (record.frequency - self.mean_frequency()) / sigma

    def spread(self, record: CollocateRecord) -> float:
        return spread(record)
