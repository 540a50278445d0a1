"""Descriptive statistics of a dataset."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

FLOAT_EPSILON = 1.1920929e-07


def _check_sorted(values: Sequence[float]) -> None:
    if any(b < a for a, b in zip(values, values[1:])):
        raise ValueError("values must be sorted in ascending order")


@dataclass(frozen=True)
class DescriptiveStats:
    """Central tendency and spread of a dataset."""

    min: float
    max: float
    mean: float
    median: float
    variance: float
    std_dev: float
    normalized_std_dev: float

    @classmethod
    def from_values(cls, values: Iterable[float]) -> DescriptiveStats | None:
        """Statistics of unsorted values; ``None`` for an empty dataset."""
        return cls.from_sorted(sorted(values))

    @classmethod
    def from_sorted(cls, sorted_values: Sequence[float]) -> DescriptiveStats | None:
        """Statistics of values sorted ascending; ``None`` for an empty dataset.

        Raises ``ValueError`` if the values are not sorted.
        """
        values = list(sorted_values)
        _check_sorted(values)
        if not values:
            return None
        lo, hi = values[0], values[-1]
        n = len(values)
        mean = sum(values) / n
        median = values[n // 2]
        variance = sum((v - mean) ** 2 for v in values) / n
        std_dev = math.sqrt(variance)
        spread = hi - lo
        if abs(spread) < abs(mean) * FLOAT_EPSILON:
            normalized = 0.0
        elif spread == 0:
            normalized = math.nan
        else:
            normalized = std_dev / spread
        return cls(lo, hi, mean, median, variance, std_dev, normalized)