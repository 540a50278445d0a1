"""Nearest-rank percentiles of a dataset."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

FLOAT_EPSILON = 1.1920929e-07


def _check_sorted(values: Sequence[float]) -> None:
    if any(b < a for a, b in zip(values, values[1:])):
        raise ValueError("values must be sorted in ascending order")


def compute_percentile(sorted_values: Sequence[float], percentile: float) -> float:
    """The value at index ``floor(n * percentile / 100)``, clamped to the data.

    Returns NaN for empty input.
    """
    if not sorted_values:
        return math.nan
    position = len(sorted_values) * percentile / 100.0
    idx = int(position) if position > 0 and not math.isnan(position) else 0
    return sorted_values[min(idx, len(sorted_values) - 1)]


@dataclass(frozen=True)
class Percentiles:
    """Precomputed ``(percentile, value)`` pairs in the order requested."""

    values: tuple[tuple[float, float], ...]

    @classmethod
    def from_sorted(
        cls, sorted_values: Sequence[float], percentile_points: Iterable[float]
    ) -> Percentiles:
        """Percentiles of values sorted ascending; raises ``ValueError`` if unsorted."""
        data = list(sorted_values)
        _check_sorted(data)
        return cls(tuple((p, compute_percentile(data, p)) for p in percentile_points))

    @classmethod
    def from_values(
        cls, values: Iterable[float], percentile_points: Iterable[float]
    ) -> Percentiles:
        """Percentiles of unsorted values."""
        return cls.from_sorted(sorted(values), percentile_points)

    def get(self, percentile: float) -> float | None:
        """The value at a precomputed percentile, or ``None``."""
        for point, value in self.values:
            if abs(point - percentile) < FLOAT_EPSILON:
                return value
        return None

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self.values)

    def as_list(self) -> list[tuple[float, float]]:
        """All ``(percentile, value)`` pairs."""
        return list(self.values)