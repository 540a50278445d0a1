"""Descriptive statistics, percentiles and a histogram of one dataset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .descriptive import DescriptiveStats
from .histogram import Histogram
from .percentiles import Percentiles


@dataclass(frozen=True)
class ComprehensiveStats:
    """Combined statistical overview of a dataset."""

    stats: DescriptiveStats
    percentiles: Percentiles
    histogram: Histogram

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        percentile_points: Iterable[float],
        hist_num_bins: int,
        hist_min: float | None = None,
        hist_max: float | None = None,
        hist_bin_width_unit: float | None = None,
    ) -> ComprehensiveStats | None:
        """Statistics of unsorted values; ``None`` for an empty dataset."""
        return cls.from_sorted(
            sorted(values),
            percentile_points,
            hist_num_bins,
            hist_min,
            hist_max,
            hist_bin_width_unit,
        )

    @classmethod
    def from_sorted(
        cls,
        sorted_values: Sequence[float],
        percentile_points: Iterable[float],
        hist_num_bins: int,
        hist_min: float | None = None,
        hist_max: float | None = None,
        hist_bin_width_unit: float | None = None,
    ) -> ComprehensiveStats | None:
        """Statistics of values sorted ascending; ``None`` for an empty dataset.

        Raises ``ValueError`` if the values are not sorted.
        """
        data = list(sorted_values)
        stats = DescriptiveStats.from_sorted(data)
        if stats is None:
            return None
        percentiles = Percentiles.from_sorted(data, percentile_points)
        histogram = Histogram.from_sorted(
            data, hist_num_bins, hist_min, hist_max, hist_bin_width_unit
        )
        return cls(stats, percentiles, histogram)

    def get_percentile(self, percentile: float) -> float | None:
        """The value at a precomputed percentile, or ``None``."""
        return self.percentiles.get(percentile)