"""Histograms with percentile-based (P5-P95) main bins and tail bins."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .percentiles import FLOAT_EPSILON, compute_percentile


def _check_sorted(values: Sequence[float]) -> None:
    if any(b < a for a, b in zip(values, values[1:])):
        raise ValueError("values must be sorted in ascending order")


def _next_up(value: float) -> float:
    return math.nextafter(value, math.inf)


@dataclass
class HistogramBin:
    """A half-open value range ``[start, end)`` and the number of values in it."""

    start: float
    end: float
    count: int = 0

    def contains(self, value: float) -> bool:
        """True when ``start <= value < end``."""
        return self.start <= value < self.end


@dataclass
class Histogram:
    """Frequency distribution of a dataset.

    The main bins span the P5-P95 range (or explicit bounds); values outside
    it land in an extra underflow bin at the start or overflow bin at the end.
    """

    bins: list[HistogramBin] = field(default_factory=list)

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        num_bins: int,
        explicit_min: float | None = None,
        explicit_max: float | None = None,
        bin_width_unit: float | None = None,
    ) -> Histogram:
        """Histogram of unsorted values."""
        return cls.from_sorted(
            sorted(values), num_bins, explicit_min, explicit_max, bin_width_unit
        )

    @classmethod
    def from_sorted(
        cls,
        sorted_values: Sequence[float],
        num_bins: int,
        explicit_min: float | None = None,
        explicit_max: float | None = None,
        bin_width_unit: float | None = None,
    ) -> Histogram:
        """Histogram of values sorted ascending.

        Raises ``ValueError`` if the values are not sorted, if the arguments
        are invalid, or if a value falls outside explicit bounds.
        """
        data = list(sorted_values)
        _check_sorted(data)
        if num_bins < 0:
            raise ValueError(f"num_bins must not be negative, got {num_bins}")
        if bin_width_unit is not None and not bin_width_unit > 0:
            raise ValueError(f"bin_width_unit must be positive, got {bin_width_unit}")
        if not data or num_bins == 0:
            return cls([])

        hard_min = explicit_min if explicit_min is not None else min(data)
        hard_max = explicit_max if explicit_max is not None else max(data)

        if num_bins == 1:
            histogram = cls([HistogramBin(hard_min, _next_up(hard_max))])
            only = histogram.bins[0]
            for value in data:
                if not only.contains(value):
                    raise ValueError(
                        f"value {value} not in bin range [{only.start}, {only.end})"
                    )
                only.count += 1
            return histogram

        soft_min = (
            explicit_min if explicit_min is not None else compute_percentile(data, 5.0)
        )
        soft_max = (
            explicit_max if explicit_max is not None else compute_percentile(data, 95.0)
        )

        gaps = num_bins - 1
        value_range = soft_max - soft_min
        if value_range < FLOAT_EPSILON:
            # All values sit at (nearly) one point: fall back to a unit range.
            value_range = bin_width_unit if bin_width_unit is not None else 1.0

        bin_width = value_range / gaps
        if bin_width_unit is not None:
            bin_width = math.ceil(bin_width / bin_width_unit) * bin_width_unit
            value_range = bin_width * gaps

        soft_max = soft_min + bin_width * gaps
        hard_max = max(hard_max, soft_max)

        # The first bin is centred on soft_min.
        first_bin_start = soft_min - 0.5 * bin_width
        last_bin_end = first_bin_start + bin_width * num_bins

        has_underflow = hard_min < first_bin_start
        has_overflow = hard_max >= last_bin_end

        bins: list[HistogramBin] = []
        if has_underflow:
            bins.append(HistogramBin(hard_min, first_bin_start))
        for bin_idx in range(num_bins):
            bin_start = max(first_bin_start + bin_idx * value_range / gaps, hard_min)
            bin_end = min(first_bin_start + (bin_idx + 1) * value_range / gaps, hard_max)
            if not has_overflow and bin_idx == num_bins - 1:
                bin_end = _next_up(bin_end)
            bins.append(HistogramBin(bin_start, bin_end))
        if has_overflow:
            bins.append(HistogramBin(last_bin_end, _next_up(hard_max)))

        offset = 1 if has_underflow else 0
        for value in data:
            position = (value - first_bin_start) / bin_width
            if position < 0.0:
                if not has_underflow:
                    raise ValueError(f"value {value} is below the histogram range")
                idx = 0
            elif position >= num_bins:
                if not has_overflow:
                    raise ValueError(f"value {value} is above the histogram range")
                idx = num_bins + offset
            else:
                idx = math.floor(position) + offset
            target = bins[idx]
            if not target.contains(value):
                raise ValueError(
                    f"value {value} not in bin range [{target.start}, {target.end})"
                )
            target.count += 1

        return cls(bins)