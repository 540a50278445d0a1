import math

import pytest

from oxidris.stats.percentiles import Percentiles, compute_percentile

TEN = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
FIVE = [1.0, 2.0, 3.0, 4.0, 5.0]


def test_documented_ten_values():
    percentiles = Percentiles.from_values(TEN, [25.0, 50.0, 75.0])
    assert percentiles.get(50.0) == 6.0
    assert percentiles.get(25.0) == 3.0


def test_documented_unsorted_values():
    percentiles = Percentiles.from_values([5.0, 2.0, 8.0, 1.0, 9.0], [25.0, 50.0, 75.0])
    assert percentiles.get(50.0) == 5.0


def test_documented_missing_percentile():
    percentiles = Percentiles.from_values(FIVE, [50.0, 95.0])
    assert percentiles.get(50.0) == 3.0
    assert percentiles.get(95.0) == 5.0
    assert percentiles.get(25.0) is None


def test_as_list():
    assert Percentiles.from_values(FIVE, [50.0]).as_list() == [(50.0, 3.0)]


def test_iteration_keeps_requested_order():
    points = [75.0, 25.0, 50.0]
    percentiles = Percentiles.from_values(FIVE, points)
    assert [p for p, _ in percentiles] == points
    assert list(percentiles) == percentiles.as_list()


def test_from_sorted_rejects_unsorted():
    with pytest.raises(ValueError):
        Percentiles.from_sorted([2.0, 1.0], [50.0])


def test_compute_percentile_documented():
    assert compute_percentile(FIVE, 50.0) == 3.0
    assert compute_percentile(FIVE, 25.0) == 2.0


def test_compute_percentile_bounds():
    assert compute_percentile(FIVE, 100.0) == FIVE[-1]
    assert compute_percentile(FIVE, 0.0) == FIVE[0]
    assert compute_percentile(FIVE, -10.0) == FIVE[0]


def test_compute_percentile_empty_is_nan():
    result = compute_percentile([], 50.0)
    assert math.isnan(result) is True
    assert repr(float(result)) == "nan"


def test_percentiles_are_monotonic():
    points = [0.0, 10.0, 33.0, 50.0, 90.0, 100.0]
    values = [p for _, p in Percentiles.from_values([9.0, -1.0, 4.0, 4.0, 7.0, 0.5], points)]
    assert values == sorted(values)