import pytest

from oxidris.stats.comprehensive import ComprehensiveStats


def test_doc_example_mean_and_median_percentile():
    values = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    stats = ComprehensiveStats.from_values(values, [25.0, 50.0, 75.0], 5)
    assert stats.stats.mean == 5.5
    assert stats.get_percentile(50.0) == 6.0


def test_get_percentile_only_precomputed():
    stats = ComprehensiveStats.from_values([1.0, 2.0, 3.0, 4.0, 5.0], [50.0, 95.0], 5)
    assert stats.get_percentile(50.0) == 3.0
    assert stats.get_percentile(95.0) == 5.0
    assert stats.get_percentile(25.0) is None


def test_from_sorted_min_max():
    values = sorted([5.0, 2.0, 8.0, 1.0, 9.0])
    stats = ComprehensiveStats.from_sorted(values, [25.0, 50.0, 75.0], 5)
    assert stats.stats.min == 1.0
    assert stats.stats.max == 9.0


def test_unsorted_input_sorted_internally():
    values = [5.0, 2.0, 8.0, 1.0, 9.0, 3.0]
    stats = ComprehensiveStats.from_values(values, [50.0, 95.0], 10)
    assert stats.stats.min <= stats.stats.max
    assert stats == ComprehensiveStats.from_sorted(sorted(values), [50.0, 95.0], 10)


def test_empty_dataset_gives_none():
    assert ComprehensiveStats.from_values([], [50.0], 5) is None


def test_from_sorted_rejects_unsorted():
    with pytest.raises(ValueError):
        ComprehensiveStats.from_sorted([3.0, 1.0], [50.0], 5)


def test_histogram_counts_every_value():
    values = [float(v) for v in range(30)]
    stats = ComprehensiveStats.from_values(values, [50.0], 6)
    assert sum(b.count for b in stats.histogram.bins) == len(values)


def test_percentiles_kept_in_request_order():
    values = [4.0, 1.0, 3.0, 2.0]
    stats = ComprehensiveStats.from_values(values, [75.0, 25.0], 3)
    assert [p for p, _ in stats.percentiles] == [75.0, 25.0]
    assert stats.get_percentile(75.0) >= stats.get_percentile(25.0)


def test_histogram_options_passed_through():
    values = [10.0, 12.0, 15.0, 20.0]
    stats = ComprehensiveStats.from_values(
        values, [50.0], 3, hist_min=10.0, hist_max=20.0
    )
    assert stats.histogram.bins[0].start == 10.0
    assert stats.histogram.bins[-1].contains(20.0)
    with pytest.raises(ValueError):
        ComprehensiveStats.from_values([5.0], [50.0], 3, hist_min=10.0, hist_max=20.0)