"""Interval normalization and lookup."""

from __future__ import annotations

import pytest

from silencespeedup.intervals.margin import ConstantMargin, ProportionalMargin
from silencespeedup.intervals.store import IntervalStore, lookup, normalize, parse_pairs
from silencespeedup.models.interval import SilenceInterval


def test_margins_shrink_interval():
    (interval,) = normalize([{"start": 10, "end": 20}], 1.0, 8.0)
    assert interval.start == pytest.approx(10.08)
    assert interval.end == pytest.approx(20 - 0.96)
    assert 10 < interval.start < interval.end < 20


def test_t_start_t_end_keys_accepted():
    (interval,) = normalize([{"t_start": "10", "t_end": "20"}], 1.0, 8.0)
    assert interval.start == pytest.approx(10.08)


def test_parallel_arrays_match_pairs():
    pairs = normalize([(1, 5), (8, 12)], 1.0, 2.0)
    parallel = normalize({"start": [1, 8], "end": [5, 12]}, 1.0, 2.0)
    assert pairs == parallel


def test_short_intervals_discarded():
    # 0.5s of silence cannot absorb 0.08 + 0.96 seconds of margin
    intervals = normalize([(10, 10.5), (30, 40)], 1.0, 8.0)
    assert len(intervals) == 1
    assert intervals[0].start == pytest.approx(30.08)


def test_inverted_pair_discarded():
    assert normalize([(20, 10)], 1.0, 1.0) == ()


def test_sorted_by_start():
    intervals = normalize([(50, 60), (5, 9), (20, 30)], 1.0, 1.0)
    starts = [i.start for i in intervals]
    assert starts == sorted(starts)


@pytest.mark.parametrize("raw", [
    "not a list",
    42,
    [{"start": 1}],
    [{"start": "abc", "end": 2}],
    [(1, float("nan"))],
    [(1, 2, 3)],
    {"start": [1, 2], "end": [3]},
    {"start": 1, "end": 2},
    {"foo": [1]},
])
def test_malformed_input_yields_empty(raw):
    assert normalize(raw, 1.0, 8.0) == ()


def test_none_is_empty():
    assert normalize(None, 1.0, 8.0) == ()


def test_malformed_pair_rejects_whole_input():
    assert normalize([(1, 5), ("x", 9)], 1.0, 1.0) == ()


def test_parse_pairs_mismatch_raises_value_error():
    with pytest.raises(ValueError):
        parse_pairs({"starts": [1, 2], "ends": [3]})


def test_constant_margin():
    margin = ConstantMargin.ticks(4, 0.25)
    (interval,) = normalize([(10, 20)], 5.0, 20.0, margin=margin)
    assert interval == SilenceInterval(start=11.0, end=19.0)


def test_proportional_margin_factors():
    margin = ProportionalMargin(start_factor=0.0, end_factor=0.0)
    (interval,) = normalize([(10, 20)], 3.0, 3.0, margin=margin)
    assert (interval.start, interval.end) == (10.0, 20.0)


def test_lookup_inside_and_outside():
    intervals = normalize([(10, 20), (40, 50)], 1.0, 1.0, margin=ConstantMargin())
    assert lookup(intervals, 15) == intervals[0]
    assert lookup(intervals, 40) == intervals[1]
    assert lookup(intervals, 50) == intervals[1]
    assert lookup(intervals, 25) is None
    assert lookup(intervals, 60) is None
    assert lookup((), 15) is None


def test_lookup_non_finite_time():
    intervals = normalize([(10, 20)], 1.0, 1.0)
    assert lookup(intervals, float("nan")) is None
    assert lookup(intervals, float("inf")) is None


def test_store_replaced_wholesale(store):
    before = store.intervals
    store.rebuild([(70, 80)], 1.0, 1.0)
    assert len(before) == 2
    assert len(store) == 1
    assert store.intervals is not before


def test_store_total_silence():
    s = IntervalStore(ConstantMargin())
    s.rebuild([(0, 5), (10, 12.5)], 1.0, 1.0)
    assert s.total_silence == pytest.approx(7.5)
    assert list(s) == list(s.intervals)
