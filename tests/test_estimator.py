"""Remaining-time estimation and formatting."""

from __future__ import annotations

import pytest

from silencespeedup.estimate.remaining import breakdown, estimate_remaining, format_hms
from silencespeedup.models.interval import SilenceInterval


def test_mixed_rate_estimate():
    intervals = [SilenceInterval(start=60, end=70)]
    remaining = breakdown(intervals, 50, 100, 1.0, 8.0)
    assert remaining.silence_seconds == pytest.approx(10)
    assert remaining.spoken_seconds == pytest.approx(40)
    assert remaining.real_seconds == pytest.approx(41.25)
    assert format_hms(remaining.real_seconds) == "0:00:41"


def test_past_silences_ignored():
    intervals = [SilenceInterval(start=10, end=20), SilenceInterval(start=60, end=70)]
    assert estimate_remaining(intervals, 50, 100, 1.0, 8.0) == pytest.approx(41.25)


def test_current_silence_counts_in_full():
    intervals = [SilenceInterval(start=40, end=60)]
    remaining = breakdown(intervals, 50, 100, 1.0, 2.0)
    assert remaining.silence_seconds == pytest.approx(20)
    assert remaining.spoken_seconds == pytest.approx(30)


def test_spoken_clamped_to_zero():
    intervals = [SilenceInterval(start=0, end=100)]
    remaining = breakdown(intervals, 95, 100, 1.0, 10.0)
    assert remaining.spoken_seconds == 0.0
    assert remaining.real_seconds == pytest.approx(10.0)


def test_normal_speed_divides_speech():
    assert estimate_remaining([], 0, 100, 2.0, 8.0) == pytest.approx(50)


def test_unknown_duration_is_zero():
    assert estimate_remaining([], 0, float("nan"), 1.0, 8.0) == 0.0


def test_saved_seconds():
    intervals = [SilenceInterval(start=60, end=70)]
    remaining = breakdown(intervals, 50, 100, 1.0, 8.0)
    assert remaining.saved_seconds == pytest.approx(50 - 41.25)


@pytest.mark.parametrize("seconds,expected", [
    (0, "0:00:00"),
    (59.999, "0:00:59"),
    (61, "0:01:01"),
    (3600, "1:00:00"),
    (3 * 3600 + 25 * 60 + 7.9, "3:25:07"),
    (-5, "0:00:00"),
    (float("nan"), "0:00:00"),
])
def test_format_hms(seconds, expected):
    assert format_hms(seconds) == expected
