"""Options model."""

from __future__ import annotations

import pytest

from silencespeedup.models.config import SpeedUpOptions, clamp_speed


def test_defaults():
    options = SpeedUpOptions()
    assert options.playback_speed == 1.0
    assert options.silence_speed == 8.0
    assert options.timestamps == []
    assert options.skip_silences is False
    assert options.display_real_remaining_time is True


def test_aliases_and_names():
    by_alias = SpeedUpOptions.model_validate({"playbackSpeed": 1.5, "skipSilences": True})
    by_name = SpeedUpOptions(playback_speed=1.5, skip_silences=True)
    assert by_alias == by_name


def test_speeds_clamped():
    options = SpeedUpOptions(playback_speed=0, silence_speed=100)
    assert options.playback_speed == 0.2
    assert options.silence_speed == 20.0


def test_non_numeric_speed_uses_default():
    options = SpeedUpOptions(playback_speed="fast")
    assert options.playback_speed == 1.0


def test_bad_margin_factors_fall_back_to_defaults():
    options = SpeedUpOptions.model_validate({"marginStartFactor": -0.1, "marginEndFactor": "wide"})
    assert options.margin_start_factor == 0.08
    assert options.margin_end_factor == 0.12


def test_zero_margin_factor_kept():
    assert SpeedUpOptions(margin_start_factor=0).margin_start_factor == 0.0


@pytest.mark.parametrize("value,expected", [
    (None, False),
    (0, False),
    ("", False),
    (1, True),
    ("yes", True),
])
def test_flags_taken_by_truthiness(value, expected):
    options = SpeedUpOptions.model_validate({
        "skipSilences": value,
        "displayRealRemainingTime": value,
    })
    assert options.skip_silences is expected
    assert options.display_real_remaining_time is expected


def test_dump_by_alias_round_trips():
    data = SpeedUpOptions(silence_speed=4).model_dump(mode="json", by_alias=True)
    assert data["silenceSpeed"] == 4.0
    assert SpeedUpOptions.model_validate(data).silence_speed == 4.0


@pytest.mark.parametrize("value,expected", [
    (None, None),
    ("x", None),
    (float("nan"), None),
    (7.25, 7.3),
    (1.25, 1.3),
    (0.25, 0.3),
    (19.95, 20.0),
    (0.1, 0.2),
])
def test_clamp_speed(value, expected):
    assert clamp_speed(value) == expected
