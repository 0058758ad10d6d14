"""Real remaining time, accounting for silences played at another speed."""

from __future__ import annotations

import math
from collections.abc import Iterable

from silencespeedup.models.interval import SilenceInterval
from silencespeedup.models.report import RemainingTime


def breakdown(
    intervals: Iterable[SilenceInterval],
    current_time: float,
    total_duration: float,
    normal_speed: float,
    silence_speed: float,
) -> RemainingTime:
    """Split the remaining media into silence and speech and rate each part.

    Every silence ending after the playhead counts in full, including one
    the playhead is inside. Recomputed from scratch on every call.
    """
    values = (current_time, total_duration, normal_speed, silence_speed)
    if not all(isinstance(v, (int, float)) and math.isfinite(v) for v in values):
        return RemainingTime()
    if normal_speed <= 0 or silence_speed <= 0:
        return RemainingTime()

    silence = sum(i.duration for i in intervals if i.end > current_time)
    plain = max(0.0, total_duration - current_time)
    spoken = max(0.0, plain - silence)
    return RemainingTime(
        silence_seconds=silence,
        spoken_seconds=spoken,
        plain_seconds=plain,
        real_seconds=spoken / normal_speed + silence / silence_speed,
    )


def estimate_remaining(
    intervals: Iterable[SilenceInterval],
    current_time: float,
    total_duration: float,
    normal_speed: float,
    silence_speed: float,
) -> float:
    """Seconds of real time left until the end of the media."""
    return breakdown(
        intervals, current_time, total_duration, normal_speed, silence_speed
    ).real_seconds


def format_hms(seconds: float) -> str:
    """Format seconds as H:MM:SS, truncating fractions."""
    if not isinstance(seconds, (int, float)) or not math.isfinite(seconds) or seconds < 0:
        seconds = 0
    h = math.floor(seconds / 3600)
    m = math.floor((seconds % 3600) / 60)
    s = math.floor(seconds % 60)
    return f"{h}:{m:02d}:{s:02d}"
