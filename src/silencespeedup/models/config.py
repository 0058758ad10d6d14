"""Plugin options model."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.markup import escape

from silencespeedup.utils.progress import log_warning

MIN_SPEED = 0.2
MAX_SPEED = 20.0

DEFAULT_PLAYBACK_SPEED = 1.0
DEFAULT_SILENCE_SPEED = 8.0
DEFAULT_MARGIN_START_FACTOR = 0.08
DEFAULT_MARGIN_END_FACTOR = 0.12


def clamp_speed(value: Any) -> float | None:
    """Clamp a speed to [MIN_SPEED, MAX_SPEED], rounded half-up to one decimal.

    Returns None when the value is not a number at all.
    """
    try:
        speed = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(speed):
        return None
    speed = max(MIN_SPEED, min(MAX_SPEED, speed))
    return float(Decimal(str(speed)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _margin_factor(name: str, value: Any, default: float) -> float:
    try:
        factor = float(value)
    except (TypeError, ValueError):
        factor = math.nan
    if not math.isfinite(factor) or factor < 0:
        log_warning(f"Invalid {name} {escape(repr(value))}, using {default}")
        return default
    return factor


class SpeedUpOptions(BaseModel):
    """Recognized plugin options (camelCase aliases match the player config).

    Loosely typed values never fail validation: speeds are clamped, flags
    are taken by truthiness and bad margin factors fall back to defaults.
    """

    model_config = ConfigDict(populate_by_name=True)

    playback_speed: float = Field(default=DEFAULT_PLAYBACK_SPEED, alias="playbackSpeed")
    silence_speed: float = Field(default=DEFAULT_SILENCE_SPEED, alias="silenceSpeed")
    timestamps: Any = Field(default_factory=list)  # validated by the interval store
    skip_silences: bool = Field(default=False, alias="skipSilences")
    display_real_remaining_time: bool = Field(
        default=True, alias="displayRealRemainingTime"
    )
    margin_start_factor: float = Field(
        default=DEFAULT_MARGIN_START_FACTOR, ge=0.0, alias="marginStartFactor"
    )
    margin_end_factor: float = Field(
        default=DEFAULT_MARGIN_END_FACTOR, ge=0.0, alias="marginEndFactor"
    )

    @field_validator("playback_speed", mode="before")
    @classmethod
    def _clamp_playback_speed(cls, value: Any) -> float:
        speed = clamp_speed(value)
        if speed is None:
            log_warning(f"Invalid playbackSpeed {escape(repr(value))}, using {DEFAULT_PLAYBACK_SPEED}")
            return DEFAULT_PLAYBACK_SPEED
        return speed

    @field_validator("silence_speed", mode="before")
    @classmethod
    def _clamp_silence_speed(cls, value: Any) -> float:
        speed = clamp_speed(value)
        if speed is None:
            log_warning(f"Invalid silenceSpeed {escape(repr(value))}, using {DEFAULT_SILENCE_SPEED}")
            return DEFAULT_SILENCE_SPEED
        return speed

    @field_validator("skip_silences", "display_real_remaining_time", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("margin_start_factor", mode="before")
    @classmethod
    def _check_margin_start(cls, value: Any) -> float:
        return _margin_factor("marginStartFactor", value, DEFAULT_MARGIN_START_FACTOR)

    @field_validator("margin_end_factor", mode="before")
    @classmethod
    def _check_margin_end(cls, value: Any) -> float:
        return _margin_factor("marginEndFactor", value, DEFAULT_MARGIN_END_FACTOR)
