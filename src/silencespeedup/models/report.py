"""Remaining-time breakdown and simulation report models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RemainingTime(BaseModel):
    """Remaining playback time split by rate."""

    silence_seconds: float = 0.0
    spoken_seconds: float = 0.0
    plain_seconds: float = 0.0  # remaining time at 1x, ignoring speeds
    real_seconds: float = 0.0

    @property
    def saved_seconds(self) -> float:
        return self.plain_seconds - self.real_seconds


class SkipEvent(BaseModel):
    """A silence-skipped notification observed during a simulation."""

    silence_start: float | None = None
    skipped_to: float


class SimulationReport(BaseModel):
    """Outcome of playing a media timeline through the simulated player."""

    version: str = "1.0"
    media_duration_seconds: float = 0.0
    wall_seconds: float = 0.0
    estimated_seconds: float = 0.0
    playback_speed: float = 1.0
    silence_speed: float = 8.0
    skip_silences: bool = False
    interval_count: int = 0
    silence_seconds: float = 0.0
    ticks: int = 0
    skips: list[SkipEvent] = Field(default_factory=list)

    @property
    def saved_seconds(self) -> float:
        return self.media_duration_seconds - self.wall_seconds
