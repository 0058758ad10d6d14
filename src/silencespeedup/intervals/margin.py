"""Margin policies that shrink raw silences before they are used.

A raw silence is entered a little late and left a little early, so the
rate change lands inside the silence despite the host's tick granularity
and the lag of applying a new playback rate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class MarginPolicy(Protocol):
    """Strategy computing the inward shrink of each boundary, in seconds."""

    def start(self, normal_speed: float) -> float: ...
    def end(self, silence_speed: float) -> float: ...


@dataclass(frozen=True)
class ProportionalMargin:
    """Margins proportional to the speed active on each side of the boundary.

    The faster the media plays, the further the clock moves between two
    ticks, so the margin grows with the speed.
    """

    start_factor: float = 0.08
    end_factor: float = 0.12

    def start(self, normal_speed: float) -> float:
        return self.start_factor * normal_speed

    def end(self, silence_speed: float) -> float:
        return self.end_factor * silence_speed


@dataclass(frozen=True)
class ConstantMargin:
    """Speed-independent margins, e.g. a fixed number of host ticks."""

    start_seconds: float = 0.0
    end_seconds: float = 0.0

    @classmethod
    def ticks(cls, count: float, tick_seconds: float) -> ConstantMargin:
        margin = count * tick_seconds
        return cls(start_seconds=margin, end_seconds=margin)

    def start(self, normal_speed: float) -> float:
        return self.start_seconds

    def end(self, silence_speed: float) -> float:
        return self.end_seconds
