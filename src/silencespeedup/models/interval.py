"""Silence interval model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SilenceInterval(BaseModel):
    """A normalized silence range on the media timeline, in seconds."""

    model_config = ConfigDict(frozen=True)

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, t: float) -> bool:
        return self.start <= t <= self.end
