"""Shared fixtures."""

from __future__ import annotations

import pytest

from silencespeedup.intervals.store import IntervalStore
from silencespeedup.playback.host import SILENCE_SKIPPED
from silencespeedup.playback.simulator import SimulatedPlayer


@pytest.fixture
def player() -> SimulatedPlayer:
    return SimulatedPlayer(100.0)


@pytest.fixture
def skipped(player: SimulatedPlayer) -> list[float]:
    """Destinations of every silence-skipped event fired by ``player``."""
    events: list[float] = []
    player.on(SILENCE_SKIPPED, lambda payload: events.append(payload["skippedTo"]))
    return events


@pytest.fixture
def store() -> IntervalStore:
    s = IntervalStore()
    s.rebuild([{"start": 10, "end": 20}, {"start": 40, "end": 45}], 1.0, 8.0)
    return s
