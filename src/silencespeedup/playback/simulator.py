"""In-process host player with a simulated clock."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

from silencespeedup.playback.host import TIME_UPDATE, Listener


class SimulatedPlayer:
    """A host player whose clock advances only when told to.

    ``advance(wall_seconds)`` moves the media clock by ``wall_seconds *
    rate`` and fires ``timeupdate``. ``seek`` fires ``timeupdate``
    synchronously, like a host that re-enters the tick handler.
    """

    def __init__(self, duration: float, *, start: float = 0.0) -> None:
        self._duration = max(0.0, float(duration))
        self._time = min(max(0.0, float(start)), self._duration)
        self._rate = 1.0
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._ready_callbacks: list[Callable[[], None]] = []
        self._is_ready = False
        self.rate_changes = 0
        self.seeks: list[float] = []

    # -- HostPlayer --------------------------------------------------------

    def current_time(self) -> float:
        return self._time

    def duration(self) -> float:
        return self._duration

    @property
    def playback_rate(self) -> float:
        return self._rate

    def set_playback_rate(self, rate: float) -> None:
        if rate != self._rate:
            self.rate_changes += 1
        self._rate = rate

    def seek(self, seconds: float) -> None:
        self._time = min(max(0.0, float(seconds)), self._duration)
        self.seeks.append(self._time)
        self._time_update()

    def on(self, event: str, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def off(self, event: str, listener: Listener) -> None:
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)

    def trigger(self, event: str, payload: dict[str, Any] | None = None) -> None:
        for listener in list(self._listeners[event]):
            listener(dict(payload or {}))

    def ready(self, callback: Callable[[], None]) -> None:
        if self._is_ready:
            callback()
        else:
            self._ready_callbacks.append(callback)

    # -- Simulation --------------------------------------------------------

    @property
    def ended(self) -> bool:
        return self._time >= self._duration

    def listener_count(self, event: str) -> int:
        return len(self._listeners[event])

    def mark_ready(self) -> None:
        """Signal readiness and run deferred ready callbacks once."""
        if self._is_ready:
            return
        self._is_ready = True
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()

    def advance(self, wall_seconds: float) -> None:
        """Play for ``wall_seconds`` of real time at the current rate."""
        self._time = min(self._time + wall_seconds * self._rate, self._duration)
        self._time_update()

    def play_through(self, tick_seconds: float = 0.25, *, max_ticks: int = 10_000_000) -> tuple[float, int]:
        """Play until the end. Returns (wall seconds elapsed, ticks)."""
        if tick_seconds <= 0:
            raise ValueError(f"Tick must be positive, got {tick_seconds}")
        self.mark_ready()
        self._time_update()
        wall = 0.0
        ticks = 0
        while not self.ended and ticks < max_ticks:
            remaining_wall = (self._duration - self._time) / self._rate
            if remaining_wall <= tick_seconds:
                # Land exactly on the end instead of creeping up on it.
                self._time = self._duration
                self._time_update()
                wall += remaining_wall
            else:
                self.advance(tick_seconds)
                wall += tick_seconds
            ticks += 1
        return wall, ticks

    def _time_update(self) -> None:
        self.trigger(TIME_UPDATE, {"currentTime": self._time})
