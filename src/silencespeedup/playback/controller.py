"""Per-tick playback rate and skip decisions."""

from __future__ import annotations

import math
from collections.abc import Callable

from rich.markup import escape

from silencespeedup.intervals.store import IntervalStore
from silencespeedup.models.config import (
    DEFAULT_PLAYBACK_SPEED,
    DEFAULT_SILENCE_SPEED,
    clamp_speed,
)
from silencespeedup.playback.host import SILENCE_SKIPPED, HostPlayer
from silencespeedup.utils.progress import log_warning


class PlaybackController:
    """Two-state machine: Normal (normal speed) and InSilence (silence speed).

    ``tick`` runs once per host time update. ``skip_target`` holds the end of
    the silence currently traversed, or None outside silences.

    The host may call back into ``tick`` from inside ``seek``. A nested tick
    updates state but never starts a second relocation.
    """

    def __init__(
        self,
        player: HostPlayer,
        store: IntervalStore,
        *,
        normal_speed: float = DEFAULT_PLAYBACK_SPEED,
        silence_speed: float = DEFAULT_SILENCE_SPEED,
        skip_silences: bool = False,
        on_skip_available: Callable[[bool], None] | None = None,
    ) -> None:
        self._player = player
        self._store = store
        self._normal_speed = clamp_speed(normal_speed) or DEFAULT_PLAYBACK_SPEED
        self._silence_speed = clamp_speed(silence_speed) or DEFAULT_SILENCE_SPEED
        self.skip_silences = skip_silences
        self._on_skip_available = on_skip_available
        self._skip_target: float | None = None
        self._position: float | None = None
        self._relocating = False
        self._clock_invalid = False

    @property
    def normal_speed(self) -> float:
        return self._normal_speed

    @normal_speed.setter
    def normal_speed(self, value: float) -> None:
        self._normal_speed = self._clamped("playback", value, self._normal_speed)

    @property
    def silence_speed(self) -> float:
        return self._silence_speed

    @silence_speed.setter
    def silence_speed(self, value: float) -> None:
        self._silence_speed = self._clamped("silence", value, self._silence_speed)

    @property
    def skip_target(self) -> float | None:
        return self._skip_target

    @property
    def in_silence(self) -> bool:
        return self._skip_target is not None

    def tick(self, t: float) -> None:
        """Apply the rate for clock position ``t``, skipping when enabled."""
        if not isinstance(t, (int, float)) or not math.isfinite(t):
            if not self._clock_invalid:
                log_warning(f"Ignoring non-finite playback position: {escape(repr(t))}")
                self._clock_invalid = True
            self._leave_silence()
            return

        self._clock_invalid = False
        self._position = t
        hit = self._store.lookup(t)
        if hit is None:
            self._leave_silence()
            return

        self._skip_target = hit.end
        self._set_skip_available(True)
        if self.skip_silences:
            self.skip_current()
        else:
            self._player.set_playback_rate(self._silence_speed)

    def skip_current(self) -> bool:
        """Jump to the end of the current silence. Returns True if it jumped."""
        target = self._skip_target
        if target is None or self._relocating:
            return False
        if self._position is not None and target <= self._position:
            return False

        self._skip_target = None
        self._relocating = True
        try:
            self._player.seek(target)
            self._position = target
            self._player.trigger(SILENCE_SKIPPED, {"skippedTo": target})
        finally:
            self._relocating = False
        # A host that ticks from inside seek may have re-entered the silence end.
        self._set_skip_available(self._skip_target is not None)
        return True

    def reset(self) -> None:
        """Forget the current silence; the next tick re-evaluates."""
        self._skip_target = None
        self._position = None

    def _leave_silence(self) -> None:
        self._player.set_playback_rate(self._normal_speed)
        self._set_skip_available(False)
        self._skip_target = None

    def _set_skip_available(self, available: bool) -> None:
        if self._on_skip_available is not None:
            self._on_skip_available(available)

    def _clamped(self, which: str, value: float, current: float) -> float:
        speed = clamp_speed(value)
        if speed is None:
            log_warning(f"Invalid {which} speed {escape(repr(value))}, keeping {current}")
            return current
        return speed
