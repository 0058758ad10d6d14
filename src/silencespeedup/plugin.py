"""SilenceSpeedUp plugin — wires the interval store, controller and estimator to a host player."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from rich.markup import escape

from silencespeedup.estimate.remaining import estimate_remaining, format_hms
from silencespeedup.intervals.margin import MarginPolicy, ProportionalMargin
from silencespeedup.intervals.store import IntervalStore
from silencespeedup.models.config import SpeedUpOptions
from silencespeedup.models.interval import SilenceInterval
from silencespeedup.playback.controller import PlaybackController
from silencespeedup.playback.host import TIME_UPDATE, HostPlayer
from silencespeedup.utils.progress import log_warning


def _load_options(options: Mapping[str, Any] | None) -> SpeedUpOptions:
    """Validate loose options; anything unusable falls back to the defaults."""
    if options is None:
        return SpeedUpOptions()
    try:
        return SpeedUpOptions.model_validate(dict(options))
    except (TypeError, ValueError) as e:
        log_warning(f"Ignoring plugin options: {escape(str(e))}")
        return SpeedUpOptions()


class SilenceSpeedUp:
    """Speed up (or skip) silences on a host player.

    The plugin subscribes to the host's time updates on construction and
    unsubscribes on ``dispose()``.

    Args:
        player: Host player capabilities (clock, rate, events, readiness)
        options: ``SpeedUpOptions`` or a mapping of its fields/aliases
        margin: Margin policy for new timestamps; defaults to a
            ``ProportionalMargin`` built from the option factors
        display: Receives the formatted real remaining time on every tick,
            once the host is ready
        on_skip_available: Called with True/False as the skip affordance
            should be shown or hidden
    """

    def __init__(
        self,
        player: HostPlayer,
        options: SpeedUpOptions | Mapping[str, Any] | None = None,
        *,
        margin: MarginPolicy | None = None,
        display: Callable[[str], None] | None = None,
        on_skip_available: Callable[[bool], None] | None = None,
    ) -> None:
        if not isinstance(options, SpeedUpOptions):
            options = _load_options(options)
        self.options = options
        self.player = player
        self.display_real_remaining_time = options.display_real_remaining_time

        self._store = IntervalStore(
            margin
            or ProportionalMargin(
                start_factor=options.margin_start_factor,
                end_factor=options.margin_end_factor,
            )
        )
        self._controller = PlaybackController(
            player,
            self._store,
            normal_speed=options.playback_speed,
            silence_speed=options.silence_speed,
            skip_silences=options.skip_silences,
            on_skip_available=self._skip_available_changed,
        )
        self._on_skip_available = on_skip_available
        self._skip_available = False
        self._display: Callable[[str], None] | None = None
        self._disposed = False

        self.set_silence_timestamps(options.timestamps)

        if display is not None:
            # The display surface exists only once the host is ready.
            player.ready(lambda: self._attach_display(display))
        player.on(TIME_UPDATE, self._on_time_update)

    # -- Timestamps --------------------------------------------------------

    def set_silence_timestamps(self, timestamps: Any = None) -> None:
        """Replace the silences, applying margins for the current speeds."""
        self._store.rebuild(
            timestamps if timestamps is not None else [],
            self._controller.normal_speed,
            self._controller.silence_speed,
        )
        self._controller.reset()

    def get_silence_timestamps(self) -> tuple[SilenceInterval, ...]:
        return self._store.intervals

    def get_current(self, time: float = 0.0) -> SilenceInterval | None:
        """The silence containing ``time``, if any."""
        return self._store.lookup(time)

    # -- Speeds ------------------------------------------------------------

    def set_playback_speed(self, speed: float) -> None:
        self._controller.normal_speed = speed

    def set_silence_speed(self, speed: float) -> None:
        self._controller.silence_speed = speed

    def get_playback_speed(self) -> float:
        return self._controller.normal_speed

    def get_silence_speed(self) -> float:
        return self._controller.silence_speed

    @property
    def skip_silences(self) -> bool:
        return self._controller.skip_silences

    @skip_silences.setter
    def skip_silences(self, enabled: bool) -> None:
        self._controller.skip_silences = bool(enabled)

    # -- Silence state -----------------------------------------------------

    def is_in_silence(self) -> bool:
        return self._controller.in_silence

    @property
    def is_skip_available(self) -> bool:
        return self._skip_available

    def skip_current_silence(self) -> bool:
        """Jump to the end of the current silence; no-op outside silences."""
        return self._controller.skip_current()

    # -- Remaining time ----------------------------------------------------

    def real_remaining_time(self, current_time: float | None = None) -> float:
        if current_time is None:
            current_time = self.player.current_time()
        return estimate_remaining(
            self._store.intervals,
            current_time,
            self.player.duration(),
            self._controller.normal_speed,
            self._controller.silence_speed,
        )

    @property
    def remaining_time_text(self) -> str:
        return format_hms(self.real_remaining_time())

    # -- Lifecycle ---------------------------------------------------------

    def dispose(self) -> None:
        """Detach from the host. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        self.player.off(TIME_UPDATE, self._on_time_update)
        self._display = None

    def _attach_display(self, display: Callable[[str], None]) -> None:
        if not self._disposed:
            self._display = display

    def _skip_available_changed(self, available: bool) -> None:
        if available == self._skip_available:
            return
        self._skip_available = available
        if self._on_skip_available is not None:
            self._on_skip_available(available)

    def _on_time_update(self, payload: dict[str, Any] | None = None) -> None:
        current_time = self.player.current_time()
        self._controller.tick(current_time)

        if self.display_real_remaining_time and self._display is not None:
            # Re-read the clock: a skip inside tick may have moved it.
            self._display(self.remaining_time_text)
