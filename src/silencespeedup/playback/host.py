"""Capabilities the plugin needs from the host media player."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

TIME_UPDATE = "timeupdate"
SILENCE_SKIPPED = "silence-skipped"

Listener = Callable[[dict[str, Any]], None]


@runtime_checkable
class HostPlayer(Protocol):
    """The host player owns the clock; the plugin reads it and requests changes.

    ``seek`` may fire a ``timeupdate`` notification synchronously, before it
    returns.
    """

    def current_time(self) -> float: ...
    def duration(self) -> float: ...
    def set_playback_rate(self, rate: float) -> None: ...
    def seek(self, seconds: float) -> None: ...
    def on(self, event: str, listener: Listener) -> None: ...
    def off(self, event: str, listener: Listener) -> None: ...
    def trigger(self, event: str, payload: dict[str, Any] | None = None) -> None: ...
    def ready(self, callback: Callable[[], None]) -> None: ...
