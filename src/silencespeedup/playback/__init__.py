"""Playback controller and host player capabilities."""

from silencespeedup.playback.controller import PlaybackController
from silencespeedup.playback.host import SILENCE_SKIPPED, TIME_UPDATE, HostPlayer
from silencespeedup.playback.simulator import SimulatedPlayer

__all__ = [
    "PlaybackController",
    "HostPlayer",
    "SimulatedPlayer",
    "SILENCE_SKIPPED",
    "TIME_UPDATE",
]
