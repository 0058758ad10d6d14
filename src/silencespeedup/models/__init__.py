"""Pydantic data models for silencespeedup."""

from silencespeedup.models.config import SpeedUpOptions
from silencespeedup.models.interval import SilenceInterval
from silencespeedup.models.report import RemainingTime, SimulationReport, SkipEvent

__all__ = [
    "SpeedUpOptions",
    "SilenceInterval",
    "RemainingTime",
    "SimulationReport",
    "SkipEvent",
]
