"""Silence interval store and margin policies."""

from silencespeedup.intervals.margin import ConstantMargin, MarginPolicy, ProportionalMargin
from silencespeedup.intervals.store import IntervalStore, lookup, normalize

__all__ = [
    "ConstantMargin",
    "MarginPolicy",
    "ProportionalMargin",
    "IntervalStore",
    "lookup",
    "normalize",
]
