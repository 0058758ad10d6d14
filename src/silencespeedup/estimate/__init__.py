"""Remaining-time estimation."""

from silencespeedup.estimate.remaining import breakdown, estimate_remaining, format_hms

__all__ = ["breakdown", "estimate_remaining", "format_hms"]
