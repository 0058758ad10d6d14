"""Silence interval normalization and lookup."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from rich.markup import escape

from silencespeedup.intervals.margin import MarginPolicy, ProportionalMargin
from silencespeedup.models.interval import SilenceInterval
from silencespeedup.utils.progress import log_warning

_START_KEYS = ("start", "t_start")
_END_KEYS = ("end", "t_end")
_PARALLEL_KEYS = (("start", "end"), ("starts", "ends"), ("t_start", "t_end"))


class MalformedTimestamps(ValueError):
    """Raw timestamps are not a well-formed collection of start/end pairs."""


def _number(value: Any) -> float:
    if isinstance(value, bool):
        raise MalformedTimestamps(f"Not a number: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedTimestamps(f"Not a number: {value!r}") from e
    if not math.isfinite(number):
        raise MalformedTimestamps(f"Not a finite number: {value!r}")
    return number


def _pick(item: Mapping, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in item:
            return item[key]
    raise MalformedTimestamps(f"Missing {keys[0]!r} in {dict(item)!r}")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def parse_pairs(raw: Any) -> list[tuple[float, float]]:
    """Turn raw timestamps of either supported shape into (start, end) pairs.

    Shapes:
    - array of pairs: ``[{"start": 1, "end": 2}, ...]`` or ``[(1, 2), ...]``
    - parallel arrays: ``{"start": [1, ...], "end": [2, ...]}``

    Raises MalformedTimestamps on anything else.
    """
    if raw is None:
        return []

    if isinstance(raw, Mapping):
        for start_key, end_key in _PARALLEL_KEYS:
            if start_key in raw and end_key in raw:
                starts, ends = raw[start_key], raw[end_key]
                if not (_is_sequence(starts) and _is_sequence(ends)):
                    raise MalformedTimestamps("Parallel start/end values must be arrays")
                if len(starts) != len(ends):
                    raise MalformedTimestamps(
                        f"Mismatched lengths: {len(starts)} starts, {len(ends)} ends"
                    )
                return [(_number(s), _number(e)) for s, e in zip(starts, ends)]
        raise MalformedTimestamps(f"Unrecognized timestamps mapping keys: {sorted(raw)}")

    if not _is_sequence(raw):
        raise MalformedTimestamps(f"Expected an array, got {type(raw).__name__}")

    pairs: list[tuple[float, float]] = []
    for item in raw:
        if isinstance(item, Mapping):
            pairs.append((_number(_pick(item, _START_KEYS)), _number(_pick(item, _END_KEYS))))
        elif _is_sequence(item) and len(item) == 2:
            pairs.append((_number(item[0]), _number(item[1])))
        else:
            raise MalformedTimestamps(f"Not a start/end pair: {item!r}")
    return pairs


def normalize(
    raw: Any,
    normal_speed: float,
    silence_speed: float,
    *,
    margin: MarginPolicy | None = None,
) -> tuple[SilenceInterval, ...]:
    """Shrink, filter and sort raw silences.

    Each pair becomes ``(start + margin.start(normal_speed),
    end - margin.end(silence_speed))``. Pairs left empty or inverted are
    dropped. Malformed input yields an empty sequence and a warning.
    """
    margin = margin or ProportionalMargin()
    try:
        pairs = parse_pairs(raw)
    except MalformedTimestamps as e:
        log_warning(f"Ignoring silence timestamps: {escape(str(e))}")
        return ()

    start_margin = margin.start(normal_speed)
    end_margin = margin.end(silence_speed)
    intervals = [
        SilenceInterval(start=start + start_margin, end=end - end_margin)
        for start, end in pairs
    ]
    intervals = [i for i in intervals if i.end > i.start]
    intervals.sort(key=lambda i: i.start)
    return tuple(intervals)


def lookup(intervals: Iterable[SilenceInterval], t: float) -> SilenceInterval | None:
    """Return the first interval containing ``t``, or None."""
    if not isinstance(t, (int, float)) or not math.isfinite(t):
        return None
    for interval in intervals:
        if interval.start > t:
            break
        if interval.contains(t):
            return interval
    return None


class IntervalStore:
    """Owns the normalized silence sequence; replaced wholesale on rebuild."""

    def __init__(self, margin: MarginPolicy | None = None) -> None:
        self.margin: MarginPolicy = margin or ProportionalMargin()
        self._intervals: tuple[SilenceInterval, ...] = ()

    def rebuild(self, raw: Any, normal_speed: float, silence_speed: float) -> None:
        self._intervals = normalize(raw, normal_speed, silence_speed, margin=self.margin)

    @property
    def intervals(self) -> tuple[SilenceInterval, ...]:
        return self._intervals

    @property
    def total_silence(self) -> float:
        return sum(i.duration for i in self._intervals)

    def lookup(self, t: float) -> SilenceInterval | None:
        return lookup(self._intervals, t)

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self):
        return iter(self._intervals)
