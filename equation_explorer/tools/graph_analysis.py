"""Sample the two lines of an equation for plotting.

Points are taken at every integer x across the visible axis plus a small
margin on each side, so a renderer clipping to ``[-half_range, half_range]``
never shows a line ending early.
"""
from __future__ import annotations

from typing import Any, NamedTuple

from ..constants import HALF_RANGE_STEP, MAX_HALF_RANGE, MIN_HALF_RANGE, SAMPLE_MARGIN

__all__ = [
    "SamplePoint",
    "sample_points",
    "sample_arrays",
    "clamp_half_range",
]


class SamplePoint(NamedTuple):
    x: int
    y1: int
    y2: int


def _check_half_range(half_range: Any) -> int:
    if isinstance(half_range, bool) or not isinstance(half_range, int):
        raise ValueError(f"half_range must be a positive integer, got {half_range!r}")
    if half_range <= 0:
        raise ValueError(f"half_range must be a positive integer, got {half_range!r}")
    return half_range


def sample_points(a: int, b: int, c: int, d: int, half_range: int) -> list[SamplePoint]:
    """Return ``2 * (half_range + 2) + 1`` points ordered by increasing x."""
    limit = _check_half_range(half_range) + SAMPLE_MARGIN
    return [SamplePoint(x, a * x + b, c * x + d) for x in range(-limit, limit + 1)]


def sample_arrays(a: int, b: int, c: int, d: int, half_range: int) -> tuple[Any, Any, Any]:
    """Same samples as :func:`sample_points`, as numpy arrays ``(xs, y1s, y2s)``."""
    import numpy as np  # type: ignore

    limit = _check_half_range(half_range) + SAMPLE_MARGIN
    xs = np.arange(-limit, limit + 1, dtype=float)
    return xs, a * xs + b, c * xs + d


def clamp_half_range(value: int) -> int:
    """Snap ``value`` onto the settings slider (5..50 in steps of 5)."""
    value = max(MIN_HALF_RANGE, min(MAX_HALF_RANGE, int(value)))
    return int(round(value / HALF_RANGE_STEP)) * HALF_RANGE_STEP
