"""Fixed-step Bézier flattening.

Segment count comes from the chord (start to end distance), not the arc
length, so tightly curled segments get fewer points than their true length
would suggest.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pathsampler.utils.geometry import distance, step_count

# Even a flat curve gets a midpoint.
_MIN_CURVE_SEGMENTS = 2


def curve_segments(start: Sequence[float], end: Sequence[float], density: float) -> int | float:
    """Segments for a curve from start to end; inf when the chord overflows."""
    return step_count(distance(start, end), density, _MIN_CURVE_SEGMENTS)


def cubic_points(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    density: float,
) -> NDArray[np.float64]:
    """Evaluate a cubic at t = i/n for i = 0..n. First row is p0, last is p3."""
    n = curve_segments(p0, p3, density)
    t = (np.arange(n + 1, dtype=np.float64) / n)[:, None]
    mt = 1.0 - t
    ctrl = np.array([p0, p1, p2, p3], dtype=np.float64)
    return mt**3 * ctrl[0] + 3 * mt**2 * t * ctrl[1] + 3 * mt * t**2 * ctrl[2] + t**3 * ctrl[3]


def quadratic_points(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    density: float,
) -> NDArray[np.float64]:
    """Evaluate a quadratic at t = i/n for i = 0..n. First row is p0, last is p2."""
    n = curve_segments(p0, p2, density)
    t = (np.arange(n + 1, dtype=np.float64) / n)[:, None]
    mt = 1.0 - t
    ctrl = np.array([p0, p1, p2], dtype=np.float64)
    return mt**2 * ctrl[0] + 2 * mt * t * ctrl[1] + t**2 * ctrl[2]
