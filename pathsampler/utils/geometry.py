"""Leaf-node geometry helpers. No engine imports.

A path is an Nx2 float64 array of (x, y) rows in drawing order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

# Two coordinates closer than this on both axes are the same point.
CLOSE_TOLERANCE = 0.001


class Point(NamedTuple):
    x: float
    y: float


def empty_path() -> NDArray[np.float64]:
    return np.empty((0, 2), dtype=np.float64)


def as_path(points: Sequence[Sequence[float]]) -> NDArray[np.float64]:
    """Coerce a sequence of (x, y) pairs into an Nx2 array."""
    if len(points) == 0:
        return empty_path()
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def distance(p0: Sequence[float], p1: Sequence[float]) -> float:
    return math.hypot(p1[0] - p0[0], p1[1] - p0[1])


def same_point(p0: Sequence[float], p1: Sequence[float], tol: float = CLOSE_TOLERANCE) -> bool:
    """True when both axes differ by less than ``tol``."""
    return abs(p0[0] - p1[0]) < tol and abs(p0[1] - p1[1]) < tol


def step_count(length: float, density: float, minimum: int = 1) -> int | float:
    """``max(minimum, floor(length / density))``, or inf when the ratio overflows.

    Callers check the result against the point ceiling before allocating.
    """
    ratio = length / density
    if not math.isfinite(ratio):
        return math.inf
    return max(minimum, math.floor(ratio))


def segment_count(p0: Sequence[float], p1: Sequence[float], density: float) -> int | float:
    """Segments :func:`interpolate` uses between p0 and p1."""
    return step_count(distance(p0, p1), density)


def interpolated_size(p0: Sequence[float], p1: Sequence[float], density: float) -> int | float:
    """Number of rows :func:`interpolate` returns, computed without building them."""
    if float(p0[0]) == float(p1[0]) and float(p0[1]) == float(p1[1]):
        return 1
    return segment_count(p0, p1, density) + 1


def interpolate(p0: Sequence[float], p1: Sequence[float], density: float) -> NDArray[np.float64]:
    """Evenly spaced points from p0 to p1, both endpoints included.

    ``floor(length / density)`` segments, at least one. Identical endpoints
    give a single point. The last row is p1 exactly, not p0 + 1.0 * (p1 - p0).
    """
    x0, y0 = float(p0[0]), float(p0[1])
    x1, y1 = float(p1[0]), float(p1[1])
    if x0 == x1 and y0 == y1:
        return np.array([[x0, y0]], dtype=np.float64)

    segments = segment_count((x0, y0), (x1, y1), density)
    t = np.arange(segments + 1, dtype=np.float64) / segments
    pts = np.empty((segments + 1, 2), dtype=np.float64)
    pts[:, 0] = x0 + t * (x1 - x0)
    pts[:, 1] = y0 + t * (y1 - y0)
    pts[-1] = (x1, y1)
    return pts


def close_path(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Append the first point unless the path already ends on it."""
    if len(points) == 0 or same_point(points[0], points[-1]):
        return points
    return np.vstack([points, points[:1]])


def path_length(points: NDArray[np.float64]) -> float:
    """Polyline length of a single path."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


# ── Aggregates over many paths ─────────────────────────────────────────────


def bounding_box(paths: Sequence[NDArray[np.float64]]) -> tuple[float, float, float, float]:
    """Union bounding box as (x, y, width, height). Zeros when there are no points."""
    non_empty = [p for p in paths if len(p) > 0]
    if not non_empty:
        return (0.0, 0.0, 0.0, 0.0)
    stacked = np.vstack(non_empty)
    xmin, ymin = stacked.min(axis=0)
    xmax, ymax = stacked.max(axis=0)
    return (float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))


def total_length(paths: Sequence[NDArray[np.float64]]) -> float:
    """Sum of polyline lengths. Gaps between paths are not counted."""
    return float(sum(path_length(p) for p in paths))


def center(paths: Sequence[NDArray[np.float64]]) -> Point:
    """Mean of every point across all paths, (0, 0) when empty."""
    non_empty = [p for p in paths if len(p) > 0]
    if not non_empty:
        return Point(0.0, 0.0)
    cx, cy = np.vstack(non_empty).mean(axis=0)
    return Point(float(cx), float(cy))


def normalize_to_size(
    paths: Sequence[NDArray[np.float64]],
    width: float,
    height: float,
) -> list[NDArray[np.float64]]:
    """Move the union bbox to the origin and scale uniformly to fit width x height.

    Aspect ratio is kept: the scale is ``min(width / bbox_w, height / bbox_h)``.
    Degenerate (zero-width or zero-height) input is returned unchanged.
    """
    bx, by, bw, bh = bounding_box(paths)
    if bw == 0 or bh == 0:
        return list(paths)
    scale = min(width / bw, height / bh)
    origin = np.array([bx, by])
    return [(p - origin) * scale if len(p) > 0 else p for p in paths]
