"""<rect> — perimeter walk with exact-corner repair.

The walk starts at the top-left corner and runs clockwise (in SVG's
y-down space): top, right, bottom, left. Rounded corners (rx/ry) are not
drawn.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.context import ExtractionContext
from pathsampler.engine.registry import ShapeKind, tracer
from pathsampler.models.svg_document import ShapeElement
from pathsampler.utils.geometry import CLOSE_TOLERANCE, step_count

_MIN_RECT_POINTS = 4


def rect_corners(x: float, y: float, width: float, height: float) -> NDArray[np.float64]:
    """Top-left, top-right, bottom-right, bottom-left."""
    return np.array(
        [[x, y], [x + width, y], [x + width, y + height], [x, y + height]],
        dtype=np.float64,
    )


def walk_perimeter(x: float, y: float, width: float, height: float, count: int) -> NDArray[np.float64]:
    """``count`` points at perimeter distance i/count * P, i = 0..count-1."""
    perimeter = 2 * (width + height)
    pts = np.empty((count, 2), dtype=np.float64)
    for i in range(count):
        t = i / count * perimeter
        if t <= width:
            pts[i] = (x + t, y)
        elif t <= width + height:
            pts[i] = (x + width, y + t - width)
        elif t <= 2 * width + height:
            pts[i] = (x + width - (t - width - height), y + height)
        else:
            pts[i] = (x, y + height - (t - 2 * width - height))
    return pts


def repair_vertices(points: NDArray[np.float64], vertices: NDArray[np.float64]) -> NDArray[np.float64]:
    """Make every vertex appear exactly in ``points``.

    Points within tolerance of a vertex on both axes are snapped onto it.
    A vertex with no such point overwrites its nearest point by L1
    distance (first index wins ties). Points that already hold a vertex
    are never overwritten.
    """
    points = points.copy()
    pinned = np.zeros(len(points), dtype=bool)
    for vertex in vertices:
        hits = np.all(np.abs(points - vertex) < CLOSE_TOLERANCE, axis=1)
        if hits.any():
            points[hits] = vertex
            pinned |= hits
            continue
        l1 = np.abs(points - vertex).sum(axis=1)
        l1[pinned] = np.inf
        nearest = int(np.argmin(l1))
        points[nearest] = vertex
        pinned[nearest] = True
    return points


@tracer(ShapeKind.RECT, description="Perimeter walk with corner repair, closed")
def trace_rect(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    coords = [element.number(name) for name in ("x", "y", "width", "height")]
    if any(c is None for c in coords):
        return []
    x, y, width, height = coords
    if width < 0 or height < 0 or (width == 0 and height == 0):
        return []

    count = step_count(2 * (width + height), ctx.density, _MIN_RECT_POINTS)
    ctx.guard(count + 1, element.tag)

    points = repair_vertices(walk_perimeter(x, y, width, height, count), rect_corners(x, y, width, height))
    if ctx.config.close_paths:
        points = np.vstack([points, points[:1]])
    return [points]
