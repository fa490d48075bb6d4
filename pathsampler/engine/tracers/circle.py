"""<circle> and <ellipse> — parametric sampling around the centre.

Both are inherently closed: with ``close_paths`` the first point is
repeated at the end.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.context import ExtractionContext
from pathsampler.engine.registry import ShapeKind, tracer
from pathsampler.models.svg_document import ShapeElement
from pathsampler.utils.geometry import step_count

# Fewest points that still read as a closed loop.
_MIN_LOOP_POINTS = 3


def ellipse_circumference(rx: float, ry: float) -> float:
    """Ramanujan's first approximation."""
    return math.pi * (3 * (rx + ry) - math.sqrt((3 * rx + ry) * (rx + 3 * ry)))


def sample_ellipse(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    count: int,
    close: bool,
) -> NDArray[np.float64]:
    """``count`` points at angles i/count * 2π, optionally closed."""
    angles = np.arange(count, dtype=np.float64) / count * 2 * np.pi
    pts = np.column_stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)])
    if close:
        pts = np.vstack([pts, pts[:1]])
    return pts


def _loop_count(circumference: float, density: float) -> int | float:
    return step_count(circumference, density, _MIN_LOOP_POINTS)


@tracer(ShapeKind.CIRCLE, description="Parametric circle, closed")
def trace_circle(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    cx, cy, r = element.number("cx"), element.number("cy"), element.number("r")
    if cx is None or cy is None or r is None or r <= 0:
        return []
    count = _loop_count(2 * math.pi * r, ctx.density)
    ctx.guard(count + 1, element.tag)
    return [sample_ellipse(cx, cy, r, r, count, ctx.config.close_paths)]


@tracer(ShapeKind.ELLIPSE, description="Parametric ellipse, closed")
def trace_ellipse(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    cx, cy = element.number("cx"), element.number("cy")
    rx, ry = element.number("rx"), element.number("ry")
    if cx is None or cy is None or rx is None or ry is None or rx <= 0 or ry <= 0:
        return []
    count = _loop_count(ellipse_circumference(rx, ry), ctx.density)
    ctx.guard(count + 1, element.tag)
    return [sample_ellipse(cx, cy, rx, ry, count, ctx.config.close_paths)]
