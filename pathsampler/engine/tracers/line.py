"""<line> — straight interpolation between (x1, y1) and (x2, y2)."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.context import ExtractionContext
from pathsampler.engine.registry import ShapeKind, tracer
from pathsampler.models.svg_document import ShapeElement
from pathsampler.utils.geometry import interpolate, interpolated_size


@tracer(ShapeKind.LINE, description="Interpolate between the two endpoints")
def trace_line(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    coords = [element.number(name) for name in ("x1", "y1", "x2", "y2")]
    if any(c is None for c in coords):
        return []
    x1, y1, x2, y2 = coords
    ctx.guard(interpolated_size((x1, y1), (x2, y2), ctx.density), element.tag)
    return [interpolate((x1, y1), (x2, y2), ctx.density)]
