"""<path> — one point array per sub-path of the ``d`` attribute."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.context import ExtractionContext
from pathsampler.engine.pathdata import iter_subpath_points
from pathsampler.engine.registry import ShapeKind, tracer
from pathsampler.models.svg_document import ShapeElement


@tracer(ShapeKind.PATH, description="Path-data state machine, split at move-to")
def trace_path(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    d = element.get("d")
    if not d or not d.strip():
        return []

    emitted = 0

    def _count(n: int | float) -> None:
        nonlocal emitted
        emitted += n
        ctx.guard(emitted, element.tag)

    return list(
        iter_subpath_points(
            d,
            ctx.density,
            close_paths=ctx.config.close_paths,
            on_warning=ctx.warn,
            on_points=_count,
        )
    )
