"""<polygon> and <polyline> — edge walking between listed vertices.

Every vertex is emitted exactly; between consecutive vertices only the
interior interpolated points are added, so no vertex appears twice.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.context import ExtractionContext
from pathsampler.engine.registry import ShapeKind, tracer
from pathsampler.models.svg_document import ShapeElement
from pathsampler.utils.geometry import interpolate, interpolated_size
from pathsampler.utils.numbers import parse_numbers


def parse_vertices(points_attr: str | None) -> NDArray[np.float64]:
    """Pair up the numbers of a ``points`` attribute; an odd trailing number is dropped."""
    numbers = parse_numbers(points_attr or "")
    usable = len(numbers) - len(numbers) % 2
    return np.array(numbers[:usable], dtype=np.float64).reshape(-1, 2)


def walk_edges(
    vertices: NDArray[np.float64],
    density: float,
    wrap: bool,
    guard: Callable[[int | float], None] | None = None,
) -> NDArray[np.float64]:
    """Emit each edge's start vertex plus its interior points.

    ``wrap`` adds the closing edge from the last vertex back to the first.
    The final vertex of an open walk is left to the caller. ``guard`` sees
    the running point total before each edge is interpolated.
    """
    n = len(vertices)
    edge_count = n if wrap else n - 1
    chunks: list[NDArray[np.float64]] = []
    emitted = 0
    for i in range(edge_count):
        start = vertices[i]
        end = vertices[(i + 1) % n]
        # start vertex plus interior points: the interpolation minus its end
        emitted += max(1, interpolated_size(start, end, density) - 1)
        if guard is not None:
            guard(emitted)
        chunks.append(np.vstack([start[None, :], interpolate(start, end, density)[1:-1]]))
    if not chunks:
        return np.empty((0, 2), dtype=np.float64)
    return np.vstack(chunks)


@tracer(ShapeKind.POLYGON, description="Closed edge walk over listed vertices")
def trace_polygon(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    vertices = parse_vertices(element.get("points"))
    if len(vertices) < 3:
        return []
    points = walk_edges(vertices, ctx.density, wrap=True, guard=lambda n: ctx.guard(n + 1, element.tag))
    if ctx.config.close_paths:
        points = np.vstack([points, vertices[:1]])
    return [points]


@tracer(ShapeKind.POLYLINE, description="Open edge walk over listed vertices")
def trace_polyline(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray[np.float64]]:
    vertices = parse_vertices(element.get("points"))
    if len(vertices) < 2:
        return []
    points = walk_edges(vertices, ctx.density, wrap=False, guard=lambda n: ctx.guard(n + 1, element.tag))
    return [np.vstack([points, vertices[-1:]])]
