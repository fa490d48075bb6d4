"""SVG ``transform`` attribute support: ``matrix(...)`` and ``rotate(...)`` only.

An affine is the 6-tuple (a, b, c, d, e, f) mapping
(x, y) -> (a*x + c*y + e, b*x + d*y + f).
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np
from numpy.typing import NDArray

from pathsampler.utils.numbers import parse_numbers

logger = logging.getLogger(__name__)

Affine = tuple[float, float, float, float, float, float]

IDENTITY: Affine = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

_FUNCTION_RE = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")


def rotation_matrix(angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> Affine:
    """Rotation by ``angle_deg`` degrees about (cx, cy)."""
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    tx = cx - cx * cos_a + cy * sin_a
    ty = cy - cx * sin_a - cy * cos_a
    return (cos_a, sin_a, -sin_a, cos_a, tx, ty)


def multiply(m1: Affine, m2: Affine) -> Affine:
    """m1 · m2: apply m2 first, then m1."""
    a1, b1, c1, d1, e1, f1 = m1
    a2, b2, c2, d2, e2, f2 = m2
    return (
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


def parse_transform(value: str | None) -> Affine | None:
    """Parse a transform list into one affine.

    Functions compose left to right, as in SVG. Any function other than a
    well-formed ``matrix`` (6 numbers) or ``rotate`` (1 or 3 numbers) makes
    the whole attribute unsupported and None is returned.
    """
    if not value or not value.strip():
        return None

    functions = _FUNCTION_RE.findall(value)
    if not functions:
        logger.debug("Ignoring unrecognized transform %r", value)
        return None

    result = IDENTITY
    for name, raw_args in functions:
        args = parse_numbers(raw_args)
        if name == "matrix" and len(args) == 6:
            step: Affine = tuple(args)  # type: ignore[assignment]
        elif name == "rotate" and len(args) in (1, 3):
            step = rotation_matrix(*args)
        else:
            logger.debug("Ignoring unsupported transform %r", value)
            return None
        result = multiply(result, step)
    return result


def apply_affine(points: NDArray[np.float64], matrix: Affine) -> NDArray[np.float64]:
    if len(points) == 0:
        return points
    a, b, c, d, e, f = matrix
    linear = np.array([[a, b], [c, d]], dtype=np.float64)
    return points @ linear + np.array([e, f], dtype=np.float64)


def apply_transform(points: NDArray[np.float64], value: str | None) -> NDArray[np.float64]:
    """Apply a transform attribute; unsupported syntax passes points through."""
    matrix = parse_transform(value)
    if matrix is None:
        return points
    return apply_affine(points, matrix)
