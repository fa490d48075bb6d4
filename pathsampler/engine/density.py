"""Density resolution: how far apart sampled points should be."""

from __future__ import annotations

import logging

from pathsampler.engine.config import DEFAULT_DENSITY_FACTOR

logger = logging.getLogger(__name__)

# Assumed document size when neither viewBox nor width/height is usable.
DEFAULT_DOCUMENT_SIZE = 100.0


def resolve_density(
    override: float | None = None,
    fixed: float | None = None,
    width: float | None = None,
    height: float | None = None,
    density_factor: float = DEFAULT_DENSITY_FACTOR,
) -> float:
    """Pick the spacing for one extraction call.

    Priority: call-time ``override``, then the extractor's ``fixed`` density,
    then ``max(width, height) * density_factor`` with missing or zero sizes
    read as 100. Non-positive candidates are skipped, never returned.
    """
    for source, value in (("override", override), ("fixed", fixed)):
        if value is None:
            continue
        if value > 0:
            return float(value)
        logger.warning("Ignoring non-positive %s density %r", source, value)

    w = width or DEFAULT_DOCUMENT_SIZE
    h = height or DEFAULT_DOCUMENT_SIZE
    density = max(w, h) * density_factor
    if density <= 0:
        # Negative declared sizes; fall back to the default document size
        density = DEFAULT_DOCUMENT_SIZE * density_factor
    logger.debug("Derived density %.4g from document size %gx%g", density, w, h)
    return density
