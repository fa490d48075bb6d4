"""Sampling engine: tracer registry, per-call context and path-data machine."""

from pathsampler.engine.registry import ShapeKind, get_registry, load_tracers, tracer
from pathsampler.engine.config import ExtractorConfig
from pathsampler.engine.context import CursorState, ExtractedPath, ExtractionContext

__all__ = [
    "ShapeKind",
    "tracer",
    "get_registry",
    "load_tracers",
    "ExtractorConfig",
    "CursorState",
    "ExtractedPath",
    "ExtractionContext",
]
