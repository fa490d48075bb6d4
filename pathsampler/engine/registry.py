"""Tracer registry — every shape kind maps to one standalone tracer function.

Usage:
    @tracer(ShapeKind.CIRCLE)
    def trace_circle(element: ShapeElement, ctx: ExtractionContext) -> list[NDArray]:
        return [points]

Adding a new shape = adding a ShapeKind member and one tracer module.
Nothing else changes.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# (element, ctx) -> one point array per traced path
TracerFn = Callable[..., list]


class ShapeKind(str, enum.Enum):
    LINE = "line"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    RECT = "rect"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    PATH = "path"

    @classmethod
    def from_tag(cls, tag: str) -> ShapeKind | None:
        try:
            return cls(tag.lower())
        except ValueError:
            return None


@dataclass
class TracerSpec:
    kind: ShapeKind
    fn: TracerFn
    description: str = ""


class TracerRegistry:
    """Registry of one tracer per shape kind."""

    def __init__(self) -> None:
        self._tracers: dict[ShapeKind, TracerSpec] = {}

    def register(self, spec: TracerSpec) -> None:
        if spec.kind in self._tracers:
            raise ValueError(f"Duplicate tracer for shape: {spec.kind.value}")
        self._tracers[spec.kind] = spec
        logger.debug("Registered tracer for <%s>", spec.kind.value)

    def get(self, kind: ShapeKind) -> TracerSpec:
        return self._tracers[kind]

    def __contains__(self, kind: object) -> bool:
        return kind in self._tracers

    def all(self) -> list[TracerSpec]:
        return sorted(self._tracers.values(), key=lambda s: s.kind.value)

    @property
    def count(self) -> int:
        return len(self._tracers)


# Module-level singleton
_registry = TracerRegistry()


def get_registry() -> TracerRegistry:
    return _registry


def tracer(kind: ShapeKind, *, description: str = ""):
    """Decorator to register a tracer function."""

    def decorator(fn: TracerFn) -> TracerFn:
        _registry.register(TracerSpec(kind=kind, fn=fn, description=description))
        return fn

    return decorator


def load_tracers() -> TracerRegistry:
    """Import every module in ``pathsampler.engine.tracers`` so @tracer decorators fire."""
    package = importlib.import_module("pathsampler.engine.tracers")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry
