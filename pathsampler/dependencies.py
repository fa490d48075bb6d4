"""FastAPI dependency injection."""

from __future__ import annotations

from pathsampler.config import Settings, settings
from pathsampler.engine.registry import TracerRegistry, load_tracers


def get_settings() -> Settings:
    return settings


def get_tracer_registry() -> TracerRegistry:
    return load_tracers()
