"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pathsampler import __version__
from pathsampler.dependencies import get_tracer_registry
from pathsampler.engine.registry import TracerRegistry
from pathsampler.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(registry: TracerRegistry = Depends(get_tracer_registry)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        tracers_registered=registry.count,
    )
