"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathsampler import __version__
from pathsampler.config import settings
from pathsampler.engine.registry import load_tracers

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathsampler_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="pathsampler",
        description="SVG shape sampling — ordered point sequences for plotters and animation",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all tracer modules to trigger registration
    load_tracers()

    from pathsampler.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
