"""POST /api/extract — sample every drawable element of an SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathsampler.config import Settings
from pathsampler.dependencies import get_settings
from pathsampler.engine.config import ExtractorConfig
from pathsampler.engine.extractor import ExtractionResult, PathExtractor
from pathsampler.errors import ConfigError, PointLimitExceeded, SvgParseError
from pathsampler.models.requests import ExtractRequest
from pathsampler.models.responses import (
    BoundingBoxModel,
    ExtractResponse,
    PathModel,
    PointModel,
)
from pathsampler.utils import geometry

logger = logging.getLogger(__name__)

router = APIRouter()


def _config_from_request(req: ExtractRequest, settings: Settings) -> ExtractorConfig:
    size = req.normalize_to_size
    return ExtractorConfig.from_settings(
        settings,
        point_density=req.point_density,
        density_factor=req.density_factor,
        max_points=req.max_points,
        include_only=req.include_only,
        exclude_elements=req.exclude_elements,
        normalize_to_size=(size.width, size.height) if size else None,
        close_paths=req.close_paths,
    )


def _to_response(result: ExtractionResult) -> ExtractResponse:
    arrays = result.point_arrays
    bx, by, bw, bh = geometry.bounding_box(arrays)
    cx, cy = geometry.center(arrays)
    return ExtractResponse(
        paths=[
            PathModel(
                points=[PointModel(x=float(x), y=float(y)) for x, y in p.points],
                element=p.element,
                id=p.id,
                class_name=p.class_name,
                attributes=p.attributes,
            )
            for p in result.paths
        ],
        density=result.density,
        point_count=result.point_count,
        bounding_box=BoundingBoxModel(x=bx, y=by, width=bw, height=bh),
        total_length=geometry.total_length(arrays),
        center=PointModel(x=cx, y=cy),
        warnings=result.warnings,
        processing_time_ms=round(result.processing_time_ms, 1),
    )


@router.post("/extract", response_model=ExtractResponse)
def extract(req: ExtractRequest, settings: Settings = Depends(get_settings)) -> ExtractResponse:
    try:
        extractor = PathExtractor(_config_from_request(req, settings))
        result = extractor.extract(req.svg)
    except (SvgParseError, ConfigError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except PointLimitExceeded as e:
        logger.warning("Extraction aborted: %s", e)
        raise HTTPException(status_code=413, detail=str(e)) from e
    return _to_response(result)
