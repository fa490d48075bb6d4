"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    tracers_registered: int = 0


class PointModel(BaseModel):
    x: float
    y: float


class BoundingBoxModel(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class PathModel(BaseModel):
    points: list[PointModel] = Field(default_factory=list)
    element: str
    id: str | None = None
    class_name: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)


class ExtractResponse(BaseModel):
    paths: list[PathModel] = Field(default_factory=list)
    density: float = 0.0
    point_count: int = 0
    bounding_box: BoundingBoxModel = Field(default_factory=BoundingBoxModel)
    total_length: float = 0.0
    center: PointModel = Field(default_factory=lambda: PointModel(x=0.0, y=0.0))
    warnings: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    detail: str
