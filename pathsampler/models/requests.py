"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Size(BaseModel):
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class ExtractRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    point_density: float | None = Field(
        default=None,
        gt=0,
        description="Spacing between points; derived from the document size when omitted",
    )
    density_factor: float | None = Field(default=None, gt=0, description="Multiplier on max(width, height)")
    max_points: int | None = Field(default=None, ge=1, description="Safety ceiling on emitted points")
    include_only: list[str] | None = Field(default=None, description="Only these tags (e.g. ['path', 'rect'])")
    exclude_elements: list[str] = Field(default_factory=list, description="Skip these tags")
    normalize_to_size: Size | None = Field(default=None, description="Rescale output to fit this box")
    close_paths: bool = Field(default=True, description="Repeat the first point at the end of closed shapes")
