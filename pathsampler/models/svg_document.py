"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathsampler.engine.registry import ShapeKind
from pathsampler.utils.numbers import parse_float


class ShapeElement(BaseModel):
    """One drawable element: its kind plus raw attribute strings."""

    kind: ShapeKind
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def tag(self) -> str:
        return self.kind.value

    @property
    def id(self) -> str | None:
        return self.attributes.get("id") or None

    @property
    def class_name(self) -> str | None:
        return self.attributes.get("class") or None

    @property
    def transform(self) -> str | None:
        return self.attributes.get("transform")

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    def number(self, name: str, default: float | None = 0.0) -> float | None:
        """Numeric attribute; ``default`` when missing, None when malformed."""
        return parse_float(self.attributes.get(name), default)


class SvgDocument(BaseModel):
    """Represents a parsed SVG file."""

    # Declared size: viewBox width/height first, then width/height attributes
    width: float | None = None
    height: float | None = None
    viewbox: tuple[float, float, float, float] | None = None
    # Drawable elements in document order
    elements: list[ShapeElement] = Field(default_factory=list)
    # Tags skipped because no tracer handles them
    skipped_tags: dict[str, int] = Field(default_factory=dict)
