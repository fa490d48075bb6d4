"""Extractor configuration — immutable per PathExtractor instance."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathsampler.errors import ConfigError

if TYPE_CHECKING:
    from pathsampler.config import Settings

DEFAULT_DENSITY_FACTOR = 0.0075
DEFAULT_MAX_POINTS = 1_000_000


def _tag_set(tags: Iterable[str] | None) -> frozenset[str] | None:
    if tags is None:
        return None
    return frozenset(t.lower() for t in tags)


@dataclass(frozen=True)
class ExtractorConfig:
    """Controls density, filtering and output shaping.

    Frozen so concurrent extractions can share one instance without
    snapshotting it.
    """

    # Fixed spacing between points. None = derive from document size.
    point_density: float | None = None
    # density = max(doc width, doc height) * density_factor
    density_factor: float = DEFAULT_DENSITY_FACTOR
    # Safety ceiling on points emitted by one extraction call
    max_points: int = DEFAULT_MAX_POINTS

    # Tag filters (lower-case tag names)
    include_only: frozenset[str] | None = None
    exclude_elements: frozenset[str] = field(default_factory=frozenset)

    # Rescale output to fit (width, height), keeping aspect ratio
    normalize_to_size: tuple[float, float] | None = None

    # Duplicate the first point at the end of closed shapes
    close_paths: bool = True

    def __post_init__(self) -> None:
        if self.point_density is not None and not self.point_density > 0:
            raise ConfigError(f"point_density must be > 0, got {self.point_density}")
        if not self.density_factor > 0:
            raise ConfigError(f"density_factor must be > 0, got {self.density_factor}")
        if self.max_points < 1:
            raise ConfigError(f"max_points must be >= 1, got {self.max_points}")
        if self.normalize_to_size is not None:
            w, h = self.normalize_to_size
            if w <= 0 or h <= 0:
                raise ConfigError(f"normalize_to_size must be positive, got {self.normalize_to_size}")
        # Accept any iterable of tags; store lower-cased frozensets
        object.__setattr__(self, "include_only", _tag_set(self.include_only))
        object.__setattr__(self, "exclude_elements", _tag_set(self.exclude_elements) or frozenset())

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> ExtractorConfig:
        """Defaults from ``settings`` (the process settings if omitted), with keyword overrides."""
        if settings is None:
            from pathsampler.config import settings

        values = {
            "density_factor": settings.default_density_factor,
            "max_points": settings.default_max_points,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def accepts(self, tag: str) -> bool:
        """Tag passes the include/exclude filters."""
        tag = tag.lower()
        if self.include_only is not None and tag not in self.include_only:
            return False
        return tag not in self.exclude_elements
