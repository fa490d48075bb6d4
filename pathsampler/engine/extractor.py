"""PathExtractor — turns SVG documents into sampled point sequences.

density resolver -> tracer per element -> transform -> optional normalization.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.config import ExtractorConfig
from pathsampler.engine.context import ExtractedPath, ExtractionContext
from pathsampler.engine.density import resolve_density
from pathsampler.engine.registry import TracerRegistry, load_tracers
from pathsampler.models.svg_document import ShapeElement, SvgDocument
from pathsampler.svg.parser import parse_svg
from pathsampler.utils import geometry
from pathsampler.utils.transforms import apply_transform

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Everything one extraction call produced."""

    paths: list[ExtractedPath] = field(default_factory=list)
    density: float = 0.0
    warnings: list[str] = field(default_factory=list)
    processing_time_ms: float = 0.0

    @property
    def point_arrays(self) -> list[NDArray[np.float64]]:
        return [p.points for p in self.paths]

    @property
    def point_count(self) -> int:
        return sum(len(p) for p in self.paths)


class PathExtractor:
    """Extracts points along every drawable element of an SVG.

    Configuration is fixed at construction. Each call builds its own
    ExtractionContext, so one extractor can serve concurrent calls; only
    the ``warnings`` convenience property reflects "the last call".
    """

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        registry: TracerRegistry | None = None,
    ) -> None:
        self.config = config or ExtractorConfig()
        self.registry = registry or load_tracers()
        self._last_warnings: list[str] = []

    @property
    def warnings(self) -> list[str]:
        """Diagnostics from the most recent extraction call."""
        return list(self._last_warnings)

    # ── Entry points ─────────────────────────────────────────────────────

    def extract(self, svg_text: str, point_density: float | None = None) -> ExtractionResult:
        """Parse ``svg_text`` and sample every element that passes the filters."""
        return self.extract_document(parse_svg(svg_text), point_density)

    def extract_points(self, svg_text: str, point_density: float | None = None) -> list[NDArray[np.float64]]:
        """Point arrays only, one per non-empty path."""
        return self.extract(svg_text, point_density).point_arrays

    def extract_points_with_metadata(
        self,
        svg_text: str,
        point_density: float | None = None,
    ) -> list[ExtractedPath]:
        """Point arrays annotated with their source element, id, class and attributes."""
        return self.extract(svg_text, point_density).paths

    def extract_points_from_file(
        self,
        path: str | Path,
        point_density: float | None = None,
    ) -> list[NDArray[np.float64]]:
        return self.extract_points(Path(path).read_text(encoding="utf-8"), point_density)

    # ── Core ─────────────────────────────────────────────────────────────

    def extract_document(self, doc: SvgDocument, point_density: float | None = None) -> ExtractionResult:
        start = time.perf_counter()
        config = self.config
        density = resolve_density(
            override=point_density,
            fixed=config.point_density,
            width=doc.width,
            height=doc.height,
            density_factor=config.density_factor,
        )
        ctx = ExtractionContext(config=config, density=density)

        paths: list[ExtractedPath] = []
        for index, element in enumerate(doc.elements):
            if not config.accepts(element.tag):
                continue
            for points in self.trace_element(element, ctx, index):
                paths.append(
                    ExtractedPath(
                        points=points,
                        element=element.tag,
                        id=element.id,
                        class_name=element.class_name,
                        attributes=dict(element.attributes),
                    )
                )

        if config.normalize_to_size is not None:
            _normalize(paths, *config.normalize_to_size)

        elapsed = (time.perf_counter() - start) * 1000
        self._last_warnings = list(ctx.warnings)
        logger.info(
            "Extracted %d paths (%d points) at density %.4g in %.0fms",
            len(paths),
            ctx.point_total,
            density,
            elapsed,
        )
        return ExtractionResult(
            paths=paths,
            density=density,
            warnings=list(ctx.warnings),
            processing_time_ms=elapsed,
        )

    def trace_element(
        self,
        element: ShapeElement,
        ctx: ExtractionContext,
        index: int = 0,
    ) -> list[NDArray[np.float64]]:
        """Sample one element; empty paths are dropped and transforms applied."""
        if element.kind not in self.registry:
            logger.debug("No tracer for <%s>", element.tag)
            return []

        t0 = time.perf_counter()
        traced = self.registry.get(element.kind).fn(element, ctx)
        out: list[NDArray[np.float64]] = []
        for points in traced:
            if len(points) == 0:
                continue
            ctx.claim(len(points), element.tag)
            out.append(apply_transform(points, element.transform))

        key = f"{element.tag}#{index}"
        ctx.timings_ms[key] = (time.perf_counter() - t0) * 1000
        logger.debug("  %s -> %d paths in %.1fms", key, len(out), ctx.timings_ms[key])
        return out


def _normalize(paths: list[ExtractedPath], width: float, height: float) -> None:
    scaled = geometry.normalize_to_size([p.points for p in paths], width, height)
    for item, points in zip(paths, scaled):
        item.points = points
