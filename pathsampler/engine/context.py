"""ExtractionContext — the per-call state shared by tracers.

One context is created per extraction call and never reused, so
concurrent calls on the same PathExtractor do not interfere.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.config import ExtractorConfig
from pathsampler.errors import PointLimitExceeded

logger = logging.getLogger(__name__)


@dataclass
class CursorState:
    """Path-data cursor: lives for one sub-path only."""

    current: tuple[float, float] = (0.0, 0.0)
    subpath_start: tuple[float, float] = (0.0, 0.0)
    last_control: tuple[float, float] = (0.0, 0.0)


@dataclass
class ExtractedPath:
    """One sampled point sequence plus the element it came from."""

    # Nx2 array of (x, y) in drawing order
    points: NDArray[np.float64]
    # Lower-case tag name of the source element
    element: str
    id: str | None = None
    class_name: str | None = None
    # All attributes of the source element
    attributes: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class ExtractionContext:
    """State for one extraction call."""

    config: ExtractorConfig
    # Resolved spacing between points
    density: float
    # Diagnostics collected while sampling (unsupported commands etc.)
    warnings: list[str] = field(default_factory=list)
    # Points committed so far across all elements
    point_total: int = 0
    # Per-element sampling time, keyed by "<tag>#<index>"
    timings_ms: dict[str, float] = field(default_factory=dict)

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning(message)

    def guard(self, count: int | float, element: str) -> None:
        """Fail before allocating ``count`` more points if that would cross the ceiling.

        A non-finite ``count`` (an overflowed length estimate) always fails.
        """
        requested = self.point_total + count
        if not math.isfinite(requested) or requested > self.config.max_points:
            raise PointLimitExceeded(self.config.max_points, element, requested)

    def claim(self, count: int, element: str) -> None:
        """Commit ``count`` emitted points against the ceiling."""
        self.guard(count, element)
        self.point_total += count
