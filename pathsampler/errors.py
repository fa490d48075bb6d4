"""Exception taxonomy.

Per-element problems (bad numbers, degenerate sizes) never raise; they
degrade to "no geometry for this element". Only the errors below escape
an extraction call.
"""

from __future__ import annotations


class PathSamplerError(Exception):
    """Base class for all pathsampler errors."""


class ConfigError(PathSamplerError, ValueError):
    """Invalid extractor options."""


class SvgParseError(PathSamplerError):
    """The document is not well-formed XML."""


class PointLimitExceeded(PathSamplerError):
    """Sampling would emit more points than the configured ceiling."""

    def __init__(self, limit: int, element: str, requested: int | float) -> None:
        self.limit = limit
        self.element = element
        self.requested = requested
        super().__init__(
            f"Point limit exceeded while sampling <{element}>: "
            f"{requested} points requested, limit is {limit}"
        )
