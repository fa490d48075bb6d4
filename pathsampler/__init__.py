"""pathsampler — sample SVG shapes into ordered point sequences."""

from pathsampler.engine.config import ExtractorConfig
from pathsampler.engine.context import ExtractedPath
from pathsampler.engine.extractor import ExtractionResult, PathExtractor
from pathsampler.errors import ConfigError, PathSamplerError, PointLimitExceeded, SvgParseError

__version__ = "0.1.0"

__all__ = [
    "ExtractorConfig",
    "ExtractedPath",
    "ExtractionResult",
    "PathExtractor",
    "PathSamplerError",
    "ConfigError",
    "SvgParseError",
    "PointLimitExceeded",
]
