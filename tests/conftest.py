"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathsampler.engine.config import ExtractorConfig
from pathsampler.engine.context import ExtractionContext
from pathsampler.engine.registry import load_tracers

# Make sure every @tracer has fired before any test looks at the registry
load_tracers()


SIMPLE_LINE_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg width="100" height="100" viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">
  <line x1="10" y1="10" x2="90" y2="90" stroke="black"/>
</svg>'''

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect id="frame" class="outline" x="20" y="20" width="60" height="40"/>
  <circle cx="50" cy="50" r="20"/>
  <ellipse cx="50" cy="50" rx="30" ry="10"/>
  <polygon points="50,10 90,90 10,90"/>
  <polyline points="10,10 50,50 90,10"/>
  <line x1="0" y1="0" x2="100" y2="0"/>
  <path d="M 10 10 L 90 10 L 90 90 Z"/>
</svg>'''

COMPOUND_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 L40 10 L40 40 Z M60 60 L90 60 L90 90"/>
</svg>'''

NESTED_GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="50">
  <g id="outer">
    <g id="inner">
      <circle id="dot" cx="10" cy="10" r="5"/>
    </g>
    <text x="0" y="0">label</text>
  </g>
  <rect x="0" y="0" width="10" height="10"/>
</svg>'''

DEGENERATE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="0"/>
  <ellipse cx="50" cy="50" rx="0" ry="10"/>
  <rect x="0" y="0" width="0" height="0"/>
  <polygon points="10,10 20,20"/>
  <polyline points="10,10"/>
  <path d=""/>
  <circle cx="abc" cy="50" r="10"/>
</svg>'''

ARC_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M3 10 A2 2 0 0 1 5 8 L10 8"/>
</svg>'''

TRANSFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="0" y="0" width="10" height="10" transform="matrix(1 0 0 1 5 5)"/>
  <ellipse cx="0" cy="0" rx="10" ry="5" transform="rotate(90)"/>
</svg>'''


@pytest.fixture
def simple_line_svg() -> str:
    return SIMPLE_LINE_SVG


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def compound_path_svg() -> str:
    return COMPOUND_PATH_SVG


@pytest.fixture
def make_ctx():
    """Build an ExtractionContext with a fixed density and config overrides."""

    def _make(density: float = 1.0, **config) -> ExtractionContext:
        return ExtractionContext(config=ExtractorConfig(**config), density=density)

    return _make
