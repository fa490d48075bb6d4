"""SVG parser — facade over xml.etree.ElementTree.

Converts raw SVG text -> SvgDocument with ShapeElements in document order.
Only tags with a ShapeKind are kept; groups, defs and text are walked
through but not drawn.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from pathsampler.engine.registry import ShapeKind
from pathsampler.errors import SvgParseError
from pathsampler.models.svg_document import ShapeElement, SvgDocument
from pathsampler.utils.numbers import parse_float, parse_numbers

logger = logging.getLogger(__name__)


def local_name(name: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""
    return name.rsplit("}", 1)[-1]


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG text into an SvgDocument."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"SVG parsing error: {e}") from e

    doc = SvgDocument()
    _read_dimensions(root, doc)

    for node in root.iter():
        if not isinstance(node.tag, str):
            continue
        tag = local_name(node.tag).lower()
        kind = ShapeKind.from_tag(tag)
        if kind is None:
            if tag != "svg":
                doc.skipped_tags[tag] = doc.skipped_tags.get(tag, 0) + 1
            continue
        attrs = {local_name(k): v for k, v in node.attrib.items()}
        doc.elements.append(ShapeElement(kind=kind, attributes=attrs))

    logger.info(
        "Parsed SVG: %d drawable elements, size %s×%s",
        len(doc.elements),
        doc.width,
        doc.height,
    )
    return doc


def load_svg(path: str | Path) -> SvgDocument:
    """Read and parse an SVG file (UTF-8)."""
    return parse_svg(Path(path).read_text(encoding="utf-8"))


def _read_dimensions(root: ET.Element, doc: SvgDocument) -> None:
    """viewBox width/height first, then the root's width/height attributes."""
    viewbox = root.get("viewBox")
    if viewbox:
        values = parse_numbers(viewbox)
        if len(values) >= 4:
            doc.viewbox = (values[0], values[1], values[2], values[3])
            doc.width = values[2]
            doc.height = values[3]

    if doc.width is None or doc.height is None:
        doc.width = parse_float(root.get("width"))
        doc.height = parse_float(root.get("height"))
