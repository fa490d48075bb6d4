"""Lenient number parsing for SVG attribute strings. No engine imports."""

from __future__ import annotations

import math
import re

# SVG number grammar: sign, digits with optional fraction, optional exponent.
# Matches "1-2" as two numbers and ".5.5" as two numbers, like browsers do.
NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_LEADING_NUMBER_RE = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_float(value: str | None, default: float | None = None) -> float | None:
    """Parse the leading number of an attribute value ("12.5px" -> 12.5).

    Missing values return ``default``. Unparsable or non-finite values
    return None so callers can treat the element as malformed.
    """
    if value is None or value.strip() == "":
        return default
    m = _LEADING_NUMBER_RE.match(value)
    if not m:
        return None
    number = float(m.group(1))
    if not math.isfinite(number):
        return None
    return number


def parse_numbers(text: str) -> list[float]:
    """Extract every well-formed finite number from ``text``, in order.

    Anything that is not a number is dropped rather than reported.
    """
    numbers: list[float] = []
    for token in NUMBER_RE.findall(text):
        number = float(token)
        if math.isfinite(number):
            numbers.append(number)
    return numbers
