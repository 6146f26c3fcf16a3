"""
Length heuristics - approximate pixel sizes for CSS length expressions.

Only responsive ``clamp(min, preferred, max)`` expressions get an
estimate: each argument is normalized to pixels and the three are
averaged. This is a display aid for the preview, not a CSS resolver.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from theme_preview.constants import ROOT_FONT_SIZE_PX, VIEWPORT_WIDTH_PX

_CLAMP_RE = re.compile(r"clamp\(([^,]+),\s*([^,]+),\s*([^)]+)\)", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ClampExpression:
    """The three raw arguments of a ``clamp()`` expression."""

    minimum: str
    preferred: str
    maximum: str

    def to_px(
        self,
        root_font_size: float = ROOT_FONT_SIZE_PX,
        viewport_width: float = VIEWPORT_WIDTH_PX,
    ) -> tuple[float, float, float]:
        """Normalize all three arguments to pixels."""
        return (
            length_to_px(self.minimum, root_font_size, viewport_width),
            length_to_px(self.preferred, root_font_size, viewport_width),
            length_to_px(self.maximum, root_font_size, viewport_width),
        )


def parse_clamp(value: object) -> ClampExpression | None:
    """
    Match a ``clamp(a, b, c)`` expression.

    Returns None for empty or non-string values and for anything that
    does not contain a clamp expression.
    """
    if not value or not isinstance(value, str):
        return None

    match = _CLAMP_RE.search(value)
    if match is None:
        return None

    minimum, preferred, maximum = (arg.strip() for arg in match.groups())
    return ClampExpression(minimum=minimum, preferred=preferred, maximum=maximum)


def parse_leading_number(value: str) -> float | None:
    """Parse the numeric prefix of a string ('1.5rem' -> 1.5), like parseFloat."""
    match = _LEADING_NUMBER_RE.match(value.strip())
    if match is None:
        return None
    return float(match.group(0))


def length_to_px(
    value: str,
    root_font_size: float = ROOT_FONT_SIZE_PX,
    viewport_width: float = VIEWPORT_WIDTH_PX,
) -> float:
    """
    Convert a single CSS length to pixels.

    rem is scaled by the root font size, px is taken as-is, vw is a
    percentage of the viewport width. Anything else is read as a bare
    number. Values without a numeric prefix degrade to 0.
    """
    value = value.strip().lower()
    number = parse_leading_number(value)
    if number is None:
        return 0.0

    if value.endswith("rem"):
        return number * root_font_size
    if value.endswith("px"):
        return number
    if value.endswith("vw"):
        return number * viewport_width / 100
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return math.floor(value + 0.5)


def length_to_approx_pixels(
    value: object,
    root_font_size: float = ROOT_FONT_SIZE_PX,
    viewport_width: float = VIEWPORT_WIDTH_PX,
) -> int | None:
    """
    Estimate the pixel size of a responsive length.

    Args:
        value: A CSS length, e.g. ``clamp(1rem, 20px, 2vw)``
        root_font_size: Pixels per rem
        viewport_width: Assumed viewport width for vw units

    Returns:
        The rounded average of the three clamp arguments in pixels,
        or None when the value is not a clamp expression.

    Example:
        >>> length_to_approx_pixels("clamp(1rem, 20px, 2vw)")
        25
    """
    expression = parse_clamp(value)
    if expression is None:
        return None

    pixels = expression.to_px(root_font_size, viewport_width)
    return round_half_up(sum(pixels) / 3)
