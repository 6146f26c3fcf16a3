"""
Core primitives - CSS length parsing and the pixel size heuristic.
"""

from theme_preview.core.units import (
    ClampExpression,
    length_to_approx_pixels,
    length_to_px,
    parse_clamp,
    parse_leading_number,
    round_half_up,
)

__all__ = [
    "ClampExpression",
    "length_to_approx_pixels",
    "length_to_px",
    "parse_clamp",
    "parse_leading_number",
    "round_half_up",
]
