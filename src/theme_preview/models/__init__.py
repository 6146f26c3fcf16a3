"""
Pydantic models for theme token documents.

This module provides:
- ThemeDocument: The four token categories of a theme
- ColorEntry: Palette swatch
- FontFamilyEntry: Font family with weight
- FontSizeEntry: Font size preset
"""

from theme_preview.models.theme import (
    DEFAULT_FONT_WEIGHT,
    ColorEntry,
    FontFamilyEntry,
    FontSizeEntry,
    ThemeDocument,
)

__all__ = [
    "DEFAULT_FONT_WEIGHT",
    "ColorEntry",
    "FontFamilyEntry",
    "FontSizeEntry",
    "ThemeDocument",
]
