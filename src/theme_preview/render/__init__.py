"""
HTML rendering - per-category fragments and the page that holds them.
"""

from theme_preview.render.fragments import (
    css_variable,
    render_color_swatches,
    render_copyable_variable,
    render_font_families,
    render_font_sizes,
    render_spacing,
)
from theme_preview.render.locales import ENGLISH, FRENCH, Labels, get_labels
from theme_preview.render.page import render_page, render_sections

__all__ = [
    "ENGLISH",
    "FRENCH",
    "Labels",
    "css_variable",
    "get_labels",
    "render_color_swatches",
    "render_copyable_variable",
    "render_font_families",
    "render_font_sizes",
    "render_page",
    "render_sections",
    "render_spacing",
]
