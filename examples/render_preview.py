#!/usr/bin/env python3
"""
Example: Render the sample theme in both languages.

Usage:
    python examples/render_preview.py
    # Creates: examples/output/preview-en.html, examples/output/preview-fr.html
"""

from pathlib import Path

from theme_preview.config import PreviewSettings
from theme_preview.core import length_to_approx_pixels
from theme_preview.loader import load_theme
from theme_preview.render import render_page
from theme_preview.writer import write_preview


def main() -> None:
    """Render examples/theme.json."""
    here = Path(__file__).parent
    theme = load_theme(here / "theme.json")

    print("Font size estimates:")
    for font_size in theme.font_sizes or []:
        pixels = length_to_approx_pixels(font_size.size)
        estimate = f"~{pixels}px" if pixels is not None else "-"
        print(f"  {font_size.name:<8} {font_size.size:<40} {estimate}")

    for lang in ("en", "fr"):
        html = render_page(theme, PreviewSettings(lang=lang))
        path = write_preview(html, here / "output" / f"preview-{lang}.html")
        print(f"Created: {path}")


if __name__ == "__main__":
    main()
