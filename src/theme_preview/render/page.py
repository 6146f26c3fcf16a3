"""
Page assembler - wraps rendered sections in a self-contained document.

Sections appear in a fixed order (font families, font sizes, spacing,
color palette) and only when their category is present. The page has
no timestamps or other per-run content, so identical input always
produces identical output.
"""

from __future__ import annotations

import json
from html import escape

from theme_preview.config import PreviewSettings
from theme_preview.models import ThemeDocument
from theme_preview.render.fragments import (
    render_color_swatches,
    render_font_families,
    render_font_sizes,
    render_spacing,
)
from theme_preview.render.locales import Labels, get_labels

STYLESHEET = """
  body { font-family: sans-serif; padding: 2rem; max-width: 900px; margin: auto; }
  h1 { text-align: center; }
  h2 { margin-top: 3rem; border-bottom: 2px solid #ccc; padding-bottom: .5rem; }
  .copyable {
    cursor: pointer;
    user-select: all;
    background: #f0f0f0;
    padding: 2px 4px;
    border-radius: 3px;
    display: inline-block;
  }
  .copyable:hover {
    background: #ddd;
  }
  .color-swatch {
    display: flex;
    align-items: center;
    margin-bottom: 10px;
  }
  .color-box {
    width: 40px; height: 40px; border-radius: 4px; margin-right: 10px; border: 1px solid #ccc;
  }
  .color-info > div {
    margin: 2px 0;
  }
  .font-sample {
    margin-bottom: 20px;
  }
  .sample-text {
    margin-top: 5px;
    border: 1px solid #ddd;
    padding: 5px;
    background: #fafafa;
  }
  .font-size-box {
    border: 1px solid #ddd;
    padding: 4px;
    margin-top: 4px;
  }
  .spacing-bar {
    background: #eee;
    height: 20px;
    margin-top: 4px;
    border: 1px solid #ccc;
  }
  .font-size-sample, .spacing-sample {
    margin-bottom: 20px;
  }
"""


def _js_string(value: str) -> str:
    """Encode text as a JS string literal that is safe inside <script>."""
    return json.dumps(value).replace("</", "<\\/")


def clipboard_script(labels: Labels) -> str:
    """The copyToClipboard() helper used by every copyable variable."""
    return f"""
  function copyToClipboard(text) {{
    if (navigator.clipboard) {{
      navigator.clipboard.writeText(text).then(() => {{
        alert({_js_string(labels.copied)} + text);
      }});
    }} else {{
      alert({_js_string(labels.copy_unsupported)});
    }}
  }}
"""


def render_sections(theme: ThemeDocument, settings: PreviewSettings) -> list[str]:
    """Render the sections present in the theme, in page order."""
    labels = get_labels(settings.lang)
    sections = []

    if theme.has_font_families:
        sections.append(
            f"<h2>{labels.font_families}</h2>{render_font_families(theme.font_families, settings)}"
        )
    if theme.has_font_sizes:
        sections.append(
            f"<h2>{labels.font_sizes}</h2>{render_font_sizes(theme.font_sizes, settings)}"
        )
    if theme.has_spacing:
        sections.append(f"<h2>{labels.spacing}</h2>{render_spacing(theme.spacing, settings)}")
    if theme.has_palette:
        sections.append(
            f"<h2>{labels.palette}</h2>{render_color_swatches(theme.palette, settings)}"
        )

    return sections


def render_page(theme: ThemeDocument, settings: PreviewSettings | None = None) -> str:
    """
    Render the complete preview document.

    Args:
        theme: The loaded token document
        settings: Preview settings (language, title, namespace, heuristics)

    Returns:
        A self-contained HTML document with inline styles and script
    """
    settings = settings or PreviewSettings()
    labels = get_labels(settings.lang)
    title = escape(settings.title) if settings.title else labels.title
    heading = escape(settings.title) if settings.title else labels.heading
    body = "\n\n  ".join(render_sections(theme, settings))

    return f"""<!DOCTYPE html>
<html lang="{labels.html_lang}">
<head>
<meta charset="UTF-8" />
<title>{title}</title>
<style>{STYLESHEET}</style>
<script>{clipboard_script(labels)}</script>
</head>
<body>
  <h1>{heading}</h1>

  {body}

</body>
</html>
"""
