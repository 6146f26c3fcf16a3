"""
Fragment renderers - one HTML fragment per token category.

Every renderer is a pure function of its entries and the settings.
Entries with a slug (spacing: the key) get a copyable CSS variable;
entries without one render without it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape

from theme_preview.config import PreviewSettings
from theme_preview.constants import DEFAULT_NAMESPACE, TokenCategory
from theme_preview.core import length_to_approx_pixels
from theme_preview.models import ColorEntry, FontFamilyEntry, FontSizeEntry
from theme_preview.render.locales import Labels, get_labels

_DEFAULT_SETTINGS = PreviewSettings()


def css_variable(
    category: TokenCategory,
    slug: str | None,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """
    Build the CSS custom property reference for a preset.

    Returns an empty string when there is no slug.

    Example:
        >>> css_variable(TokenCategory.COLOR, "primary")
        'var(--wp--preset--color--primary)'
    """
    if not slug:
        return ""
    return f"var(--{namespace}--preset--{category.value}--{slug})"


def render_copyable_variable(variable: str, labels: Labels | None = None) -> str:
    """Clickable code element that copies ``variable`` to the clipboard."""
    if not variable:
        return ""
    labels = labels or get_labels(_DEFAULT_SETTINGS.lang)
    text = escape(variable)
    return (
        f'<code class="copyable" title="{escape(labels.copy_title)}" '
        f'data-copy="{text}" onclick="copyToClipboard(this.dataset.copy)">{text}</code>'
    )


def _approx(pixels: int | None) -> str:
    return f" — ~{pixels}px" if pixels is not None else ""


def _suffix(fragment: str) -> str:
    return f" — {fragment}" if fragment else ""


def _estimate(value: str, settings: PreviewSettings) -> int | None:
    return length_to_approx_pixels(value, settings.root_font_size_px, settings.viewport_width_px)


def render_color_swatches(
    colors: Iterable[ColorEntry],
    settings: PreviewSettings | None = None,
) -> str:
    """Render the palette as swatches with name, variable and value."""
    settings = settings or _DEFAULT_SETTINGS
    labels = get_labels(settings.lang)
    parts = []
    for color in colors:
        variable = css_variable(TokenCategory.COLOR, color.slug, settings.namespace)
        value = escape(color.color)
        parts.append(
            f"""
      <div class="color-swatch">
        <div class="color-box" style="background:{value}"></div>
        <div class="color-info">
          <div><strong>{escape(color.name)}</strong></div>
          <div>{render_copyable_variable(variable, labels)}</div>
          <div>{value}</div>
        </div>
      </div>"""
        )
    return "".join(parts)


def render_font_families(
    fonts: Iterable[FontFamilyEntry],
    settings: PreviewSettings | None = None,
) -> str:
    """Render a sample sentence in each font family and weight."""
    settings = settings or _DEFAULT_SETTINGS
    labels = get_labels(settings.lang)
    parts = []
    for font in fonts:
        variable = css_variable(TokenCategory.FONT_FAMILY, font.slug, settings.namespace)
        copyable = _suffix(render_copyable_variable(variable, labels))
        weight = escape(font.font_weight)
        parts.append(
            f"""
      <div class="font-sample" style="font-family:{escape(font.font_family)}; font-weight:{weight}">
        <div><strong>{escape(font.name)}</strong> — {labels.weight}: {weight}{copyable}</div>
        <div class="sample-text">{escape(labels.sample_text)}</div>
      </div>
    """
        )
    return "".join(parts)


def render_font_sizes(
    font_sizes: Iterable[FontSizeEntry],
    settings: PreviewSettings | None = None,
) -> str:
    """Render each font size with its CSS value and approximate pixels."""
    settings = settings or _DEFAULT_SETTINGS
    labels = get_labels(settings.lang)
    parts = []
    for font_size in font_sizes:
        variable = css_variable(TokenCategory.FONT_SIZE, font_size.slug, settings.namespace)
        copyable = _suffix(render_copyable_variable(variable, labels))
        size = escape(font_size.size)
        pixels = _estimate(font_size.size, settings)
        parts.append(
            f"""
      <div class="font-size-sample">
        <div><strong>{escape(font_size.name)}</strong> — {labels.css_size}: {size}{_approx(pixels)}{copyable}</div>
        <div class="font-size-box" style="font-size:{size}">
          {escape(labels.sample_text)}
        </div>
      </div>
    """
        )
    return "".join(parts)


def render_spacing(
    spacing: Mapping[str, str],
    settings: PreviewSettings | None = None,
) -> str:
    """Render each spacing step as a bar of its (approximate) width."""
    settings = settings or _DEFAULT_SETTINGS
    labels = get_labels(settings.lang)
    parts = []
    for key, value in spacing.items():
        variable = css_variable(TokenCategory.SPACING, key, settings.namespace)
        pixels = _estimate(value, settings)
        width = f"{pixels}px" if pixels is not None else escape(value)
        parts.append(
            f"""
      <div class="spacing-sample">
        <div><strong>{escape(key)}</strong> — {labels.css_value}: {escape(value)}{_approx(pixels)}{_suffix(render_copyable_variable(variable, labels))}</div>
        <div class="spacing-bar" style="width:{width}"></div>
      </div>
    """
        )
    return "".join(parts)
