"""
Preview tools - MCP tools for rendering theme previews.

Tools for rendering a theme to HTML, estimating responsive sizes
and listing the CSS variables a theme defines.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from theme_preview.config import PreviewSettings
from theme_preview.constants import ErrorMessages, TokenCategory
from theme_preview.core import length_to_approx_pixels
from theme_preview.errors import ThemePreviewError
from theme_preview.loader import load_theme
from theme_preview.render import css_variable, render_page
from theme_preview.writer import write_preview

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _is_bare_name(name: str) -> bool:
    """True for a plain file name with no directory part."""
    return name not in (".", "..") and "/" not in name and "\\" not in name


def register_preview_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
    settings: PreviewSettings | None = None,
) -> dict[str, Any]:
    """
    Register preview tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for rendered previews
        settings: Base preview settings

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    base_settings = settings or PreviewSettings()

    @mcp.tool  # type: ignore[arg-type]
    async def theme_render_preview(
        theme_path: str,
        output_name: str | None = None,
        lang: str | None = None,
    ) -> str:
        """
        Render a theme.json file to an HTML preview page.

        Args:
            theme_path: Path to the theme document
            output_name: Optional output filename (without .html extension)
            lang: Label language ('en' or 'fr')

        Returns:
            JSON string with the written path

        Example:
            theme_render_preview(theme_path="theme.json", lang="fr")
        """
        try:
            run_settings = base_settings.with_overrides(lang=lang)
            theme = load_theme(theme_path)
            html = render_page(theme, run_settings)

            if output_name and not _is_bare_name(output_name):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_OUTPUT_NAME.format(name=output_name),
                    }
                )

            filename = f"{output_name or Path(theme_path).stem}.html"
            path = write_preview(html, output_dir / filename)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "sections": {
                        "font_families": theme.has_font_families,
                        "font_sizes": theme.has_font_sizes,
                        "spacing": theme.has_spacing,
                        "palette": theme.has_palette,
                    },
                }
            )
        except (ThemePreviewError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render preview")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theme_render_preview"] = theme_render_preview

    @mcp.tool  # type: ignore[arg-type]
    async def theme_estimate_size(value: str) -> str:
        """
        Estimate the pixel size of a clamp() expression.

        The estimate averages min, preferred and max. It is a rough
        guide, not what a browser would compute.

        Args:
            value: CSS length, e.g. 'clamp(1rem, 2vw, 2rem)'

        Returns:
            JSON string with the estimate (null when not a clamp())

        Example:
            theme_estimate_size(value="clamp(1rem, 20px, 2vw)")
        """
        pixels = length_to_approx_pixels(
            value, base_settings.root_font_size_px, base_settings.viewport_width_px
        )
        return json.dumps({"status": "success", "value": value, "px": pixels})

    tools["theme_estimate_size"] = theme_estimate_size

    @mcp.tool  # type: ignore[arg-type]
    async def theme_list_tokens(theme_path: str) -> str:
        """
        List the tokens in a theme and their CSS variables.

        Args:
            theme_path: Path to the theme document

        Returns:
            JSON string with tokens grouped by category
        """
        try:
            theme = load_theme(theme_path)
        except ThemePreviewError as e:
            return json.dumps({"status": "error", "message": str(e)})

        namespace = base_settings.namespace

        def token(name: str, category: TokenCategory, slug: str | None, value: str) -> dict:
            return {
                "name": name,
                "value": value,
                "variable": css_variable(category, slug, namespace) or None,
            }

        return json.dumps(
            {
                "status": "success",
                "tokens": {
                    "font_families": [
                        token(f.name, TokenCategory.FONT_FAMILY, f.slug, f.font_family)
                        for f in theme.font_families or []
                    ],
                    "font_sizes": [
                        token(f.name, TokenCategory.FONT_SIZE, f.slug, f.size)
                        for f in theme.font_sizes or []
                    ],
                    "spacing": [
                        token(key, TokenCategory.SPACING, key, value)
                        for key, value in (theme.spacing or {}).items()
                    ],
                    "palette": [
                        token(c.name, TokenCategory.COLOR, c.slug, c.color)
                        for c in theme.palette or []
                    ],
                },
            }
        )

    tools["theme_list_tokens"] = theme_list_tokens

    return tools
