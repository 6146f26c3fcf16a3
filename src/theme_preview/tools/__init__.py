"""
MCP tool implementations.

- preview - Render previews, estimate sizes, list tokens
"""

from theme_preview.tools.preview import register_preview_tools

__all__ = ["register_preview_tools"]
