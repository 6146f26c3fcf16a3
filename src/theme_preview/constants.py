"""
Constants and enums for the theme preview.

No magic strings - use enums for token categories and a message table
for everything printed to the user.
"""

from enum import Enum

# Size heuristic constants. The viewport width is a desktop guess, not
# something derived from the theme.
ROOT_FONT_SIZE_PX = 16
VIEWPORT_WIDTH_PX = 1920

# CSS custom property namespace used by WordPress presets
DEFAULT_NAMESPACE = "wp"

DEFAULT_OUTPUT = "preview-theme.html"
DEFAULT_LANG = "en"

# Extensions parsed as YAML, everything else is JSON
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class TokenCategory(str, Enum):
    """
    Token categories, valued by their CSS preset slug.

    The value is what appears in ``var(--wp--preset--<category>--<slug>)``.
    """

    COLOR = "color"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    SPACING = "spacing"


class Platform(str, Enum):
    """Platform families with a distinct file-open command."""

    MACOS = "darwin"
    WINDOWS = "win32"
    POSIX = "posix"


class ErrorMessages:
    """Standardized error messages."""

    USAGE = "Usage: theme-preview ./theme.json [path/to/output.html] [--open]"
    MISSING_ARGUMENT = "No theme file given."
    FILE_NOT_FOUND = "Theme file not found: '{path}'."
    INVALID_JSON = "Theme file '{path}' is not valid {format}: {reason}"
    NOT_A_MAPPING = "Theme file '{path}' must contain an object at the top level."
    OPEN_FAILED = "Could not launch '{command}' for {path}: {reason}"
    WRITE_FAILED = "Could not write preview: {reason}"
    INVALID_OUTPUT_NAME = "Invalid output name: '{name}'. Use a bare file name."


class SuccessMessages:
    """Standardized success messages."""

    FILE_WRITTEN = "Wrote preview: {path}"
    OPENING = "Opening in the default browser..."
