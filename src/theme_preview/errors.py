"""
Error taxonomy for loading a token document.

Every error here is fatal for the run: the CLI prints the usage line
and exits with status 1. Problems inside individual tokens never raise,
they degrade to defaults while rendering.
"""

from __future__ import annotations

from pathlib import Path

from theme_preview.constants import ErrorMessages


class ThemePreviewError(Exception):
    """Base class for unrecoverable preview errors."""


class MissingArgumentError(ThemePreviewError):
    """No input path was supplied."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.MISSING_ARGUMENT)


class ThemeNotFoundError(ThemePreviewError):
    """The input path does not exist or is not a regular file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(ErrorMessages.FILE_NOT_FOUND.format(path=path))


class InvalidJsonError(ThemePreviewError):
    """The input does not parse, or does not hold a mapping."""

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        super().__init__(message)
