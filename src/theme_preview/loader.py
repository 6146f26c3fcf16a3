"""
Theme loader - reads a token document from disk.

JSON is the native format. Files ending in .yaml or .yml are read
with PyYAML so hand-written themes can skip the braces.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from theme_preview.constants import YAML_SUFFIXES, ErrorMessages
from theme_preview.errors import InvalidJsonError, MissingArgumentError, ThemeNotFoundError
from theme_preview.models import ThemeDocument

logger = logging.getLogger(__name__)


def read_theme_data(path: Path | str | None) -> dict[str, Any]:
    """
    Read and parse the raw theme mapping.

    Args:
        path: Path to the theme document

    Returns:
        The parsed top-level mapping

    Raises:
        MissingArgumentError: If no path was given
        ThemeNotFoundError: If the path is not an existing file
        InvalidJsonError: If the file does not parse to a mapping
    """
    if path is None or str(path) == "":
        raise MissingArgumentError()

    path = Path(path)
    if not path.is_file():
        raise ThemeNotFoundError(path)

    is_yaml = path.suffix.lower() in YAML_SUFFIXES
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text) if is_yaml else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise InvalidJsonError(
            path,
            ErrorMessages.INVALID_JSON.format(
                path=path, format="YAML" if is_yaml else "JSON", reason=e
            ),
        ) from e
    except OSError as e:
        raise ThemeNotFoundError(path) from e

    if not isinstance(data, dict):
        raise InvalidJsonError(path, ErrorMessages.NOT_A_MAPPING.format(path=path))

    logger.debug(f"Read theme {path} ({'yaml' if is_yaml else 'json'})")
    return data


def load_theme(path: Path | str | None) -> ThemeDocument:
    """
    Load a theme document.

    Args:
        path: Path to a theme.json (or .yaml) file

    Returns:
        ThemeDocument with whichever categories the file defines
    """
    return ThemeDocument.from_dict(read_theme_data(path))
