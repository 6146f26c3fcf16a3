"""
Output writer - puts the rendered page on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from theme_preview.constants import DEFAULT_OUTPUT

logger = logging.getLogger(__name__)


def resolve_output_path(
    output_path: Path | str | None = None,
    default: str = DEFAULT_OUTPUT,
) -> Path:
    """Absolute output path; relative paths resolve against the working directory."""
    return Path(output_path or default).resolve()


def write_preview(
    html: str,
    output_path: Path | str | None = None,
    default: str = DEFAULT_OUTPUT,
) -> Path:
    """
    Write the preview document.

    Missing parent directories are created and an existing file is
    overwritten.

    Args:
        html: The rendered document
        output_path: Destination; defaults to ``default`` in the working directory
        default: Filename used when no destination is given

    Returns:
        The absolute path written
    """
    path = resolve_output_path(output_path, default)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.debug(f"Wrote {len(html)} characters to {path}")
    return path
