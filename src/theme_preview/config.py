"""
Preview settings.

Settings are a frozen model with defaults for every field. They can be
loaded from a YAML file and overridden field by field from the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from theme_preview.constants import (
    DEFAULT_LANG,
    DEFAULT_NAMESPACE,
    DEFAULT_OUTPUT,
    ROOT_FONT_SIZE_PX,
    VIEWPORT_WIDTH_PX,
)

logger = logging.getLogger(__name__)

Lang = Literal["en", "fr"]
LOCALE_CHOICES: tuple[str, ...] = ("en", "fr")


class PreviewSettings(BaseModel):
    """Knobs for rendering and writing a preview page."""

    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="CSS custom property namespace (var(--<namespace>--preset--...))",
    )
    root_font_size_px: float = Field(
        default=ROOT_FONT_SIZE_PX,
        gt=0,
        description="Pixels per rem",
    )
    viewport_width_px: float = Field(
        default=VIEWPORT_WIDTH_PX,
        gt=0,
        description="Assumed viewport width for vw units",
    )
    lang: Lang = Field(default=DEFAULT_LANG, description="Label language")
    title: str | None = Field(default=None, description="Page title override")
    default_output: str = Field(
        default=DEFAULT_OUTPUT,
        description="Output filename used when none is given",
    )

    model_config = {"frozen": True, "extra": "ignore"}

    def with_overrides(self, **overrides: Any) -> PreviewSettings:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return self.model_validate({**self.model_dump(), **changes})


def load_settings(path: Path | str | None = None) -> PreviewSettings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file with a mapping of setting names to values.
            None returns the defaults.

    Returns:
        PreviewSettings

    Raises:
        FileNotFoundError: If the path does not exist
        ValueError: If the file does not hold a mapping
    """
    if path is None:
        return PreviewSettings()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")

    logger.debug(f"Loaded settings from {path}: {sorted(data)}")
    return PreviewSettings.model_validate(data)
