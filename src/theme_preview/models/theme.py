"""
Theme token models - the shape of a theme.json document.

A ThemeDocument holds four optional token categories:
- font families (settings.typography.fontFamilies)
- font sizes (settings.typography.fontSizes)
- spacing (settings.spacing, a mapping of key to length)
- color palette (settings.color.palette)

Parsing is lenient: wrong container types read as an absent category,
non-object entries are skipped and scalar values are coerced to text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_FONT_WEIGHT = "normal"


def _as_text(value: Any) -> str:
    """Coerce a scalar token value to text; None becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class _Entry(BaseModel):
    """Shared config for token entries."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class ColorEntry(_Entry):
    """A swatch in the color palette."""

    name: str = Field(default="", description="Display name")
    slug: str | None = Field(default=None, description="Stable identifier")
    color: str = Field(default="", description="CSS color value")

    @field_validator("name", "color", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("slug", mode="before")
    @classmethod
    def coerce_slug(cls, v: Any) -> str | None:
        return _as_text(v) or None


class FontFamilyEntry(_Entry):
    """A font family with an optional weight."""

    name: str = Field(default="", description="Display name")
    slug: str | None = Field(default=None, description="Stable identifier")
    font_family: str = Field(default="", alias="fontFamily", description="CSS font stack")
    font_weight: str = Field(
        default=DEFAULT_FONT_WEIGHT,
        alias="fontWeight",
        description="CSS font weight",
    )

    @field_validator("name", "font_family", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("slug", mode="before")
    @classmethod
    def coerce_slug(cls, v: Any) -> str | None:
        return _as_text(v) or None

    @field_validator("font_weight", mode="before")
    @classmethod
    def default_weight(cls, v: Any) -> str:
        return _as_text(v) or DEFAULT_FONT_WEIGHT


class FontSizeEntry(_Entry):
    """A font size preset; size may be a plain length or a clamp()."""

    name: str = Field(default="", description="Display name")
    slug: str | None = Field(default=None, description="Stable identifier")
    size: str = Field(default="", description="CSS length expression")

    @field_validator("name", "size", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("slug", mode="before")
    @classmethod
    def coerce_slug(cls, v: Any) -> str | None:
        return _as_text(v) or None


class ThemeDocument(BaseModel):
    """
    The token categories of a theme document.

    None means the category is absent. An empty list or mapping is kept
    as-is but reported as absent by the ``has_*`` properties.
    """

    font_families: list[FontFamilyEntry] | None = None
    font_sizes: list[FontSizeEntry] | None = None
    spacing: dict[str, str] | None = None
    palette: list[ColorEntry] | None = None

    model_config = {"frozen": True}

    @property
    def has_font_families(self) -> bool:
        return bool(self.font_families)

    @property
    def has_font_sizes(self) -> bool:
        return bool(self.font_sizes)

    @property
    def has_spacing(self) -> bool:
        return bool(self.spacing)

    @property
    def has_palette(self) -> bool:
        return bool(self.palette)

    @property
    def is_empty(self) -> bool:
        return not (
            self.has_font_families or self.has_font_sizes or self.has_spacing or self.has_palette
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThemeDocument:
        """
        Build a document from parsed theme.json data.

        Args:
            data: The top-level mapping of the document

        Returns:
            ThemeDocument with every category found under ``settings``
        """
        settings = _mapping(data.get("settings"))
        typography = _mapping(settings.get("typography"))
        color = _mapping(settings.get("color"))

        spacing_data = settings.get("spacing")
        spacing = (
            {
                str(key): _as_text(value)
                for key, value in spacing_data.items()
                if not isinstance(value, (dict, list))
            }
            if isinstance(spacing_data, dict)
            else None
        )

        return cls(
            font_families=_entries(typography.get("fontFamilies"), FontFamilyEntry),
            font_sizes=_entries(typography.get("fontSizes"), FontSizeEntry),
            spacing=spacing,
            palette=_entries(color.get("palette"), ColorEntry),
        )


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _entries(value: Any, model: type[_Entry]) -> list[Any] | None:
    """Validate a list of entry objects, skipping anything that isn't one."""
    if not isinstance(value, list):
        return None
    return [model.model_validate(item) for item in value if isinstance(item, dict)]
