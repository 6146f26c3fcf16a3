"""
Tests for the theme token models.

Covers entry defaults, lenient coercion and category extraction
from nested theme.json paths.
"""

from theme_preview.models import (
    DEFAULT_FONT_WEIGHT,
    ColorEntry,
    FontFamilyEntry,
    FontSizeEntry,
    ThemeDocument,
)


class TestEntries:
    """Tests for individual token entries."""

    def test_font_weight_defaults_to_normal(self):
        font = FontFamilyEntry.model_validate({"name": "Inter", "fontFamily": "Inter"})
        assert font.font_weight == DEFAULT_FONT_WEIGHT == "normal"

    def test_null_font_weight_defaults_to_normal(self):
        font = FontFamilyEntry.model_validate({"name": "Inter", "fontWeight": None})
        assert font.font_weight == "normal"

    def test_numeric_weight_coerced(self):
        font = FontFamilyEntry.model_validate({"fontWeight": 700})
        assert font.font_weight == "700"

    def test_camel_case_aliases(self):
        font = FontFamilyEntry.model_validate({"fontFamily": "Georgia, serif"})
        assert font.font_family == "Georgia, serif"

    def test_empty_slug_is_none(self):
        color = ColorEntry.model_validate({"name": "Primary", "slug": "", "color": "#000"})
        assert color.slug is None

    def test_missing_fields_default_to_empty(self):
        size = FontSizeEntry.model_validate({})
        assert size.name == ""
        assert size.size == ""
        assert size.slug is None

    def test_numeric_size_coerced(self):
        assert FontSizeEntry.model_validate({"size": 16}).size == "16"


class TestThemeDocument:
    """Tests for ThemeDocument.from_dict."""

    def test_all_categories(self, theme_data):
        theme = ThemeDocument.from_dict(theme_data)
        assert [f.name for f in theme.font_families] == ["Inter", "Serif"]
        assert [f.slug for f in theme.font_sizes] == ["small", "large"]
        assert list(theme.spacing) == ["small", "medium"]
        assert theme.palette[0] == ColorEntry(name="Primary", slug="primary", color="#112233")
        assert not theme.is_empty

    def test_no_settings(self):
        theme = ThemeDocument.from_dict({"version": 2})
        assert theme.font_families is None
        assert theme.font_sizes is None
        assert theme.spacing is None
        assert theme.palette is None
        assert theme.is_empty

    def test_empty_categories_are_absent(self):
        theme = ThemeDocument.from_dict(
            {
                "settings": {
                    "typography": {"fontFamilies": [], "fontSizes": []},
                    "spacing": {},
                    "color": {"palette": []},
                }
            }
        )
        assert theme.palette == []
        assert not theme.has_palette
        assert not theme.has_spacing
        assert theme.is_empty

    def test_wrong_container_types_are_absent(self):
        theme = ThemeDocument.from_dict(
            {
                "settings": {
                    "typography": "Inter",
                    "spacing": ["small"],
                    "color": {"palette": {"name": "Primary"}},
                }
            }
        )
        assert theme.is_empty

    def test_non_object_entries_skipped(self):
        theme = ThemeDocument.from_dict(
            {"settings": {"color": {"palette": ["#fff", {"name": "Black", "color": "#000"}]}}}
        )
        assert len(theme.palette) == 1
        assert theme.palette[0].name == "Black"

    def test_nested_spacing_values_skipped(self):
        """Only scalar spacing values are lengths."""
        theme = ThemeDocument.from_dict(
            {"settings": {"spacing": {"units": ["px", "rem"], "gap": "1rem", "base": 8}}}
        )
        assert theme.spacing == {"gap": "1rem", "base": "8"}
