"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def theme_data() -> dict:
    """A theme document with all four token categories."""
    return {
        "version": 2,
        "settings": {
            "typography": {
                "fontFamilies": [
                    {"name": "Inter", "slug": "inter", "fontFamily": "Inter, sans-serif"},
                    {"name": "Serif", "fontFamily": "Georgia, serif", "fontWeight": "700"},
                ],
                "fontSizes": [
                    {"name": "Small", "slug": "small", "size": "0.875rem"},
                    {"name": "Large", "slug": "large", "size": "clamp(1rem, 20px, 2vw)"},
                ],
            },
            "spacing": {
                "small": "clamp(0.5rem, 1vw, 1rem)",
                "medium": "2rem",
            },
            "color": {
                "palette": [
                    {"name": "Primary", "slug": "primary", "color": "#112233"},
                    {"name": "Accent", "color": "#ff0066"},
                ]
            },
        },
    }


@pytest.fixture
def theme_path(temp_dir: Path, theme_data: dict) -> Path:
    """theme_data written to a theme.json file."""
    path = temp_dir / "theme.json"
    path.write_text(json.dumps(theme_data), encoding="utf-8")
    return path
