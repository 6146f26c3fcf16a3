"""
UI labels for the preview page.

English is the default. French matches the labels of the original
preview tool.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Labels:
    """Every piece of fixed text that appears on the page."""

    html_lang: str
    title: str
    heading: str
    font_families: str
    font_sizes: str
    spacing: str
    palette: str
    weight: str
    css_size: str
    css_value: str
    sample_text: str
    copy_title: str
    copied: str
    copy_unsupported: str


ENGLISH = Labels(
    html_lang="en",
    title="Preview theme.json",
    heading="theme.json preview",
    font_families="Typography",
    font_sizes="Font sizes",
    spacing="Spacing",
    palette="Color palette",
    weight="weight",
    css_size="CSS size",
    css_value="CSS value",
    sample_text="The quick brown fox jumps over the lazy dog.",
    copy_title="Copy CSS variable",
    copied="Copied to clipboard: ",
    copy_unsupported="Unable to copy (clipboard not supported)",
)

FRENCH = Labels(
    html_lang="fr",
    title="Preview theme.json",
    heading="Preview du theme.json",
    font_families="Typographies",
    font_sizes="Tailles de police",
    spacing="Espacements",
    palette="Palette de couleurs",
    weight="poids",
    css_size="taille CSS",
    css_value="valeur CSS",
    sample_text="Le vif renard brun saute par-dessus le chien paresseux.",
    copy_title="Copier la variable CSS",
    copied="Copié dans le presse-papiers : ",
    copy_unsupported="Impossible de copier (fonction non supportée)",
)

LOCALES: dict[str, Labels] = {"en": ENGLISH, "fr": FRENCH}


def get_labels(lang: str) -> Labels:
    """Labels for a language code; unknown codes fall back to English."""
    return LOCALES.get(lang, ENGLISH)
