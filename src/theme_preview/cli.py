#!/usr/bin/env python3
"""
Command line entry point for theme-preview.

    theme-preview ./theme.json [path/to/output.html] [--open]

Reads a theme document, renders the preview page and writes it. With
--open the page is handed to the platform's default viewer.
"""

import argparse
import logging
import sys

import yaml

from theme_preview.config import LOCALE_CHOICES, load_settings
from theme_preview.constants import ErrorMessages, SuccessMessages
from theme_preview.errors import ThemePreviewError
from theme_preview.loader import load_theme
from theme_preview.opener import select_opener
from theme_preview.render import render_page
from theme_preview.writer import write_preview

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="theme-preview",
        description="Render a theme.json design-token file as a static HTML preview",
    )
    # Optional at the parser level so a missing input reports our own usage line
    parser.add_argument("input", nargs="?", help="Path to theme.json (or .yaml)")
    parser.add_argument(
        "output",
        nargs="?",
        help="Output HTML path (default: preview-theme.html in the current directory)",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open the preview in the default browser after writing it",
    )
    parser.add_argument(
        "--lang",
        choices=LOCALE_CHOICES,
        default=None,
        help="Label language (default: en)",
    )
    parser.add_argument("--title", default=None, help="Page title")
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter; returns the process exit status."""
    # Intermixed so --open may also sit between the two positionals
    args = build_parser().parse_intermixed_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = load_settings(args.config).with_overrides(lang=args.lang, title=args.title)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        theme = load_theme(args.input)
    except ThemePreviewError as e:
        logger.debug(f"Failed to load theme: {e!r}")
        print(e, file=sys.stderr)
        print(ErrorMessages.USAGE, file=sys.stderr)
        return 1

    html = render_page(theme, settings)
    try:
        path = write_preview(html, args.output, settings.default_output)
    except OSError as e:
        print(ErrorMessages.WRITE_FAILED.format(reason=e), file=sys.stderr)
        return 1
    print(SuccessMessages.FILE_WRITTEN.format(path=path))

    if args.open:
        print(SuccessMessages.OPENING)
        select_opener().launch(path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
