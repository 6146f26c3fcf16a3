#!/usr/bin/env python3
"""
MCP server for theme previews.

    theme-preview-mcp [--transport stdio|http] [--output-dir DIR] [--config preview.yaml]

Previews rendered by the tools land in --output-dir. Settings from
--config (and --lang) apply to every tool call.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from theme_preview.config import LOCALE_CHOICES, PreviewSettings, load_settings
from theme_preview.tools import register_preview_tools

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "theme-preview"
DEFAULT_OUTPUT_DIR = Path("output")


def create_server(output_dir: Path, settings: PreviewSettings) -> ChukMCPServer:
    """
    Build the MCP server with the preview tools registered.

    Args:
        output_dir: Directory for rendered previews
        settings: Settings shared by every tool call

    Returns:
        The configured server, not yet running
    """
    from chuk_mcp_server import ChukMCPServer

    mcp = ChukMCPServer(SERVER_NAME)
    tools = register_preview_tools(mcp, output_dir, settings)

    logger.info(f"Registered {len(tools)} tools: {', '.join(sorted(tools))}")
    logger.info(f"  Output dir: {output_dir}")
    logger.info(f"  Namespace: {settings.namespace}, lang: {settings.lang}")
    return mcp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="theme-preview-mcp",
        description="Serve theme.json preview tools over MCP",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Where rendered previews are written (default: ./output)",
    )
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument("--lang", choices=LOCALE_CHOICES, default=None, help="Label language")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, build the server and run it on the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = load_settings(args.config).with_overrides(lang=args.lang)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    mcp = create_server(args.output_dir.resolve(), settings)

    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Listening on http:{args.port}")
        asyncio.run(mcp.run_http(port=args.port))
    return 0


if __name__ == "__main__":
    sys.exit(main())
