"""Command-line interface for pic2term."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

from loguru import logger

from pic2term.core.color import ColorMode
from pic2term.core.errors import GeometryUnresolved
from pic2term.core.resample import FilterName


def _package_version() -> str:
    try:
        return version("pic2term")
    except PackageNotFoundError:
        return "unknown"


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pic2term",
        description="Render images to the terminal with Unicode half blocks.",
    )
    parser.add_argument("file", help="Image file path or HTTP(S) URL.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Width in columns to resize the image to.",
    )
    parser.add_argument(
        "--height",
        type=_positive_int,
        default=None,
        help="Height in rows to resize the image to.",
    )
    parser.add_argument(
        "--filter",
        choices=[f.value for f in FilterName],
        default=FilterName.NEAREST.value,
        help="Filter used when downscaling (default: nearest).",
    )
    parser.add_argument(
        "--color",
        choices=[c.value for c in ColorMode],
        default=ColorMode.ANSI256.value,
        help="Color mode (default: 256).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from pic2term.core.processor import Settings, render_image
    from pic2term.core.reader import load_image
    from pic2term.utils.terminal import get_terminal_size

    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    settings = Settings(
        width=args.width,
        height=args.height,
        filter=FilterName(args.filter),
        color_mode=ColorMode(args.color),
    )

    try:
        img = load_image(args.file)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    terminal_grid = None
    if settings.width is None and settings.height is None:
        terminal_grid = get_terminal_size()
        logger.debug("Detected terminal grid: {}", terminal_grid)

    try:
        lines = render_image(img, settings, terminal_grid)
    except GeometryUnresolved as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in lines:
        print(line)
