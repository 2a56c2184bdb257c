"""Image rendering pipeline.

Resolve geometry → resize → dither onto the palette → half-block lines.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger
from PIL import Image

from pic2term.core.color import ColorMode
from pic2term.core.dither import dither
from pic2term.core.geometry import Geometry, resolve
from pic2term.core.palette import PALETTE_ARRAY
from pic2term.core.reader import aspect_ratio
from pic2term.core.render import render
from pic2term.core.resample import FilterName, resize, to_buffer


@dataclass(frozen=True)
class Settings:
    """Processing settings that affect output."""

    width: int | None = None  # columns
    height: int | None = None  # rows
    filter: FilterName = FilterName.NEAREST
    color_mode: ColorMode = ColorMode.ANSI256


def resolve_geometry(
    img: Image.Image,
    settings: Settings,
    terminal_grid: tuple[int, int] | None = None,
) -> Geometry:
    """Target pixel size for img under settings."""
    return resolve(
        aspect_ratio(img),
        width=settings.width,
        height=settings.height,
        terminal_grid=terminal_grid,
    )


def render_image(
    img: Image.Image,
    settings: Settings,
    terminal_grid: tuple[int, int] | None = None,
) -> list[str]:
    """Run the full pipeline on a decoded image.

    Raises:
        GeometryUnresolved: no size in settings and no terminal_grid.
    """
    geometry = resolve_geometry(img, settings, terminal_grid)
    resized = resize(img, geometry.width, geometry.height, settings.filter)
    indices = dither(to_buffer(resized), PALETTE_ARRAY)
    lines = render(indices, geometry.width, geometry.height, settings.color_mode)
    logger.debug("Rendered {} lines", len(lines))
    return lines
