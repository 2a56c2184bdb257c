"""Output size negotiation.

Works out the pixel size an image should be resampled to before
dithering. Each terminal row shows two image rows (the half-block glyph
carries one pixel in the foreground and one in the background), so
heights given in rows are doubled and the terminal is treated as twice
as tall as it reports.
"""

from __future__ import annotations

from typing import NamedTuple

from loguru import logger

from pic2term.core.errors import GeometryUnresolved, PreconditionViolation


class Geometry(NamedTuple):
    """Target buffer size in pixels."""

    width: int
    height: int


def _check_positive(name: str, value: int | None) -> None:
    if value is not None and value <= 0:
        raise PreconditionViolation(f"{name} must be positive, got {value}")


def _fit_terminal(aspect: float, cols: int, rows: int) -> tuple[int, int]:
    """Largest aspect-preserving box inside cols x rows (rows already doubled)."""
    if cols < rows:
        # Width-constrained
        rescaled_h = int(cols / aspect)
        if rescaled_h > rows:
            scale = rows / rescaled_h
            return int(cols * scale), rows
        return cols, rescaled_h

    # Height-constrained
    rescaled_w = int(rows * aspect)
    if rescaled_w > cols:
        scale = cols / rescaled_w
        return cols, int(rows * scale)
    return rescaled_w, rows


def resolve(
    aspect: float,
    width: int | None = None,
    height: int | None = None,
    terminal_grid: tuple[int, int] | None = None,
) -> Geometry:
    """Resolve the target pixel size for an image.

    Args:
        aspect: width / height of the source image.
        width: requested width in columns.
        height: requested height in rows.
        terminal_grid: detected (columns, rows) of the terminal, if any.

    Returns:
        Geometry with both dimensions at least 1.

    Raises:
        GeometryUnresolved: neither width nor height was given and
            terminal_grid is None.
    """
    if not aspect > 0:
        raise PreconditionViolation(f"Aspect ratio must be positive, got {aspect}")
    _check_positive("width", width)
    _check_positive("height", height)

    if height is not None:
        height *= 2

    if width is not None and height is not None:
        # Both explicit: aspect ratio is not enforced
        w, h = width, height
    elif width is not None:
        w, h = width, int(width / aspect)
    elif height is not None:
        w, h = int(height * aspect), height
    else:
        if terminal_grid is None:
            raise GeometryUnresolved(
                "Unable to determine terminal size, pass --width or --height"
            )
        cols, rows = terminal_grid
        _check_positive("terminal columns", cols)
        _check_positive("terminal rows", rows)
        w, h = _fit_terminal(aspect, cols, rows * 2)

    geometry = Geometry(max(1, w), max(1, h))
    logger.debug(
        "Resolved geometry {}x{} (aspect={:.3f}, width={}, height={}, terminal={})",
        geometry.width,
        geometry.height,
        aspect,
        width,
        height,
        terminal_grid,
    )
    return geometry
