"""Turn a grid of palette indices into half-block terminal lines.

Rows are taken two at a time. The lower pixel becomes the foreground of
a lower-half block and the upper pixel its background, so one character
cell shows two pixels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pic2term.core.color import RESET, ColorMode, cell_escape
from pic2term.core.errors import PreconditionViolation

LOWER_HALF_BLOCK = "▄"
FULL_BLOCK = "█"


@dataclass(frozen=True)
class TerminalCell:
    fg: int
    bg: int | None
    glyph: str


def cells_for_rows(
    upper: Sequence[int], lower: Sequence[int] | None
) -> list[TerminalCell]:
    """Build the cells for one terminal line.

    Without a lower row (odd image height) each cell is a full block in
    the upper row's color with no background.
    """
    if lower is None:
        return [TerminalCell(fg=int(top), bg=None, glyph=FULL_BLOCK) for top in upper]
    return [
        TerminalCell(fg=int(bottom), bg=int(top), glyph=LOWER_HALF_BLOCK)
        for top, bottom in zip(upper, lower)
    ]


def format_cells(cells: Sequence[TerminalCell], mode: ColorMode) -> str:
    """Join cells into one line, skipping escapes that repeat the last one."""
    if mode == ColorMode.NONE:
        return "".join(cell.glyph for cell in cells)

    parts: list[str] = []
    prev_escape = ""
    for cell in cells:
        esc = cell_escape(cell.fg, cell.bg, mode)
        if esc != prev_escape:
            parts.append(esc)
            prev_escape = esc
        parts.append(cell.glyph)

    if prev_escape:
        parts.append(RESET)
    return "".join(parts)


def render(
    grid: Sequence[int],
    width: int,
    height: int,
    mode: ColorMode = ColorMode.ANSI256,
) -> list[str]:
    """Render a raster-order index grid as ceil(height / 2) lines."""
    if width <= 0 or height <= 0:
        raise PreconditionViolation(f"Invalid grid size {width}x{height}")
    if len(grid) != width * height:
        raise PreconditionViolation(
            f"Grid has {len(grid)} entries, expected {width * height}"
        )

    rows = [grid[y * width : (y + 1) * width] for y in range(height)]
    lines = []
    for y in range(0, height, 2):
        lower = rows[y + 1] if y + 1 < height else None
        lines.append(format_cells(cells_for_rows(rows[y], lower), mode))
    return lines
