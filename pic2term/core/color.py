"""ANSI escape formatting for palette indices."""

from __future__ import annotations

from enum import Enum

from pic2term.core.palette import palette_rgb


class ColorMode(str, Enum):
    NONE = "none"
    ANSI256 = "256"
    TRUECOLOR = "truecolor"


def ansi256_fg(color_idx: int) -> str:
    """Return ANSI escape for 256-color foreground."""
    return f"\033[38;5;{color_idx}m"


def ansi256_bg(color_idx: int) -> str:
    """Return ANSI escape for 256-color background."""
    return f"\033[48;5;{color_idx}m"


def truecolor_fg(r: int, g: int, b: int) -> str:
    """Return ANSI escape for truecolor (24-bit) foreground."""
    return f"\033[38;2;{r};{g};{b}m"


def truecolor_bg(r: int, g: int, b: int) -> str:
    """Return ANSI escape for truecolor (24-bit) background."""
    return f"\033[48;2;{r};{g};{b}m"


RESET = "\033[0m"


def cell_escape(fg: int, bg: int | None, mode: ColorMode) -> str:
    """Escape prefix selecting the colors of one cell.

    A cell without a background resets first so it never inherits the
    background of the cell before it.
    """
    if mode == ColorMode.NONE:
        return ""
    if mode == ColorMode.ANSI256:
        if bg is None:
            return RESET + ansi256_fg(fg)
        return ansi256_fg(fg) + ansi256_bg(bg)
    # truecolor
    if bg is None:
        return RESET + truecolor_fg(*palette_rgb(fg))
    return truecolor_fg(*palette_rgb(fg)) + truecolor_bg(*palette_rgb(bg))
