"""Terminal size detection utilities."""

from __future__ import annotations

import os
import sys


def get_terminal_size() -> tuple[int, int] | None:
    """Get current terminal size in columns and rows.

    Returns (columns, rows), or None if stdout is not attached to a
    terminal or the terminal reports a zero size.
    """
    try:
        size = os.get_terminal_size(sys.__stdout__.fileno())
    except (AttributeError, ValueError, OSError):
        return None
    if size.columns <= 0 or size.lines <= 0:
        return None
    return size.columns, size.lines
