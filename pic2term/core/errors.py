"""Exceptions raised by the rendering pipeline."""

from __future__ import annotations


class Pic2TermError(Exception):
    """Base class for pic2term errors."""


class GeometryUnresolved(Pic2TermError):
    """No explicit size was requested and the terminal size is unknown."""


class PreconditionViolation(Pic2TermError, ValueError):
    """Malformed input handed to a core stage (caller error)."""
