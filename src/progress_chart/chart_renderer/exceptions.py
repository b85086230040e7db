from __future__ import annotations


class InsufficientDataError(Exception):
    """Raised when there is nothing rendered to export."""


class SurfaceNotReadyError(RuntimeError):
    """Raised when a drawing surface has no context to draw on yet."""
