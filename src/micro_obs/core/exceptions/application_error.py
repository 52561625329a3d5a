"""Root of the micro-obs exception hierarchy.

Every error raised by the order pipeline, the catalog store or the
cross-service client derives from ``ApplicationError`` so callers can catch
the whole family without string-matching.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception carrying a structured ``context`` for logging and mapping."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}
