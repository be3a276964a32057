"""Exceptions raised by the loader and the map."""

from __future__ import annotations

from typing import Optional


class CoastlineError(Exception):
    """Base class for failures reported to the user as ``Error: ...``."""


class ParseError(CoastlineError):
    """Configuration source is unreadable or malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class BoundsError(CoastlineError):
    """A position falls outside the map."""


__all__ = ["CoastlineError", "ParseError", "BoundsError"]
