"""Error types raised while loading a coaching tree."""

from __future__ import annotations


class CoachTreeError(ValueError):
    """Base class for errors that abort a load."""


class EmptyInputError(CoachTreeError):
    """Raised when a load is attempted with no rows."""


class MalformedRowError(CoachTreeError):
    """Raised when a row is missing a required field or has an unusable value."""


class TreeNotLoadedError(CoachTreeError):
    """Raised when positioned data is requested before any load succeeded."""


__all__ = [
    "CoachTreeError",
    "EmptyInputError",
    "MalformedRowError",
    "TreeNotLoadedError",
]
