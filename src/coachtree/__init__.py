"""Coaching tree graph construction and layout."""

from coachtree.errors import CoachTreeError, EmptyInputError, MalformedRowError, TreeNotLoadedError
from coachtree.pipeline import CoachingTree

__all__ = [
    "CoachTreeError",
    "CoachingTree",
    "EmptyInputError",
    "MalformedRowError",
    "TreeNotLoadedError",
]
