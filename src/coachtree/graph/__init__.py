"""Graph construction, level assignment and layout."""

from .builder import CoachGraph, build_graph
from .layout import CanvasSize, EdgeSegment, compute_layout, edge_segments, group_by_level
from .levels import assign_levels, find_roots, is_root

__all__ = [
    "CoachGraph",
    "build_graph",
    "CanvasSize",
    "EdgeSegment",
    "compute_layout",
    "edge_segments",
    "group_by_level",
    "assign_levels",
    "find_roots",
    "is_root",
]
