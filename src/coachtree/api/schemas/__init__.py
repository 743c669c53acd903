"""Pydantic models for API I/O."""

from .tree import (
    CoachResponse,
    ConnectionResponse,
    RoleHistoryResponse,
    RoleResponse,
    SegmentResponse,
    TreeResponse,
)

__all__ = [
    "CoachResponse",
    "ConnectionResponse",
    "RoleHistoryResponse",
    "RoleResponse",
    "SegmentResponse",
    "TreeResponse",
]
