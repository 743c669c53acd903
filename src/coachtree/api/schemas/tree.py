from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class RoleResponse(BaseModel):
    season: int
    team: str
    role: str
    record: str


class CoachResponse(BaseModel):
    name: str
    level: int = Field(..., ge=0)
    x: float
    y: float
    was_head_coach: bool
    roles: List[RoleResponse]
    coordinator_names: List[str]
    head_coach_names: List[str]


class ConnectionResponse(BaseModel):
    head_coach: str
    coordinator: str
    season: int
    team: str


class SegmentResponse(ConnectionResponse):
    x: float
    y: float
    length: float
    angle: float


class TreeResponse(BaseModel):
    width: float
    height: float
    total_levels: int
    node_radius: float
    coaches: List[CoachResponse]
    connections: List[SegmentResponse]


class RoleHistoryResponse(BaseModel):
    name: str
    was_head_coach: bool
    roles: List[RoleResponse]
