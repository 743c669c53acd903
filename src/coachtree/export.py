"""Renderer payload helpers for a positioned coaching tree."""

from __future__ import annotations

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List

from coachtree.api.schemas import (
    CoachResponse,
    ConnectionResponse,
    RoleHistoryResponse,
    RoleResponse,
    SegmentResponse,
    TreeResponse,
)
from coachtree.errors import TreeNotLoadedError
from coachtree.models import Coach, Connection, Role
from coachtree.pipeline import CoachingTree


POSITION_HEADERS = ("name", "level", "x", "y", "was_head_coach")


def _role_response(role: Role) -> RoleResponse:
    return RoleResponse(season=role.season, team=role.team, role=role.role, record=role.record)


def _coach_response(coach: Coach) -> CoachResponse:
    if coach.x is None or coach.y is None:
        raise TreeNotLoadedError(f"coach {coach.name!r} has not been positioned")
    return CoachResponse(
        name=coach.name,
        level=coach.level,
        x=coach.x,
        y=coach.y,
        was_head_coach=coach.was_head_coach,
        roles=[_role_response(role) for role in coach.roles],
        coordinator_names=sorted(coach.coordinator_names),
        head_coach_names=sorted(coach.head_coach_names),
    )


def connection_response(connection: Connection) -> ConnectionResponse:
    return ConnectionResponse(
        head_coach=connection.head_coach_name,
        coordinator=connection.coordinator_name,
        season=connection.season,
        team=connection.team,
    )


def role_history_response(tree: CoachingTree, name: str) -> RoleHistoryResponse:
    coach = tree.get_coach(name)
    return RoleHistoryResponse(
        name=coach.name,
        was_head_coach=coach.was_head_coach,
        roles=[_role_response(role) for role in coach.role_history()],
    )


def tree_to_response(tree: CoachingTree) -> TreeResponse:
    """Convert a loaded tree into the renderer schema, coaches in name order."""

    canvas = tree.canvas
    coaches = sorted(tree.coaches(), key=lambda coach: coach.name)
    segments: List[SegmentResponse] = [
        SegmentResponse(
            **connection_response(segment.connection).model_dump(),
            x=segment.x,
            y=segment.y,
            length=segment.length,
            angle=segment.angle,
        )
        for segment in tree.segments()
    ]
    return TreeResponse(
        width=canvas.width,
        height=canvas.height,
        total_levels=canvas.total_levels,
        node_radius=tree.settings.node_radius,
        coaches=[_coach_response(coach) for coach in coaches],
        connections=segments,
    )


def tree_to_payload(tree: CoachingTree) -> Dict[str, Any]:
    return tree_to_response(tree).model_dump(mode="json")


def dump_json(tree: CoachingTree, path: Path) -> None:
    path.write_text(json.dumps(tree_to_payload(tree), indent=2), encoding="utf-8")


def positions_to_csv(tree: CoachingTree) -> str:
    """Return one CSV line per coach with its level and coordinates."""

    response = tree_to_response(tree)
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(POSITION_HEADERS)
    for coach in response.coaches:
        writer.writerow([
            coach.name,
            coach.level,
            f"{coach.x:.2f}",
            f"{coach.y:.2f}",
            int(coach.was_head_coach),
        ])
    return buffer.getvalue()


__all__ = [
    "POSITION_HEADERS",
    "connection_response",
    "dump_json",
    "positions_to_csv",
    "role_history_response",
    "tree_to_payload",
    "tree_to_response",
]
