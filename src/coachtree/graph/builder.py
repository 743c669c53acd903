"""Build the coach registry and connection list from assignment rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Union

from pydantic import ValidationError

from coachtree.errors import EmptyInputError, MalformedRowError
from coachtree.models import HEAD_COACH_ROLE, Coach, Connection, Role, Row


logger = logging.getLogger(__name__)

RowLike = Union[Row, Mapping[str, Any]]


@dataclass
class CoachGraph:
    """Coach registry keyed by name plus one connection per source row."""

    coaches: Dict[str, Coach] = field(default_factory=dict)
    connections: List[Connection] = field(default_factory=list)

    def coach(self, name: str) -> Coach:
        if name not in self.coaches:
            raise KeyError(f"Unknown coach {name!r}")
        return self.coaches[name]


def _coerce_row(item: RowLike, index: int) -> Row:
    if isinstance(item, Row):
        return item
    if not isinstance(item, Mapping):
        raise MalformedRowError(
            f"row {index} must be a Row or mapping, got {type(item).__name__}"
        )
    try:
        return Row.model_validate(dict(item))
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
        raise MalformedRowError(f"row {index} is malformed ({fields})") from exc


def _ensure_coach(coaches: Dict[str, Coach], name: str) -> Coach:
    coach = coaches.get(name)
    if coach is None:
        coach = Coach(name=name)
        coaches[name] = coach
    return coach


def _has_head_coach_role(coach: Coach, season: int, team: str) -> bool:
    return any(
        role.season == season and role.team == team and role.role == HEAD_COACH_ROLE
        for role in coach.roles
    )


def build_graph(rows: Iterable[RowLike]) -> CoachGraph:
    """Create coaches and connections from ``rows`` in a single pass.

    Every row is validated before any coach is created, so a malformed row
    aborts the load without producing a partial graph.
    """

    validated = [_coerce_row(item, index) for index, item in enumerate(rows)]
    if not validated:
        raise EmptyInputError("no coaching rows supplied")

    graph = CoachGraph()
    for row in validated:
        head = _ensure_coach(graph.coaches, row.head_coach)
        if not _has_head_coach_role(head, row.season, row.team):
            head.roles.append(
                Role(season=row.season, team=row.team, role=HEAD_COACH_ROLE, record=row.record)
            )

        coordinator = _ensure_coach(graph.coaches, row.coordinator)
        coordinator.roles.append(
            Role(season=row.season, team=row.team, role=row.role, record=row.record)
        )

        head.coordinator_names.add(row.coordinator)
        coordinator.head_coach_names.add(row.head_coach)
        graph.connections.append(
            Connection(
                head_coach_name=row.head_coach,
                coordinator_name=row.coordinator,
                season=row.season,
                team=row.team,
            )
        )

    logger.debug(
        "Built graph with %d coaches and %d connections from %d rows",
        len(graph.coaches),
        len(graph.connections),
        len(validated),
    )
    return graph
