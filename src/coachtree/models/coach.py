"""Canonical coaching models shared across ingest, graph and layout layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


HEAD_COACH_ROLE = "Head Coach"


class Row(BaseModel):
    """One season-by-season coaching assignment as supplied by the input provider."""

    season: int
    head_coach: str = Field(..., min_length=1)
    coordinator: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    team: str = Field(..., min_length=1)
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    ties: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}-{self.ties}"


class Role(BaseModel):
    """A single season/team stint held by a coach."""

    season: int
    team: str
    role: str
    record: str

    model_config = ConfigDict(frozen=True)

    @property
    def is_head_coach(self) -> bool:
        return self.role == HEAD_COACH_ROLE


class Connection(BaseModel):
    """Head coach to coordinator pairing for one season and team.

    Coaches are referenced by name only; resolve them through the registry.
    """

    head_coach_name: str
    coordinator_name: str
    season: int
    team: str

    model_config = ConfigDict(frozen=True)


@dataclass(eq=False)
class Coach:
    """Graph node for a single coach.

    ``level`` is filled in by level assignment and ``x``/``y`` by layout;
    nothing else is mutated after the graph is built.
    """

    name: str
    roles: List[Role] = field(default_factory=list)
    coordinator_names: Set[str] = field(default_factory=set)
    head_coach_names: Set[str] = field(default_factory=set)
    level: int = 0
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def was_head_coach(self) -> bool:
        return any(role.is_head_coach for role in self.roles)

    def role_history(self) -> List[Role]:
        """Return roles sorted newest season first, keeping insertion order for ties."""

        return sorted(self.roles, key=lambda role: role.season, reverse=True)
