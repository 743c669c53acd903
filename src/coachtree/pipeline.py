"""Load cycle tying graph construction, level assignment and layout together."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from coachtree.config import LayoutSettings
from coachtree.errors import TreeNotLoadedError
from coachtree.graph import (
    CanvasSize,
    CoachGraph,
    EdgeSegment,
    assign_levels,
    build_graph,
    compute_layout,
    edge_segments,
)
from coachtree.graph.builder import RowLike
from coachtree.models import Coach, Connection, Role


logger = logging.getLogger(__name__)


class CoachingTree:
    """Positioned coaching graph for a renderer.

    Each :meth:`load` builds a fresh graph and only replaces the current one
    once every stage has finished, so a failed load leaves the previous tree
    untouched.
    """

    def __init__(self, settings: Optional[LayoutSettings] = None):
        self.settings = settings or LayoutSettings.from_env()
        self._graph: Optional[CoachGraph] = None
        self._canvas: Optional[CanvasSize] = None

    @property
    def loaded(self) -> bool:
        return self._graph is not None

    @property
    def canvas(self) -> CanvasSize:
        if self._canvas is None:
            raise TreeNotLoadedError("no coaching data has been loaded")
        return self._canvas

    def load(self, rows: Iterable[RowLike]) -> CoachGraph:
        graph = build_graph(rows)
        assign_levels(graph.coaches)
        canvas = compute_layout(graph.coaches, self.settings)
        self._graph = graph
        self._canvas = canvas
        logger.info(
            "Loaded %d coaches and %d connections over %d levels",
            len(graph.coaches),
            len(graph.connections),
            canvas.total_levels,
        )
        return graph

    def coaches(self) -> List[Coach]:
        if self._graph is None:
            return []
        return list(self._graph.coaches.values())

    def connections(self) -> List[Connection]:
        if self._graph is None:
            return []
        return list(self._graph.connections)

    def get_coach(self, name: str) -> Coach:
        if self._graph is None:
            raise KeyError(f"Unknown coach {name!r}")
        return self._graph.coach(name)

    def role_history(self, name: str) -> List[Role]:
        return self.get_coach(name).role_history()

    def related_connections(self, name: str, team: str, season: int) -> List[Connection]:
        """Connections involving ``name`` for one team and season."""

        return [
            connection
            for connection in self.connections()
            if name in (connection.head_coach_name, connection.coordinator_name)
            and connection.team == team
            and connection.season == season
        ]

    def segments(self) -> List[EdgeSegment]:
        if self._graph is None:
            raise TreeNotLoadedError("no coaching data has been loaded")
        return edge_segments(self._graph.coaches, self._graph.connections)
