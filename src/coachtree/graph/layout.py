"""Deterministic canvas coordinates for a leveled coach registry."""

from __future__ import annotations

import locale
import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from coachtree.config import LayoutSettings
from coachtree.models import Coach, Connection


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasSize:
    width: float
    height: float
    total_levels: int


@dataclass(frozen=True)
class EdgeSegment:
    """Straight line from a head coach node to a coordinator node."""

    connection: Connection
    x: float
    y: float
    length: float
    angle: float


def _name_key(coach: Coach) -> tuple[str, str]:
    return (locale.strxfrm(coach.name), coach.name)


def group_by_level(coaches: Mapping[str, Coach]) -> Dict[int, List[Coach]]:
    """Group coaches by level, each group sorted by name."""

    groups: Dict[int, List[Coach]] = defaultdict(list)
    for coach in coaches.values():
        groups[coach.level].append(coach)
    return {level: sorted(group, key=_name_key) for level, group in sorted(groups.items())}


def compute_layout(
    coaches: Mapping[str, Coach],
    settings: Optional[LayoutSettings] = None,
) -> CanvasSize:
    """Assign ``x``/``y`` to every coach and return the canvas extents.

    Rows of coaches are spread evenly down the canvas by level. Within a row
    ``n`` coaches sit at ``(i + 1) * width / (n + 1)``, leaving equal gaps
    between neighbours and to either edge.
    """

    settings = settings or LayoutSettings()
    if not coaches:
        return CanvasSize(width=settings.min_width, height=settings.min_height, total_levels=0)

    groups = group_by_level(coaches)
    total_levels = max(groups) + 1
    max_per_level = max(len(group) for group in groups.values())

    height = max(settings.min_height, total_levels * settings.level_height)
    width = max(settings.min_width, max_per_level * settings.node_spacing)

    for level, group in groups.items():
        level_y = level * (height / total_levels) + settings.top_margin
        spacing = width / (len(group) + 1)
        for index, coach in enumerate(group):
            coach.x = (index + 1) * spacing
            coach.y = level_y

    logger.debug(
        "Laid out %d coaches on %d levels (canvas %.0fx%.0f)",
        len(coaches),
        total_levels,
        width,
        height,
    )
    return CanvasSize(width=width, height=height, total_levels=total_levels)


def edge_segments(
    coaches: Mapping[str, Coach],
    connections: Sequence[Connection],
) -> List[EdgeSegment]:
    """Compute line geometry for each connection, anchored at the head coach."""

    segments: List[EdgeSegment] = []
    for connection in connections:
        head = coaches[connection.head_coach_name]
        coordinator = coaches[connection.coordinator_name]
        if None in (head.x, head.y, coordinator.x, coordinator.y):
            raise ValueError(
                f"connection {connection.head_coach_name!r} -> "
                f"{connection.coordinator_name!r} has unpositioned coaches"
            )
        dx = coordinator.x - head.x
        dy = coordinator.y - head.y
        segments.append(
            EdgeSegment(
                connection=connection,
                x=head.x,
                y=head.y,
                length=math.hypot(dx, dy),
                angle=math.degrees(math.atan2(dy, dx)),
            )
        )
    return segments
