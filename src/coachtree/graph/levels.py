"""Assign hierarchical depth to every coach in a registry.

Roots are coaches with no lineage above them in the data: pure head coaches,
or coaches whose first head coaching season is no later than their first
coordinator season. Levels then flow down ``coordinator_names`` breadth first,
each coordinator keeping the deepest level offered by any head coach that
reaches it.

A coach that is already dequeued is not revisited when a later path raises its
level, so its own coordinators keep the level they were given first. Graphs
with uneven path lengths to the same coach can therefore undercount depth.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Mapping, Set

from coachtree.models import Coach


logger = logging.getLogger(__name__)


def is_root(coach: Coach) -> bool:
    head_seasons = [role.season for role in coach.roles if role.is_head_coach]
    if not head_seasons:
        return False
    other_seasons = [role.season for role in coach.roles if not role.is_head_coach]
    if not other_seasons:
        return True
    return min(head_seasons) <= min(other_seasons)


def find_roots(coaches: Mapping[str, Coach]) -> List[Coach]:
    """Return root coaches in registry order."""

    return [coach for coach in coaches.values() if is_root(coach)]


def assign_levels(coaches: Mapping[str, Coach]) -> None:
    roots = find_roots(coaches)
    for coach in roots:
        coach.level = 0

    queue: Deque[Coach] = deque(roots)
    visited: Set[str] = {coach.name for coach in roots}

    while queue:
        current = queue.popleft()
        for name in current.coordinator_names:
            coordinator = coaches[name]
            coordinator.level = max(coordinator.level, current.level + 1)
            if name not in visited:
                visited.add(name)
                queue.append(coordinator)

    unplaced = 0
    for coach in coaches.values():
        if coach.name in visited:
            continue
        max_level = max(
            (other.level for other in coaches.values() if other.name in visited),
            default=0,
        )
        coach.level = max_level + 1
        visited.add(coach.name)
        unplaced += 1

    if unplaced:
        logger.info("Placed %d coaches unreachable from any root below the tree", unplaced)
    logger.debug("Assigned levels from %d roots across %d coaches", len(roots), len(coaches))
