"""Wave propagation (Lee) shortest-path search.

<http://en.wikipedia.org/wiki/Lee_algorithm>

Three phases over a scratch "wave" grid shaped like the input grid:

1. Initialize: walkable cells get 0 (unvisited), the others ``BLOCKED``.
2. Expand: the start gets magnitude 1. A FIFO worklist hands every unvisited
   neighbour its parent's magnitude + 1, so each layer is fully assigned
   before the next one starts and every reachable cell is visited once.
3. Backtrace: from the goal, step to the neighbour with the smallest lower
   magnitude (first in adjacency order on ties) until the start is reached,
   then reverse.
"""

from __future__ import annotations

import math
from collections import deque
from typing import Deque, List

from ..errors import Unreachable
from ..grid import Coord, Grid, duplicate_structure, each_cell_of, of, set_cell, siblings
from ..logging_utils import log_debug
from .query import RouteQuery

UNVISITED = 0
BLOCKED = math.inf


def build_wave_grid(grid: Grid, query: RouteQuery) -> Grid:
    """Phase 1: 0 for walkable cells, ``BLOCKED`` for the rest."""
    wave = duplicate_structure(grid, UNVISITED)
    # Walkability is judged on the input values, not on the scratch grid
    each_cell_of(wave).map(
        lambda _, coord: UNVISITED if query.walkable(of(grid, coord.i, coord.j), coord) else BLOCKED
    )
    return wave


def expand(wave: Grid, start: Coord) -> int:
    """Phase 2: assign wave magnitudes outward from ``start``. Returns the number of cells reached."""
    set_cell(wave, start.i, start.j, 1)
    queue: Deque[Coord] = deque([start])
    reached = 1
    while queue:
        current = queue.popleft()
        magnitude = of(wave, current.i, current.j) + 1
        for sibling in siblings(wave, current.i, current.j):
            if of(wave, sibling.i, sibling.j) == UNVISITED:
                set_cell(wave, sibling.i, sibling.j, magnitude)
                queue.append(sibling)
                reached += 1
    return reached


def backtrace(wave: Grid, query: RouteQuery) -> List[Coord]:
    """Phase 3: follow decreasing magnitudes from the goal back to the start."""
    position = query.goal
    route = [position]
    while position != query.start:
        magnitude = of(wave, position.i, position.j)
        best = None
        best_magnitude = magnitude
        for sibling in siblings(wave, position.i, position.j):
            candidate = of(wave, sibling.i, sibling.j)
            if UNVISITED < candidate < best_magnitude:
                best, best_magnitude = sibling, candidate
        if best is None:
            raise Unreachable(start=query.start, goal=query.goal, reason="wave_broken")
        position = best
        route.append(position)
    route.reverse()
    return route


def lee(grid: Grid, query: RouteQuery) -> List[Coord]:
    """Shortest route from ``query.start`` to ``query.goal`` by wave propagation.

    The start cell is always entered; the goal must be walkable.

    Raises:
        Unreachable: if the goal is not a cell of the grid, is not walkable, or
            is not connected to the start through walkable cells
    """
    start, goal = query.start, query.goal
    if not grid.has(start.i, start.j) or not grid.has(goal.i, goal.j):
        raise Unreachable(start=start, goal=goal, reason="outside_grid")

    wave = build_wave_grid(grid, query)
    reached = expand(wave, start)
    log_debug(f"[Lee] wave reached {reached} cell(s) from {tuple(start)}")

    magnitude = of(wave, goal.i, goal.j)
    if magnitude == UNVISITED or magnitude == BLOCKED:
        raise Unreachable(start=start, goal=goal)

    route = backtrace(wave, query)
    log_debug(f"[Lee] route of {len(route)} cell(s), goal magnitude {magnitude}")
    return route
