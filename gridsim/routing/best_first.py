"""Cost-ordered best-first search (historically labelled "astar").

This is not A*: routes are ranked by accumulated cost only, with no estimate
of the remaining distance. The worklist holds whole partial routes:

- the cheapest route is taken (ties: the one queued first);
- it is extended to every walkable neighbour not already on it, or only to
  the goal when the goal is one of those neighbours;
- each extension adds ``query.cost(value, coord)`` to the route cost;
- a route with no extension is a dead end: its cost is multiplied by
  ``Config.DEAD_END_PENALTY`` and it goes back into the worklist, ahead of
  routes with the same cost (a dead end whose cost cannot grow is dropped);
- the search ends when the cheapest route ends at the goal.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import Config
from ..errors import Unreachable
from ..floodfill import floodfill
from ..grid import Coord, Grid, of, siblings
from ..logging_utils import log_debug, log_penalty
from .query import RouteQuery


@dataclass(order=True)
class PartialRoute:
    """Worklist entry, ordered by (cost, rank)."""

    cost: float
    rank: int
    route: Tuple[Coord, ...] = field(compare=False)
    dead_end: bool = field(default=False, compare=False)

    @property
    def last(self) -> Coord:
        return self.route[-1]


def extensions(grid: Grid, query: RouteQuery, current: PartialRoute) -> List[Tuple[Coord, float]]:
    """Neighbours ``current`` can step to, each with its step cost."""
    last = current.last
    visited = set(current.route)
    candidates = [
        sibling
        for sibling in siblings(grid, last.i, last.j)
        if sibling not in visited and query.walkable(of(grid, sibling.i, sibling.j), sibling)
    ]
    if any(query.is_goal(candidate) for candidate in candidates):
        candidates = [query.goal]
    return [(candidate, query.cost(of(grid, candidate.i, candidate.j), candidate)) for candidate in candidates]


def connected(grid: Grid, query: RouteQuery) -> bool:
    """True if the goal is reachable from the start through walkable cells."""
    region = floodfill(
        grid,
        query.start,
        lambda value, coord: coord == query.start or query.walkable(value, coord),
    )
    return query.goal in region


def best_first(grid: Grid, query: RouteQuery, penalty: Optional[float] = None) -> List[Coord]:
    """Route from ``query.start`` to ``query.goal`` by accumulated-cost best-first search.

    Raises:
        Unreachable: if the goal is missing, not walkable, not connected to
            the start, or every route left in the worklist is a dead end
        ValueError: if ``penalty`` (default ``Config.DEAD_END_PENALTY``) is not above 1
    """
    start, goal = query.start, query.goal
    if not grid.has(start.i, start.j) or not grid.has(goal.i, goal.j):
        raise Unreachable(start=start, goal=goal, reason="outside_grid")
    if start == goal:
        return [start]
    if not query.can_enter(grid, goal) or not connected(grid, query):
        raise Unreachable(start=start, goal=goal)

    penalty = Config.DEAD_END_PENALTY if penalty is None else penalty
    if penalty <= 1:
        raise ValueError(f"Dead-end penalty must be greater than 1, got {penalty}")
    # New routes rank after everything queued so far; penalised routes rank
    # ahead of everything, the most recently penalised first.
    queued = itertools.count()
    penalised = itertools.count(-1, -1)

    worklist: List[PartialRoute] = [PartialRoute(cost=0, rank=next(queued), route=(start,))]
    live = 1
    expanded = 0

    while not query.is_goal(worklist[0].last):
        current = heapq.heappop(worklist)
        steps = [] if current.dead_end else extensions(grid, query, current)

        if not steps:
            if not current.dead_end:
                current.dead_end = True
                live -= 1
            if live == 0:
                raise Unreachable(start=start, goal=goal, reason="dead_end")
            grown = current.cost * penalty
            if grown <= current.cost:
                # a non-positive cost never grows, so the route would stay in front
                log_debug(f"[BestFirst] dead end at {tuple(current.last)} dropped at cost {current.cost}")
                continue
            current.cost = grown
            current.rank = next(penalised)
            heapq.heappush(worklist, current)
            log_penalty(f"[BestFirst] dead end at {tuple(current.last)}, cost -> {current.cost}")
            continue

        live -= 1
        expanded += 1
        for coord, step_cost in steps:
            heapq.heappush(
                worklist,
                PartialRoute(cost=current.cost + step_cost, rank=next(queued), route=current.route + (coord,)),
            )
            live += 1

    log_debug(
        f"[BestFirst] {expanded} expansion(s), {len(worklist)} route(s) queued, "
        f"cost {worklist[0].cost}"
    )
    return list(worklist[0].route)
