"""Route query: every parameter of a path search, fixed at construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..grid import Coord, CoordLike, Grid, each_cell_of, of, to_coord

# walkable(value, coord) -> bool
Walkable = Callable[[Any, Coord], bool]
# cost(value, coord) -> number added when a route steps onto the cell
CostFn = Callable[[Any, Coord], float]


def walk_anywhere(value: Any, coord: Coord) -> bool:
    return True


def unit_cost(value: Any, coord: Coord) -> float:
    return 1


@dataclass(frozen=True)
class RouteQuery:
    """Start, goal, walkability predicate and step cost for one search.

    Searches are pure functions of ``(grid, query)``; nothing is accumulated
    on the query between calls.
    """

    start: Coord
    goal: Coord
    walkable: Walkable = field(default=walk_anywhere)
    cost: CostFn = field(default=unit_cost)

    @classmethod
    def build(
        cls,
        start: CoordLike,
        goal: CoordLike,
        walkable: Optional[Walkable] = None,
        cost: Optional[CostFn] = None,
    ) -> "RouteQuery":
        return cls(
            start=to_coord(start),
            goal=to_coord(goal),
            walkable=walkable or walk_anywhere,
            cost=cost or unit_cost,
        )

    def not_walkable(self, value: Any, coord: Coord) -> bool:
        return not self.walkable(value, coord)

    def is_goal(self, coord: Coord) -> bool:
        return coord == self.goal

    def can_enter(self, grid: Grid, coord: Coord) -> bool:
        """True if ``coord`` is a cell of ``grid`` and passes the walkability predicate."""
        return grid.has(coord.i, coord.j) and bool(self.walkable(of(grid, coord.i, coord.j), coord))


def walkable_cells_count(grid: Grid, query: RouteQuery) -> int:
    """Number of cells of ``grid`` that satisfy the query's walkability predicate."""
    return each_cell_of(grid, query.walkable).count()
