"""Call surface for a hosting service layer.

A service wrapper only needs these functions: build a grid, read and write
cells, and run route/flood queries. ``describe_route`` and ``describe_flood``
return pydantic models ready for serialization.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .config import Config
from .floodfill import Included, floodfill
from .grid import Coord, CoordLike, Grid, create, of, to_coord
from .grid import set_cell as _set_cell
from .routing import CostFn, RouteQuery, Walkable, find_route, resolve_algorithm
from .schemas import FloodResult, RouteResult, CoordState, coord_states
from .traversal import Traversal


def create_grid(rows: int, cols: int, default: Any = 0) -> Grid:
    return create(rows, cols, default)


def get_cell(grid: Grid, i: int, j: int) -> Any:
    """Value at (i, j), or None when the grid has no such cell."""
    return of(grid, i, j)


def set_cell(grid: Grid, i: int, j: int, value: Any) -> None:
    _set_cell(grid, i, j, value)


def route(
    grid: Grid,
    start: CoordLike,
    goal: CoordLike,
    walkable: Optional[Walkable] = None,
    algorithm: Optional[str] = None,
    cost: Optional[CostFn] = None,
) -> List[Coord]:
    """Find a route from ``start`` to ``goal``.

    Args:
        grid: Grid to search (never modified)
        start: Start coordinate, as ``Coord``, ``(i, j)`` or ``{"i": .., "j": ..}``
        goal: Goal coordinate, same forms as ``start``
        walkable: ``walkable(value, coord) -> bool``; every cell by default
        algorithm: ``"wave"`` or ``"bestfirst"`` (``"lee"``/``"astar"`` accepted);
            defaults to ``Config.DEFAULT_ALGORITHM``
        cost: Step cost for best-first search, ``cost(value, coord)``; 1 by default

    Raises:
        ValueError: unknown algorithm name
        Unreachable: no route exists under ``walkable``
    """
    query = RouteQuery.build(start, goal, walkable=walkable, cost=cost)
    return find_route(grid, query, algorithm or Config.DEFAULT_ALGORITHM)


def flood(grid: Grid, start: CoordLike, where: Optional[Included] = None) -> List[Coord]:
    """Cells connected to ``start`` for which ``where(value, coord)`` holds."""
    return floodfill(grid, start, where)


def describe_route(
    grid: Grid,
    start: CoordLike,
    goal: CoordLike,
    walkable: Optional[Walkable] = None,
    algorithm: Optional[str] = None,
    cost: Optional[CostFn] = None,
) -> RouteResult:
    """Run ``route`` and package the result with its distance and directions."""
    name = resolve_algorithm(algorithm or Config.DEFAULT_ALGORITHM)
    path = route(grid, start, goal, walkable=walkable, algorithm=name, cost=cost)
    walk = Traversal(grid, path[0])
    walk.route = path
    return RouteResult(
        algorithm=name,
        start=CoordState.from_coord(to_coord(start)),
        goal=CoordState.from_coord(to_coord(goal)),
        route=coord_states(path),
        distance=walk.distance(),
        directions=[d.value for d in walk.directions()],
    )


def describe_flood(grid: Grid, start: CoordLike, where: Optional[Included] = None) -> FloodResult:
    cells = flood(grid, start, where)
    return FloodResult(
        start=CoordState.from_coord(to_coord(start)),
        cells=coord_states(cells),
        count=len(cells),
    )
