"""Path finders over a grid.

Provides:
- RouteQuery: start/goal/walkability/cost bundle shared by every finder
- lee: wave propagation shortest path
- best_first: accumulated-cost best-first search ("astar")
- find_route: dispatch by algorithm name
"""

from __future__ import annotations

from typing import Callable, Dict, List

from ..grid import Coord, Grid
from .best_first import PartialRoute, best_first
from .query import CostFn, RouteQuery, Walkable, unit_cost, walk_anywhere, walkable_cells_count
from .wave import BLOCKED, UNVISITED, build_wave_grid, lee

Finder = Callable[[Grid, RouteQuery], List[Coord]]

FINDERS: Dict[str, Finder] = {
    "wave": lee,
    "bestfirst": best_first,
}

ALIASES: Dict[str, str] = {
    "lee": "wave",
    "best_first": "bestfirst",
    "best-first": "bestfirst",
    "astar": "bestfirst",
}


def resolve_algorithm(name: str) -> str:
    """Return the canonical algorithm name for ``name`` or raise ValueError."""
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in FINDERS:
        raise ValueError(
            f"Unknown routing algorithm '{name}'. "
            f"Expected one of: {', '.join(sorted(FINDERS))}"
        )
    return key


def find_route(grid: Grid, query: RouteQuery, algorithm: str = "wave") -> List[Coord]:
    return FINDERS[resolve_algorithm(algorithm)](grid, query)


__all__ = [
    "RouteQuery",
    "Walkable",
    "CostFn",
    "walk_anywhere",
    "unit_cost",
    "walkable_cells_count",
    "lee",
    "build_wave_grid",
    "UNVISITED",
    "BLOCKED",
    "best_first",
    "PartialRoute",
    "FINDERS",
    "ALIASES",
    "resolve_algorithm",
    "find_route",
]
