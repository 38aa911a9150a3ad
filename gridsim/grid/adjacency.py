"""Orthogonal neighbour lookup."""

from __future__ import annotations

from typing import Any, Callable, List

from .cell import Coord, of
from .store import Grid

# Up, down, left, right as offsets on (i, j). Path finders break ties by this
# order, so it must not change.
OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def siblings(grid: Grid, i: int, j: int) -> List[Coord]:
    """Return the in-grid orthogonal neighbours of (i, j), in ``OFFSETS`` order."""
    return [
        Coord(i + di, j + dj)
        for di, dj in OFFSETS
        if grid.has(i + di, j + dj)
    ]


def each_sibling(grid: Grid, i: int, j: int, visitor: Callable[[Any, Coord], Any]) -> int:
    """Call ``visitor(value, coord)`` for each neighbour of (i, j). Returns the count."""
    neighbours = siblings(grid, i, j)
    for coord in neighbours:
        visitor(of(grid, coord.i, coord.j), coord)
    return len(neighbours)
