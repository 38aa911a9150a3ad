"""Flood fill: connected-region discovery from a seed cell.

The fill is depth-first. Each visited cell is marked in a boolean scratch
grid with the same shape as the input, so the input grid is never written.
The explicit stack reproduces the visiting order of the recursive
formulation: a cell's siblings are tried in adjacency order, and each sibling's
region is exhausted before the next sibling is tried.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from .errors import MissingCell
from .grid import (
    Coord,
    CoordLike,
    Grid,
    duplicate_structure,
    of,
    set_cell,
    siblings,
    to_coord,
)
from .logging_utils import log_debug

Included = Callable[[Any, Coord], bool]


def _include_all(value: Any, coord: Coord) -> bool:
    return True


class FloodFill:
    """Flood fill over ``grid`` from ``start``, including cells where ``where(value, coord)`` holds."""

    def __init__(self, grid: Grid, start: CoordLike, where: Optional[Included] = None):
        self.grid = grid
        self.start = to_coord(start)
        self.included = where or _include_all

    def where(self, condition: Included) -> "FloodFill":
        return FloodFill(self.grid, self.start, condition)

    def commit(self) -> List[Coord]:
        """Run the fill and return included coordinates in discovery order.

        Raises:
            MissingCell: if the seed is not a cell of the grid
        """
        if not self.grid.has(self.start.i, self.start.j):
            raise MissingCell(i=self.start.i, j=self.start.j, action="flood fill from")

        tested = duplicate_structure(self.grid, False)
        filled: List[Coord] = []

        def enter(coord: Coord) -> Optional[Iterator[Coord]]:
            # Visit one cell; returns its pending siblings if it joined the region
            value = of(self.grid, coord.i, coord.j)
            if of(tested, coord.i, coord.j) or not self.included(value, coord):
                return None
            filled.append(coord)
            set_cell(tested, coord.i, coord.j, True)
            return iter(siblings(self.grid, coord.i, coord.j))

        stack: List[Iterator[Coord]] = []
        pending = enter(self.start)
        if pending is not None:
            stack.append(pending)

        while stack:
            sibling = next(stack[-1], None)
            if sibling is None:
                stack.pop()
                continue
            if of(tested, sibling.i, sibling.j):
                continue
            pending = enter(sibling)
            set_cell(tested, sibling.i, sibling.j, True)
            if pending is not None:
                stack.append(pending)

        log_debug(f"[FloodFill] {len(filled)} cell(s) reached from {tuple(self.start)}")
        return filled


def floodfill(grid: Grid, start: CoordLike, where: Optional[Included] = None) -> List[Coord]:
    return FloodFill(grid, start, where).commit()
