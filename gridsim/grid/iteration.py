"""Filtered bulk operations over every cell of a grid.

``CellQuery`` visits cells in ascending column, then ascending row order and
applies an operation to each cell accepted by its filter. Writes are committed
cell by cell, so a transform (or the filter itself) sees values already updated
earlier in the same pass.

Usage:
    each_cell_of(grid).where(lambda value, coord: value > 0).set_value(1)
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..errors import InvalidFilter, MissingGrid
from .cell import Coord, get_property, put_property
from .store import Grid

CellFilter = Callable[[Any, Coord], bool]


def _accept_all(value: Any, coord: Coord) -> bool:
    return True


class CellQuery:
    """A grid plus a cell filter, built once and then run."""

    def __init__(self, grid: Optional[Grid], where: Optional[CellFilter] = None):
        if grid is None:
            raise MissingGrid()
        if where is None:
            where = _accept_all
        elif not callable(where):
            raise InvalidFilter(where)
        self.grid = grid
        self.filter = where

    def where(self, condition: CellFilter) -> "CellQuery":
        """Return a query over the same grid with ``condition`` as its filter."""
        if not callable(condition):
            raise InvalidFilter(condition)
        return CellQuery(self.grid, condition)

    def _matches(self) -> Iterator[Tuple[Coord, Any]]:
        cells = self.grid.cells
        for i in self.grid.columns():
            for j in self.grid.rows(i):
                # A transform may have removed cells further along the pass
                if not self.grid.has(i, j):
                    continue
                coord = Coord(i, j)
                value = cells[i][j]
                if self.filter(value, coord):
                    yield coord, value

    def count(self) -> int:
        """Number of cells accepted by the filter."""
        return sum(1 for _ in self._matches())

    def coords(self) -> List[Coord]:
        return [coord for coord, _ in self._matches()]

    def set_value(self, value: Any) -> int:
        """Overwrite every matching cell with ``value``. Returns the number of cells written."""
        count = 0
        for coord, _ in self._matches():
            self.grid.cells[coord.i][coord.j] = value
            count += 1
        return count

    def map(self, transform: Callable[[Any, Coord], Any]) -> int:
        """Replace each matching cell with ``transform(value, coord)``, one cell at a time."""
        count = 0
        for coord, value in self._matches():
            self.grid.cells[coord.i][coord.j] = transform(value, coord)
            count += 1
        return count

    def apply_property(self, name: str, transform: Callable[[Any], Any]) -> int:
        """Apply ``transform`` to property ``name`` of every matching cell value."""
        count = 0
        for _, value in self._matches():
            put_property(value, name, transform(get_property(value, name)))
            count += 1
        return count


def each_cell_of(grid: Optional[Grid], where: Optional[CellFilter] = None) -> CellQuery:
    return CellQuery(grid, where)
