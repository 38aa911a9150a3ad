"""Sparse 2D grid container.

A grid is a mapping of column index ``i`` to a mapping of row index ``j`` to a
cell value. Columns and rows are addressed by arbitrary integers, so a grid may
have gaps and negative indices after rows/columns are added or removed. A
missing entry means "no cell here", which is different from a cell holding the
default value.

The functions in this module are stateless; ``Grid`` only holds data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..errors import InvalidDimensions


@dataclass
class Grid:
    """Sparse column-major cell storage: ``cells[i][j] -> value``."""

    cells: Dict[int, Dict[int, Any]] = field(default_factory=dict)
    # Value used for cells created by add_row/add_col
    default: Any = 0

    def columns(self) -> List[int]:
        """Column indices in ascending order."""
        return sorted(self.cells)

    def rows(self, i: int) -> List[int]:
        """Row indices present in column ``i``, ascending."""
        return sorted(self.cells.get(i, {}))

    def row_indices(self) -> List[int]:
        """Union of row indices across every column, ascending."""
        seen: set[int] = set()
        for column in self.cells.values():
            seen.update(column)
        return sorted(seen)

    def has(self, i: int, j: int) -> bool:
        column = self.cells.get(i)
        return column is not None and j in column

    def cell_count(self) -> int:
        return sum(len(column) for column in self.cells.values())

    def extent(self) -> Tuple[int, int]:
        """Return (width, height): the number of column/row slots spanned, gaps included."""
        if not self.cells:
            return (0, 0)
        rows = self.row_indices()
        columns = self.columns()
        height = rows[-1] - rows[0] + 1 if rows else 0
        return (columns[-1] - columns[0] + 1, height)

    def __contains__(self, coord: object) -> bool:
        try:
            i, j = coord  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return self.has(i, j)


def create(rows: int, cols: int, default: Any = 0) -> Grid:
    """Create a fully populated ``cols`` x ``rows`` grid.

    Every cell holds ``default``. A mutable default is shared by every cell,
    not copied.

    Raises:
        InvalidDimensions: if ``rows`` or ``cols`` is not positive
    """
    if rows <= 0 or cols <= 0:
        raise InvalidDimensions(rows=rows, cols=cols)

    cells = {i: {j: default for j in range(rows)} for i in range(cols)}
    return Grid(cells=cells, default=default)


def duplicate(grid: Grid) -> Grid:
    """Return a structural copy of ``grid``.

    Columns are new containers, but cell values are shared by reference: a
    dict stored in a cell is the same object in both grids.
    """
    return Grid(
        cells={i: dict(column) for i, column in grid.cells.items()},
        default=grid.default,
    )


def duplicate_structure(grid: Grid, fill: Any) -> Grid:
    """Return a grid with the same shape as ``grid`` where every cell holds ``fill``."""
    return Grid(
        cells={i: {j: fill for j in column} for i, column in grid.cells.items()},
        default=fill,
    )


_UNSET = object()


def _fill_value(grid: Grid, value: Any) -> Any:
    return grid.default if value is _UNSET else value


def add_row(grid: Grid, index: int, length: Optional[int] = None, value: Any = _UNSET) -> int:
    """Insert row ``index`` into the grid without overwriting existing cells.

    By default the row is added to every existing column. With ``length`` the
    row spans columns ``0..length-1`` instead, creating missing columns.

    Returns:
        Number of cells created.
    """
    fill = _fill_value(grid, value)
    columns: Iterable[int] = grid.columns() if length is None else range(length)
    created = 0
    for i in columns:
        column = grid.cells.setdefault(i, {})
        if index not in column:
            column[index] = fill
            created += 1
    return created


def add_col(grid: Grid, index: int, length: Optional[int] = None, value: Any = _UNSET) -> int:
    """Insert column ``index`` if the grid does not have it yet.

    The new column gets a cell for every row index already used by the grid,
    or rows ``0..length-1`` when ``length`` is given. An existing column is
    left untouched.

    Returns:
        Number of cells created.
    """
    if index in grid.cells:
        return 0
    fill = _fill_value(grid, value)
    rows: Iterable[int] = grid.row_indices() if length is None else range(length)
    grid.cells[index] = {j: fill for j in rows}
    return len(grid.cells[index])


def remove_row(grid: Grid, index: int) -> int:
    """Delete row ``index`` from every column. Other rows keep their indices.

    Returns:
        Number of cells removed.
    """
    removed = 0
    for column in grid.cells.values():
        if index in column:
            del column[index]
            removed += 1
    return removed


def remove_col(grid: Grid, index: int) -> bool:
    """Delete column ``index``. Returns False if there was no such column."""
    return grid.cells.pop(index, None) is not None


def each_cell(grid: Grid, visitor: Callable[[Any, int, int], Any]) -> None:
    """Call ``visitor(value, i, j)`` for every cell, column by column."""
    for i in grid.columns():
        for j in grid.rows(i):
            if grid.has(i, j):
                visitor(grid.cells[i][j], i, j)
