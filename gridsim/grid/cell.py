"""Coordinates and cell access.

A ``Coord`` is only a reference into a grid: it is re-resolved on every call,
so a coordinate computed against one grid carries no guarantee for another,
and cells must be looked up again after rows or columns are removed.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Callable, Mapping, NamedTuple, Union

from ..errors import MissingCell, OutOfBounds
from .store import Grid


class Coord(NamedTuple):
    """Column ``i`` and row ``j`` of a cell."""

    i: int
    j: int

    def as_dict(self) -> dict[str, int]:
        return {"i": self.i, "j": self.j}


CoordLike = Union[Coord, tuple, Mapping[str, int]]


def _check(i: Any, j: Any) -> None:
    if not isinstance(i, Integral) or not isinstance(j, Integral):
        raise TypeError(f"Coordinate i, j must be integers, got ({i!r}, {j!r})")


def to_coord(value: CoordLike) -> Coord:
    """Normalize a ``Coord``, ``(i, j)`` tuple/list or ``{"i": .., "j": ..}`` mapping."""
    if isinstance(value, Coord):
        return value
    if isinstance(value, Mapping):
        i, j = value["i"], value["j"]
    else:
        i, j = value
    _check(i, j)
    return Coord(int(i), int(j))


def is_in(grid: Grid, i: int, j: int) -> bool:
    """True iff the grid holds a cell at (i, j)."""
    _check(i, j)
    return grid.has(i, j)


def is_not_in(grid: Grid, i: int, j: int) -> bool:
    return not is_in(grid, i, j)


def of(grid: Grid, i: int, j: int, default: Any = None) -> Any:
    """Return the value at (i, j), or ``default`` if the cell is absent.

    Absence is not an error here; use ``is_in`` (or ``require``) when it
    should be.
    """
    if is_not_in(grid, i, j):
        return default
    return grid.cells[i][j]


def require(grid: Grid, i: int, j: int) -> Any:
    """Return the value at (i, j), raising ``MissingCell`` if absent."""
    if is_not_in(grid, i, j):
        raise MissingCell(i=i, j=j)
    return grid.cells[i][j]


def add_to(grid: Grid, i: int, j: int, value: Any = None) -> bool:
    """Register a cell at (i, j). Returns False if the grid already had one."""
    if is_in(grid, i, j):
        return False
    grid.cells.setdefault(i, {})[j] = value
    return True


def set_cell(grid: Grid, i: int, j: int, value: Any) -> None:
    """Write ``value`` at (i, j), creating the cell (and its column) if needed."""
    add_to(grid, i, j)
    grid.cells[i][j] = value


def get_property(value: Any, name: str) -> Any:
    """Read a named property from a mapping or an object; None if never set."""
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def put_property(value: Any, name: str, new: Any) -> None:
    if isinstance(value, dict):
        value[name] = new
    else:
        setattr(value, name, new)


def apply_property(grid: Grid, i: int, j: int, name: str, transform: Callable[[Any], Any]) -> Any:
    """Replace property ``name`` of the cell value with ``transform(old)``.

    Cell values may be dicts (keys) or objects (attributes). A property that
    was never set is read as None.

    Returns:
        The new property value.

    Raises:
        OutOfBounds: if the grid has no cell at (i, j)
    """
    if is_not_in(grid, i, j):
        raise OutOfBounds(i=i, j=j, action="apply property to")
    value = grid.cells[i][j]
    new = transform(get_property(value, name))
    put_property(value, name, new)
    return new
