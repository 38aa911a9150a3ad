"""Straight-line traversal and direction encoding.

``Traversal`` builds routes without searching: ``to()`` walks straight to a
target, closing the row gap (j) first and then the column gap (i); ``go()``
replays a list of directions and stops at the grid boundary.

Usage:
    walk = traverse(grid, 0, 0).to(3, 2)
    labels = walk.directions()      # [DOWN, DOWN, RIGHT, RIGHT, RIGHT]
    traverse(grid, 0, 0).go(labels) == walk.route
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from .errors import BoundaryExceeded
from .grid import Coord, CoordLike, Grid, to_coord


class Direction(str, Enum):
    """Unit moves on the grid. UP/DOWN change the row j, LEFT/RIGHT the column i."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

DirectionLike = Union[Direction, str]


def distance(coord1: CoordLike, coord2: CoordLike) -> int:
    """Manhattan (block) distance between two coordinates."""
    a, b = to_coord(coord1), to_coord(coord2)
    return abs(a.i - b.i) + abs(a.j - b.j)


def direction_between(start: CoordLike, end: CoordLike) -> Optional[Direction]:
    """Label for the move from ``start`` to ``end``; None when they are the same cell."""
    a, b = to_coord(start), to_coord(end)
    if a.i < b.i:
        return Direction.RIGHT
    if a.i > b.i:
        return Direction.LEFT
    if a.j < b.j:
        return Direction.DOWN
    if a.j > b.j:
        return Direction.UP
    return None


def move(coord: CoordLike, direction: DirectionLike) -> Coord:
    """Return the neighbour of ``coord`` one step towards ``direction``."""
    c = to_coord(coord)
    di, dj = Direction(str(getattr(direction, "value", direction)).upper()).offset
    return Coord(c.i + di, c.j + dj)


def straight_route(start: CoordLike, end: CoordLike) -> List[Coord]:
    """Axis-aligned route from ``start`` to ``end``: all j steps, then all i steps."""
    a, b = to_coord(start), to_coord(end)
    route = [a]
    i, j = a
    while j != b.j:
        j += 1 if j < b.j else -1
        route.append(Coord(i, j))
    while i != b.i:
        i += 1 if i < b.i else -1
        route.append(Coord(i, j))
    return route


class Traversal:
    """Route builder anchored at a start coordinate of a grid."""

    def __init__(self, grid: Grid, start: CoordLike):
        self.grid = grid
        self.start = to_coord(start)
        self.route: List[Coord] = [self.start]

    def to(self, m: int, n: int) -> "Traversal":
        """Walk straight to (m, n), replacing the current route."""
        self.route = straight_route(self.start, (m, n))
        return self

    def go(self, directions: Iterable[DirectionLike]) -> List[Coord]:
        """Replay ``directions`` from the start, replacing the current route.

        Raises:
            BoundaryExceeded: as soon as a step leaves the grid; ``self.route``
                then holds the steps taken before the offending one.
        """
        self.route = [self.start]
        position = self.start
        for direction in directions:
            position = move(position, direction)
            if not self.grid.has(position.i, position.j):
                raise BoundaryExceeded(position=position, direction=direction, route=self.route)
            self.route.append(position)
        return self.route

    def distance(self) -> int:
        """Number of steps in the route."""
        return len(self.route) - 1

    def directions(self) -> List[Direction]:
        labels = []
        for previous, current in zip(self.route, self.route[1:]):
            label = direction_between(previous, current)
            if label is not None:
                labels.append(label)
        return labels

    def __len__(self) -> int:
        return len(self.route)


def traverse(grid: Grid, i: int, j: int) -> Traversal:
    return Traversal(grid, (i, j))
