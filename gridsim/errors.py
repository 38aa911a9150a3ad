"""Exceptions raised by grid operations and search algorithms.

Every error is raised where the violation happens and carries the offending
coordinates or sizes so callers can decide whether to retry with different
parameters (e.g. a relaxed walkability predicate).
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class GridError(Exception):
    """Base class for all gridsim failures."""


class InvalidDimensions(GridError, ValueError):
    """Raised when a grid is created with a non-positive number of cells."""

    def __init__(self, *, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Number of columns and rows must be positive integers (got rows={rows}, cols={cols})"
        )


class OutOfBounds(GridError, LookupError):
    """Raised when an operation needs a cell that the grid does not contain."""

    def __init__(self, *, i: int, j: int, action: str = "access") -> None:
        self.i = i
        self.j = j
        self.action = action
        super().__init__(f"Cannot {action} cell ({i}, {j}): cell is out of bound")


class MissingCell(OutOfBounds):
    """Raised by required lookups (``require``, flood fill seeds) on absent cells."""

    def __init__(self, *, i: int, j: int, action: str = "read") -> None:
        super().__init__(i=i, j=j, action=action)


class BoundaryExceeded(GridError):
    """Raised when a traversal step would leave the grid.

    ``route`` holds the route as constructed up to, not including, the
    offending step.
    """

    def __init__(self, *, position: Tuple[int, int], direction: Any, route: Optional[list] = None) -> None:
        self.position = position
        self.direction = direction
        self.route = list(route or [])
        name = getattr(direction, "value", direction)
        super().__init__(
            f"Move {name} to {tuple(position)} exceeds the boundary of the grid "
            f"after {max(len(self.route) - 1, 0)} step(s)"
        )


class MissingGrid(GridError, ValueError):
    """Raised when a cell query is built without a grid."""

    def __init__(self) -> None:
        super().__init__("Grid has not been defined")


class InvalidFilter(GridError, TypeError):
    """Raised when a cell filter is not callable."""

    def __init__(self, condition: Any) -> None:
        self.condition = condition
        super().__init__(
            f"Requires a function clause, got {type(condition).__name__}"
        )


class Unreachable(GridError):
    """Raised when no route exists between start and goal under the walkability predicate."""

    def __init__(self, *, start: Tuple[int, int], goal: Tuple[int, int], reason: str = "no_path_found") -> None:
        self.start = start
        self.goal = goal
        self.reason = reason
        super().__init__(
            f"No route from {tuple(start)} to {tuple(goal)} ({reason})"
        )
