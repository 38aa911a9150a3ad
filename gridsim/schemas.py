"""
Pydantic schemas for gridsim results.

These models mirror the runtime types (``Grid``, ``Coord``, routes) but stay
JSON-serializable, so a service layer can return them as-is with
``model_dump()`` / ``model_dump_json()``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Sequence

from pydantic import BaseModel, Field

from .grid import Coord, Grid


class CoordState(BaseModel):
    """A cell coordinate: column ``i``, row ``j``."""

    i: int
    j: int

    @classmethod
    def from_coord(cls, coord: Sequence[int]) -> "CoordState":
        i, j = coord
        return cls(i=i, j=j)

    def to_coord(self) -> Coord:
        return Coord(self.i, self.j)


def coord_states(coords: Sequence[Sequence[int]]) -> List[CoordState]:
    return [CoordState.from_coord(c) for c in coords]


class RouteResult(BaseModel):
    """Outcome of a route query."""

    algorithm: Literal["wave", "bestfirst"]
    start: CoordState
    goal: CoordState
    route: List[CoordState] = Field(
        default_factory=list,
        description="Cells from start to goal, both included",
    )
    distance: int = Field(0, description="Number of steps along the route")
    directions: List[Literal["UP", "DOWN", "LEFT", "RIGHT"]] = Field(
        default_factory=list,
        description="Direction label for each step",
    )


class FloodResult(BaseModel):
    """Cells reached by a flood fill, in discovery order."""

    start: CoordState
    cells: List[CoordState] = Field(default_factory=list)
    count: int = 0


class GridState(BaseModel):
    """Sparse snapshot of a grid: column index → row index → value."""

    default: Any = 0
    cells: Dict[int, Dict[int, Any]] = Field(
        default_factory=dict,
        description="Sparse map: i → (j → cell value)",
    )

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridState":
        return cls(
            default=grid.default,
            cells={i: dict(grid.cells[i]) for i in grid.columns()},
        )

    def to_grid(self) -> Grid:
        return Grid(
            cells={i: dict(column) for i, column in self.cells.items()},
            default=self.default,
        )
