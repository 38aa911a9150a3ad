"""
Gridsim - sparse 2D grids and the searches that run over them.

Wave (Lee) and best-first routing, flood fill, and straight-line traversal
with direction encoding, over a grid whose rows and columns can be added or
removed at runtime.

No global state. Every algorithm works on the grid it is given and writes
only to its own scratch grids.
"""

__version__ = "0.2.0"

# Grid storage and access
from .grid import (
    Grid,
    Coord,
    create,
    duplicate,
    duplicate_structure,
    add_row,
    add_col,
    remove_row,
    remove_col,
    each_cell,
    is_in,
    is_not_in,
    of,
    require,
    add_to,
    apply_property,
    siblings,
    each_sibling,
    CellQuery,
    each_cell_of,
)

# Algorithms
from .traversal import Direction, Traversal, traverse, distance, direction_between, move
from .floodfill import FloodFill, floodfill
from .routing import RouteQuery, lee, best_first, find_route, walkable_cells_count

# Service call surface
from .api import (
    create_grid,
    get_cell,
    set_cell,
    route,
    flood,
    describe_route,
    describe_flood,
)

# Serializable results
from .schemas import CoordState, RouteResult, FloodResult, GridState

# ASCII maps
from .render import parse_ascii, render_ascii

# Errors
from .errors import (
    GridError,
    InvalidDimensions,
    OutOfBounds,
    MissingCell,
    BoundaryExceeded,
    MissingGrid,
    InvalidFilter,
    Unreachable,
)

from .config import Config

__all__ = [
    # Grid
    "Grid",
    "Coord",
    "create",
    "duplicate",
    "duplicate_structure",
    "add_row",
    "add_col",
    "remove_row",
    "remove_col",
    "each_cell",
    "is_in",
    "is_not_in",
    "of",
    "require",
    "add_to",
    "apply_property",
    "siblings",
    "each_sibling",
    "CellQuery",
    "each_cell_of",
    # Traversal
    "Direction",
    "Traversal",
    "traverse",
    "distance",
    "direction_between",
    "move",
    # Flood fill
    "FloodFill",
    "floodfill",
    # Routing
    "RouteQuery",
    "lee",
    "best_first",
    "find_route",
    "walkable_cells_count",
    # Service surface
    "create_grid",
    "get_cell",
    "set_cell",
    "route",
    "flood",
    "describe_route",
    "describe_flood",
    # Schemas
    "CoordState",
    "RouteResult",
    "FloodResult",
    "GridState",
    # ASCII maps
    "parse_ascii",
    "render_ascii",
    # Errors
    "GridError",
    "InvalidDimensions",
    "OutOfBounds",
    "MissingCell",
    "BoundaryExceeded",
    "MissingGrid",
    "InvalidFilter",
    "Unreachable",
    # Config
    "Config",
]
