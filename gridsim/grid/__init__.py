"""Sparse grid storage, cell access, adjacency and bulk iteration."""

from .store import (
    Grid,
    create,
    duplicate,
    duplicate_structure,
    add_row,
    add_col,
    remove_row,
    remove_col,
    each_cell,
)
from .cell import (
    Coord,
    CoordLike,
    to_coord,
    is_in,
    is_not_in,
    of,
    require,
    add_to,
    set_cell,
    apply_property,
)
from .adjacency import OFFSETS, siblings, each_sibling
from .iteration import CellQuery, CellFilter, each_cell_of

__all__ = [
    "Grid",
    "create",
    "duplicate",
    "duplicate_structure",
    "add_row",
    "add_col",
    "remove_row",
    "remove_col",
    "each_cell",
    "Coord",
    "CoordLike",
    "to_coord",
    "is_in",
    "is_not_in",
    "of",
    "require",
    "add_to",
    "set_cell",
    "apply_property",
    "OFFSETS",
    "siblings",
    "each_sibling",
    "CellQuery",
    "CellFilter",
    "each_cell_of",
]
