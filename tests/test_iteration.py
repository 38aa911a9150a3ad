"""Tests for adjacency and filtered bulk iteration."""

import pytest

from gridsim.grid import (
    CellQuery,
    Coord,
    create,
    each_cell_of,
    each_sibling,
    of,
    remove_col,
    set_cell,
    siblings,
)
from gridsim.errors import InvalidFilter, MissingGrid


def test_siblings_of_interior_cell():
    grid = create(6, 6)

    result = siblings(grid, 2, 3)

    assert Coord(2, 3) not in result
    assert result == [Coord(1, 3), Coord(3, 3), Coord(2, 2), Coord(2, 4)]


def test_siblings_at_corner_and_edge():
    grid = create(5, 5)

    assert siblings(grid, 0, 0) == [Coord(1, 0), Coord(0, 1)]
    assert siblings(grid, 4, 4) == [Coord(3, 4), Coord(4, 3)]
    assert len(siblings(grid, 0, 2)) == 3


def test_siblings_skip_gaps():
    grid = create(3, 3)
    remove_col(grid, 1)

    assert siblings(grid, 0, 1) == [Coord(0, 0), Coord(0, 2)]


def test_each_sibling_passes_values():
    grid = create(3, 3)
    set_cell(grid, 1, 0, "up-ish")
    seen = []

    count = each_sibling(grid, 1, 1, lambda value, coord: seen.append((coord, value)))

    assert count == 4
    assert (Coord(1, 0), "up-ish") in seen


def test_count_and_set_value():
    grid = create(4, 4)

    diagonal = each_cell_of(grid).where(lambda value, coord: coord.i == coord.j)
    assert diagonal.count() == 4
    assert diagonal.set_value(1) == 4

    assert each_cell_of(grid, lambda value, coord: value == 1).count() == 4
    assert each_cell_of(grid).count() == 16


def test_map_builds_identity_matrix():
    grid = create(3, 3)

    changed = each_cell_of(grid).map(lambda value, coord: 1 if coord.i == coord.j else 0)

    assert changed == 9
    assert [[grid.cells[i][j] for j in range(3)] for i in range(3)] == [
        [1, 0, 0],
        [0, 1, 0],
        [0, 0, 1],
    ]


def test_map_writes_are_immediate():
    grid = create(3, 2)

    # each cell reads the cell above it, which was already rewritten
    each_cell_of(grid).map(lambda value, coord: of(grid, coord.i, coord.j - 1, 0) + 1)

    assert grid.cells[0] == {0: 1, 1: 2, 2: 3}
    assert grid.cells[1] == {0: 1, 1: 2, 2: 3}


def test_apply_property_on_matching_cells():
    grid = create(3, 3)
    each_cell_of(grid).map(lambda value, coord: {"id": tuple(coord)})

    count = each_cell_of(grid, lambda value, coord: coord.i == 0).apply_property(
        "hits", lambda old: (old or 0) + 1
    )

    assert count == 3
    assert grid.cells[0][2] == {"id": (0, 2), "hits": 1}
    assert "hits" not in grid.cells[1][0]


def test_coords_in_visiting_order():
    grid = create(2, 2)
    assert each_cell_of(grid).coords() == [Coord(0, 0), Coord(0, 1), Coord(1, 0), Coord(1, 1)]


def test_missing_grid():
    with pytest.raises(MissingGrid):
        each_cell_of(None)


def test_invalid_filter():
    grid = create(2, 2)

    with pytest.raises(InvalidFilter):
        CellQuery(grid, where=5)
    with pytest.raises(InvalidFilter):
        each_cell_of(grid).where("value > 0")
    with pytest.raises(TypeError):
        each_cell_of(grid).where(None)
