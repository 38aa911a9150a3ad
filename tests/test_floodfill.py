"""Tests for flood fill."""

import pytest

from gridsim import (
    Coord,
    FloodFill,
    MissingCell,
    create,
    duplicate,
    floodfill,
    parse_ascii,
    set_cell,
)


def plus_grid():
    grid = create(5, 5, 0)
    for i, j in [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)]:
        set_cell(grid, i, j, 1)
    return grid


def test_fill_plus_shape():
    grid = plus_grid()

    filled = floodfill(grid, (2, 2), lambda value, coord: value > 0)

    assert filled == [Coord(2, 2), Coord(1, 2), Coord(3, 2), Coord(2, 1), Coord(2, 3)]


def test_fill_everything_by_default():
    grid = plus_grid()

    filled = FloodFill(grid, (2, 2)).commit()

    assert len(filled) == 25
    assert set(filled) == {Coord(i, j) for i in range(5) for j in range(5)}
    assert filled[0] == Coord(2, 2)


def test_fill_is_depth_first():
    grid = create(2, 2)

    assert floodfill(grid, (0, 0)) == [Coord(0, 0), Coord(1, 0), Coord(1, 1), Coord(0, 1)]


def test_fill_does_not_touch_input():
    grid = plus_grid()
    before = duplicate(grid)

    floodfill(grid, (0, 0), lambda value, coord: value == 0)

    assert grid.cells == before.cells


def test_fill_stops_at_walls():
    grid = parse_ascii(
        """
..#..
..#..
###..
"""
    )

    left = FloodFill(grid, (0, 0)).where(lambda value, coord: value == 0).commit()
    right = floodfill(grid, (4, 2), lambda value, coord: value == 0)

    assert set(left) == {Coord(0, 0), Coord(1, 0), Coord(0, 1), Coord(1, 1)}
    assert len(right) == 6


def test_seed_outside_region_fills_nothing():
    grid = plus_grid()
    assert floodfill(grid, (0, 0), lambda value, coord: value > 0) == []


def test_seed_outside_grid():
    grid = create(3, 3)
    with pytest.raises(MissingCell):
        floodfill(grid, (5, 5))
