"""Tests for ASCII map parsing and rendering."""

from gridsim import Coord, Grid, lee, parse_ascii, render_ascii
from gridsim.routing import RouteQuery

MAP = """
.....
.###.
...#.
"""


def test_parse_ascii_layout():
    grid = parse_ascii(MAP)

    assert grid.columns() == [0, 1, 2, 3, 4]
    assert grid.rows(0) == [0, 1, 2]
    assert grid.cells[1][1] == 1
    assert grid.cells[0][2] == 0
    assert grid.cells[3][2] == 1


def test_parse_ascii_spaces_are_gaps():
    grid = parse_ascii("..\n. .")

    assert (1, 1) not in grid
    assert grid.cell_count() == 4


def test_render_round_trip():
    grid = parse_ascii(MAP)
    assert render_ascii(grid) == MAP.strip("\n")


def test_render_route():
    grid = parse_ascii(MAP)
    route = lee(grid, RouteQuery.build((0, 2), (4, 2), walkable=lambda value, coord: value == 0))

    drawing = render_ascii(grid, route)

    assert route[-1] == Coord(4, 2)
    assert drawing.splitlines() == [
        "*****",
        "*###*",
        "*..#*",
    ]


def test_custom_symbols():
    grid = parse_ascii("aW", symbols={"W": "wall"})

    assert grid.cells[0][0] == "a"
    assert grid.cells[1][0] == "wall"
    assert render_ascii(grid, symbols={"W": "wall"}) == "aW"


def test_unknown_values_and_empty_grid():
    grid = Grid(cells={0: {0: 42}})

    assert render_ascii(grid) == "?"
    assert render_ascii(Grid()) == ""
