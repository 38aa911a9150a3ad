"""Tests for coordinates and single-cell access."""

from types import SimpleNamespace

import pytest

from gridsim.grid import (
    Coord,
    add_to,
    apply_property,
    create,
    is_in,
    is_not_in,
    of,
    require,
    set_cell,
    to_coord,
)
from gridsim.errors import MissingCell, OutOfBounds


def test_coord_is_structural():
    assert Coord(3, 4) == Coord(3, 4)
    assert Coord(3, 4) == (3, 4)
    assert Coord(7, 24).as_dict() == {"i": 7, "j": 24}
    assert len({Coord(1, 1), Coord(1, 1), Coord(1, 2)}) == 2


def test_to_coord_accepts_tuples_and_dicts():
    assert to_coord((2, 5)) == Coord(2, 5)
    assert to_coord([2, 5]) == Coord(2, 5)
    assert to_coord({"i": 2, "j": 5}) == Coord(2, 5)
    with pytest.raises(TypeError):
        to_coord(("a", 1))


def test_membership():
    grid = create(10, 10, 0)

    assert is_in(grid, 10, 10) is False
    assert is_not_in(grid, 10, 10) is True
    assert is_in(grid, 0, -10) is False
    assert is_in(grid, 0, 0) is True
    assert is_in(grid, 2, 6) is True
    assert is_in(grid, 3, 0) is True


def test_membership_requires_integers():
    grid = create(2, 2)
    with pytest.raises(TypeError):
        is_in(grid, 1.5, 0)


def test_set_and_read_values():
    grid = create(10, 10, 0)
    for i in range(10):
        for j in range(10):
            set_cell(grid, i, j, f"{i}:{j}")

    assert of(grid, 3, 2) == "3:2"
    assert of(grid, 5, 2) == "5:2"
    assert of(grid, 9, 9) == "9:9"
    assert of(grid, 0, 0) == "0:0"


def test_read_absent_cell_is_not_an_error():
    grid = create(2, 2)
    assert of(grid, 5, 5) is None
    assert of(grid, 5, 5, default="none") == "none"


def test_set_grows_the_grid():
    grid = create(2, 2)

    set_cell(grid, 20, 3, "far")

    assert is_in(grid, 20, 3)
    assert grid.rows(20) == [3]
    assert of(grid, 20, 3) == "far"


def test_add_to_registers_once():
    grid = create(1, 1)

    assert add_to(grid, 0, 0) is False
    assert add_to(grid, 0, 1, value="new") is True
    assert of(grid, 0, 1) == "new"


def test_require_raises_missing_cell():
    grid = create(2, 2)
    assert require(grid, 1, 1) == 0
    with pytest.raises(MissingCell) as excinfo:
        require(grid, 2, 0)
    assert (excinfo.value.i, excinfo.value.j) == (2, 0)
    assert isinstance(excinfo.value, OutOfBounds)


def test_apply_property_on_dict_value():
    grid = create(2, 2)
    set_cell(grid, 0, 0, {})

    def push(item):
        return lambda items: (items or []) + [item]

    apply_property(grid, 0, 0, "items", push("sword"))
    result = apply_property(grid, 0, 0, "items", push("shield"))

    assert result == ["sword", "shield"]
    assert of(grid, 0, 0) == {"items": ["sword", "shield"]}


def test_apply_property_on_object_value():
    grid = create(1, 1)
    set_cell(grid, 0, 0, SimpleNamespace(visits=2))

    apply_property(grid, 0, 0, "visits", lambda n: n + 1)
    apply_property(grid, 0, 0, "label", lambda old: f"was {old}")

    cell = of(grid, 0, 0)
    assert cell.visits == 3
    assert cell.label == "was None"


def test_apply_property_out_of_bounds():
    grid = create(2, 2)
    with pytest.raises(OutOfBounds):
        apply_property(grid, 3, 3, "items", lambda old: old)
