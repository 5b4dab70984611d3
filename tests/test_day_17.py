from __future__ import annotations

import pytest

from aoc2020.days.day_17 import ConwayCubes, iterate_grid, parse_input, run_boot_cycle

GLIDER = ".#.\n..#\n###\n"


def test_parse_input_3d():
    grid = parse_input(GLIDER, 3)
    assert grid.cells.shape == (3, 3, 1)
    assert grid.count_active() == 5
    for coords in [(1, 0, 0), (2, 1, 0), (0, 2, 0), (1, 2, 0), (2, 2, 0)]:
        assert grid.is_cell_active(*coords)
    assert not grid.is_cell_active(0, 0, 0)
    assert grid.bounds == ((0, 2), (0, 2), (0, 0))


def test_parse_input_4d():
    grid = parse_input(GLIDER, 4)
    assert grid.cells.shape == (3, 3, 1, 1)
    assert grid.is_cell_active(2, 2, 0, 0)
    assert grid.count_active() == 5


def test_parse_input_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_input(GLIDER, 1)
    with pytest.raises(ValueError):
        parse_input(".#.\n..\n", 3)
    with pytest.raises(ValueError):
        parse_input(".#?\n", 3)


def test_is_cell_active_outside_grid():
    grid = parse_input(GLIDER, 3)
    assert not grid.is_cell_active(-5, 0, 0)
    assert not grid.is_cell_active(1, 0, 7)


def test_is_cell_active_checks_dimensions():
    with pytest.raises(ValueError):
        parse_input(GLIDER, 3).is_cell_active(1, 0)


@pytest.mark.parametrize(
    ("coords", "expected"),
    [((0, 0, 0), 1), ((1, 1, 0), 5), ((2, 2, 0), 2), ((3, 3, 0), 1)],
)
def test_count_adjacent(coords, expected):
    assert parse_input(GLIDER, 3).count_adjacent(*coords) == expected


def test_iterate_grid_3d():
    grid = iterate_grid(parse_input(GLIDER, 3))
    assert grid.count_active() == 11
    for coords in [(0, 1, -1), (2, 2, -1), (1, 3, -1), (0, 1, 0), (2, 1, 0), (1, 2, 0), (2, 2, 0), (1, 3, 1)]:
        assert grid.is_cell_active(*coords)
    assert grid.bounds == ((0, 2), (1, 3), (-1, 1))

    grid = iterate_grid(grid)
    assert grid.count_active() == 21
    grid = iterate_grid(grid)
    assert grid.count_active() == 38


def test_iterate_grid_4d():
    grid = iterate_grid(parse_input(GLIDER, 4))
    assert grid.count_active() == 29
    grid = iterate_grid(grid)
    assert grid.count_active() == 60


def test_iterate_empty_grid():
    grid = iterate_grid(parse_input("...\n", 3))
    assert grid.count_active() == 0
    assert grid.bounds == ((0, 0), (0, 0), (0, 0))


def test_run_boot_cycle():
    assert run_boot_cycle(parse_input(GLIDER, 3)).count_active() == 112
    assert run_boot_cycle(parse_input(GLIDER, 4)).count_active() == 848


def test_solve():
    answers = ConwayCubes().solve(GLIDER)
    assert [answer.value for answer in answers] == [112, 848]
