from __future__ import annotations

import numpy as np
import pytest

from aoc2020.days.day_11 import (
    ADJACENT_THRESHOLD,
    VISIBLE_THRESHOLD,
    Seat,
    SeatingSystem,
    count_adjacent_occupied,
    count_stable_adjacent_occupation,
    count_stable_visible_occupation,
    iterate_cell,
    iterate_grid,
    lookup_surrounds,
    lookup_visible_seat,
    lookup_visible_seats,
    parse_grid,
    render_grid,
    visible_counter,
)

LAYOUT = """L.LL.LL.LL
LLLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLLL
L.LLLLLL.L
L.LLLLL.LL
"""

AFTER_ONE_ROUND = """#.##.##.##
#######.##
#.#.#..#..
####.##.##
#.##.##.##
#.#####.##
..#.#.....
##########
#.######.#
#.#####.##"""

AFTER_TWO_ADJACENT_ROUNDS = """#.LL.L#.##
#LLLLLL.L#
L.L.L..L..
#LLL.LL.L#
#.LL.LL.LL
#.LLLL#.##
..L.L.....
#LLLLLLLL#
#.LLLLLL.L
#.#LLLL.##"""

AFTER_TWO_VISIBLE_ROUNDS = """#.LL.LL.L#
#LLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLL#
#.LLLLLL.L
#.LLLLL.L#"""

SIGHT_LINES = """.......#.
...#.....
.#.......
.........
..#L....#
....#....
.........
#........
...#.....
"""


def test_parse_and_render_grid():
    grid = parse_grid(LAYOUT)
    assert grid.shape == (10, 10)
    assert grid[0, 0] == Seat.EMPTY
    assert grid[0, 1] == Seat.FLOOR
    assert render_grid(grid) == LAYOUT.strip()


def test_parse_grid_pads_short_rows():
    grid = parse_grid("LLL\nL\n")
    assert render_grid(grid) == "LLL\nL.."


def test_parse_grid_rejects_long_rows():
    with pytest.raises(ValueError):
        parse_grid("LL\nLLL\n")


def test_parse_grid_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        parse_grid("L.X\n")


def test_lookup_surrounds_at_corner():
    grid = parse_grid(AFTER_ONE_ROUND)
    assert lookup_surrounds(grid, 0, 0) == [Seat.FLOOR, Seat.OCCUPIED, Seat.OCCUPIED]


def test_lookup_visible_seats_sees_eight_occupied():
    grid = parse_grid(SIGHT_LINES)
    assert lookup_visible_seats(grid, 3, 4) == [Seat.OCCUPIED] * 8


def test_lookup_visible_seat_stops_at_first_seat():
    grid = parse_grid(".L.L.#.#.#.\n")
    assert lookup_visible_seat(grid, 1, 0, 1, 0) == Seat.EMPTY
    assert lookup_visible_seat(grid, 1, 0, -1, 0) is None
    assert lookup_visible_seats(grid, 1, 0) == [Seat.EMPTY]


def test_iterate_cell():
    grid = parse_grid(AFTER_ONE_ROUND)
    assert iterate_cell(grid, 0, 0, lookup_surrounds, ADJACENT_THRESHOLD) is Seat.OCCUPIED
    assert iterate_cell(grid, 2, 0, lookup_surrounds, ADJACENT_THRESHOLD) is Seat.EMPTY
    assert iterate_cell(grid, 1, 0, lookup_surrounds, ADJACENT_THRESHOLD) is Seat.FLOOR


def test_count_adjacent_occupied_matches_lookup():
    grid = parse_grid(AFTER_ONE_ROUND)
    counts = count_adjacent_occupied(grid)
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            assert counts[y, x] == lookup_surrounds(grid, x, y).count(Seat.OCCUPIED)


def test_visible_counter_matches_lookup():
    grid = parse_grid(SIGHT_LINES)
    counts = visible_counter(grid)(grid)
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            if grid[y, x] != Seat.FLOOR:
                assert counts[y, x] == lookup_visible_seats(grid, x, y).count(Seat.OCCUPIED)


def test_iterate_grid_adjacent():
    grid, changes = iterate_grid(parse_grid(LAYOUT), count_adjacent_occupied, ADJACENT_THRESHOLD)
    assert changes == 71
    assert render_grid(grid) == AFTER_ONE_ROUND

    grid, changes = iterate_grid(grid, count_adjacent_occupied, ADJACENT_THRESHOLD)
    assert changes == 51
    assert render_grid(grid) == AFTER_TWO_ADJACENT_ROUNDS


def test_iterate_grid_visible():
    grid = parse_grid(LAYOUT)
    counter = visible_counter(grid)
    grid, changes = iterate_grid(grid, counter, VISIBLE_THRESHOLD)
    assert changes == 71
    assert render_grid(grid) == AFTER_ONE_ROUND

    grid, changes = iterate_grid(grid, counter, VISIBLE_THRESHOLD)
    assert changes == 64
    assert render_grid(grid) == AFTER_TWO_VISIBLE_ROUNDS


def test_iterate_grid_leaves_input_untouched():
    grid = parse_grid(LAYOUT)
    before = grid.copy()
    iterate_grid(grid, count_adjacent_occupied, ADJACENT_THRESHOLD)
    assert np.array_equal(grid, before)


def test_count_stable_occupation():
    grid = parse_grid(LAYOUT)
    assert count_stable_adjacent_occupation(grid) == 37
    assert count_stable_visible_occupation(grid) == 26


def test_count_stable_occupation_of_single_seat():
    grid = parse_grid(".L.\n")
    assert count_stable_adjacent_occupation(grid) == 1
    assert count_stable_visible_occupation(grid) == 1


def test_solve():
    answers = SeatingSystem().solve(LAYOUT)
    assert [answer.value for answer in answers] == [37, 26]
