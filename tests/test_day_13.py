from __future__ import annotations

import pytest

from aoc2020.days.day_13 import (
    ShuttleSearch,
    find_best_departure,
    find_sequential_departure,
    next_departure,
    parse_input,
)

NOTES = "939\n7,13,x,x,59,x,31,19\n"


def _buses(schedule: str) -> list[tuple[int, int]]:
    return parse_input(f"0\n{schedule}\n")[1]


def test_parse_input():
    timestamp, buses = parse_input(NOTES)
    assert timestamp == 939
    assert buses == [(0, 7), (1, 13), (4, 59), (6, 31), (7, 19)]


def test_parse_input_requires_two_lines():
    with pytest.raises(ValueError):
        parse_input("939\n")


@pytest.mark.parametrize(
    ("timestamp", "bus_id", "expected"),
    [(0, 7, 0), (939, 59, 5), (939, 7, 6), (945, 7, 0)],
)
def test_next_departure(timestamp, bus_id, expected):
    assert next_departure(timestamp, bus_id) == expected


def test_find_best_departure():
    assert find_best_departure(939, [7, 13, 59, 31, 19]) == (59, 5)


@pytest.mark.parametrize(
    ("schedule", "expected"),
    [
        ("7,13,x,x,59,x,31,19", 1068781),
        ("17,x,13,19", 3417),
        ("67,7,59,61", 754018),
        ("67,x,7,59,61", 779210),
        ("67,7,x,59,61", 1261476),
        ("1789,37,47,1889", 1202161486),
    ],
)
def test_find_sequential_departure(schedule, expected):
    assert find_sequential_departure(_buses(schedule)) == expected


def test_solve():
    answers = ShuttleSearch().solve(NOTES)
    assert [answer.value for answer in answers] == [295, 1068781]
