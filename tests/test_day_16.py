from __future__ import annotations

import pytest

from aoc2020.days.day_16 import (
    Constraint,
    TicketTranslation,
    departure_product,
    get_invalid_numbers,
    get_scan_error_rate,
    get_valid_positions,
    map_ticket,
    parse_input,
)

NOTES = """class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

POSITION_NOTES = """class: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""

DEPARTURE_NOTES = """departure location: 0-1 or 4-19
departure station: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""


def test_constraint_validate():
    constraint = Constraint((1, 3), (5, 7))
    assert constraint.validate(1)
    assert constraint.validate(7)
    assert not constraint.validate(4)
    assert not constraint.validate(8)


def test_parse_input():
    constraints, my_ticket, tickets = parse_input(NOTES)
    assert constraints == {
        "class": Constraint((1, 3), (5, 7)),
        "row": Constraint((6, 11), (33, 44)),
        "seat": Constraint((13, 40), (45, 50)),
    }
    assert my_ticket == [7, 1, 14]
    assert tickets == [[7, 3, 47], [40, 4, 50], [55, 2, 20], [38, 6, 12]]


def test_parse_input_requires_all_sections():
    with pytest.raises(ValueError):
        parse_input("class: 1-3 or 5-7\n\nyour ticket:\n7,1,14\n")


def test_parse_input_rejects_bad_constraint():
    with pytest.raises(ValueError):
        parse_input("class: 1-3\n\nyour ticket:\n7\n\nnearby tickets:\n7\n")


def test_get_invalid_numbers():
    constraints, _, _ = parse_input(NOTES)
    assert get_invalid_numbers(constraints, [40, 4, 50]) == [4]
    assert get_invalid_numbers(constraints, [7, 3, 47]) == []


def test_get_scan_error_rate():
    constraints, _, tickets = parse_input(NOTES)
    assert get_scan_error_rate(constraints, tickets) == [4, 55, 12]


def test_get_valid_positions():
    constraints, _, tickets = parse_input(POSITION_NOTES)
    assert get_valid_positions(constraints, tickets) == {"class": 1, "row": 0, "seat": 2}


def test_get_valid_positions_ignores_invalid_tickets():
    constraints, _, tickets = parse_input(POSITION_NOTES)
    assert get_valid_positions(constraints, [*tickets, [99, 99, 99]]) == {"class": 1, "row": 0, "seat": 2}


def test_get_valid_positions_without_unique_answer():
    constraints = {"a": Constraint((0, 5), (6, 9)), "b": Constraint((0, 5), (6, 9))}
    with pytest.raises(ValueError):
        get_valid_positions(constraints, [[1, 2]])


def test_get_valid_positions_without_valid_tickets():
    constraints = {"a": Constraint((0, 1), (2, 3))}
    with pytest.raises(ValueError):
        get_valid_positions(constraints, [[50]])


def test_map_ticket():
    mapping = {"class": 1, "row": 0, "seat": 2}
    assert map_ticket(mapping, [11, 12, 13]) == {"class": 12, "row": 11, "seat": 13}


def test_departure_product():
    assert departure_product({"departure a": 3, "departure b": 4, "seat": 100}) == 12


def test_departure_product_requires_departure_fields():
    with pytest.raises(ValueError):
        departure_product({"seat": 100})


def test_solve():
    answers = TicketTranslation().solve(DEPARTURE_NOTES)
    assert [answer.value for answer in answers] == [0, 132]
