"""
Day 16: Ticket Translation
==========================
Tickets are lists of numbers whose field order is unknown. Each field has a
constraint of two inclusive ranges. Part one sums the numbers that satisfy
no constraint at all. Part two drops the tickets holding such numbers, works
out which position belongs to which field, and multiplies the ``departure``
fields of our own ticket.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

DEPARTURE_PREFIX = "departure"

_CONSTRAINT_PATTERN = re.compile(r"^([a-z ]+): (\d+)-(\d+) or (\d+)-(\d+)$")

Ticket = list[int]


@dataclass(frozen=True)
class Constraint:
    lower: tuple[int, int]
    upper: tuple[int, int]

    def validate(self, number: int) -> bool:
        return self.lower[0] <= number <= self.lower[1] or self.upper[0] <= number <= self.upper[1]


def parse_constraints(section: str) -> dict[str, Constraint]:
    constraints = {}
    for line in section.splitlines():
        match = _CONSTRAINT_PATTERN.match(line.strip())
        if match is None:
            raise ValueError(f"Invalid constraint line {line!r}")
        label, low_min, low_max, high_min, high_max = match.groups()
        constraints[label] = Constraint((int(low_min), int(low_max)), (int(high_min), int(high_max)))
    return constraints


def parse_ticket(line: str) -> Ticket:
    return [int(number) for number in line.strip().split(",") if number]


def parse_input(contents: str) -> tuple[dict[str, Constraint], Ticket, list[Ticket]]:
    """
    Split the notes into constraints, our ticket and the nearby tickets.

    Returns:
        A tuple of the constraints keyed by field name, our ticket, and the
        nearby tickets.

    Raises:
        ValueError: If a section is missing or malformed.
    """
    sections = re.split(r"\n\s*\n", contents.strip())
    if len(sections) < 3:
        raise ValueError(f"Expected 3 sections, found {len(sections)}")

    constraints = parse_constraints(sections[0])

    mine = sections[1].splitlines()
    if len(mine) < 2:
        raise ValueError("Missing numbers for your ticket")
    my_ticket = parse_ticket(mine[1])

    tickets = [parse_ticket(line) for line in sections[2].splitlines()[1:] if line.strip()]
    return constraints, my_ticket, tickets


def get_invalid_numbers(constraints: dict[str, Constraint], ticket: Iterable[int]) -> list[int]:
    """Numbers on the ticket that fail every constraint."""
    return [
        number
        for number in ticket
        if not any(constraint.validate(number) for constraint in constraints.values())
    ]


def get_scan_error_rate(constraints: dict[str, Constraint], tickets: Iterable[Ticket]) -> list[int]:
    return [number for ticket in tickets for number in get_invalid_numbers(constraints, ticket)]


def get_valid_positions(constraints: dict[str, Constraint], tickets: Iterable[Ticket]) -> dict[str, int]:
    """
    Work out the position of each field from the valid nearby tickets.

    Every field starts with all positions as candidates, and each valid ticket
    removes the positions whose number breaks the field's constraint. Fields
    left with a single candidate claim it, which removes that position from
    the others, until every field is placed.

    Raises:
        ValueError: If no valid ticket exists, or the candidates cannot be
            narrowed to a unique assignment.
    """
    candidates: dict[str, set[int]] = {}
    for ticket in tickets:
        if get_invalid_numbers(constraints, ticket):
            continue
        if not candidates:
            candidates = {label: set(range(len(ticket))) for label in constraints}
        for position, number in enumerate(ticket):
            for label, constraint in constraints.items():
                if not constraint.validate(number):
                    candidates[label].discard(position)

    if constraints and not candidates:
        raise ValueError("No valid tickets to deduce field positions from")

    positions: dict[str, int] = {}
    while len(positions) < len(candidates):
        singletons = {label: next(iter(found)) for label, found in candidates.items() if len(found) == 1}
        if not singletons:
            unresolved = sorted(set(candidates) - set(positions))
            raise ValueError(f"Failed to find a unique position for {unresolved}")

        for label, position in singletons.items():
            positions[label] = position
            for found in candidates.values():
                found.discard(position)

    logger.debug(f"Resolved positions for {len(positions)} fields")
    return positions


def map_ticket(mapping: dict[str, int], ticket: Sequence[int]) -> dict[str, int]:
    return {label: ticket[position] for label, position in mapping.items()}


def departure_product(fields: dict[str, int]) -> int:
    """
    Raises:
        ValueError: If the ticket has no departure fields.
    """
    departures = [value for label, value in fields.items() if label.startswith(DEPARTURE_PREFIX)]
    if not departures:
        raise ValueError("Ticket has no departure fields")
    return math.prod(departures)


@register_puzzle
class TicketTranslation(Puzzle):
    DAY = 16
    TITLE = "Ticket Translation"

    def solve(self, contents: str) -> list[Answer]:
        constraints, my_ticket, tickets = parse_input(contents)
        logger.debug(f"Parsed {len(constraints)} constraints and {len(tickets)} nearby tickets")

        error_rate = sum(get_scan_error_rate(constraints, tickets))
        fields = map_ticket(get_valid_positions(constraints, tickets), my_ticket)
        product = departure_product(fields)

        return [
            Answer(1, error_rate, f"The scan error rate was: {error_rate}"),
            Answer(2, product, f"The product of the departure fields is: {product}"),
        ]
