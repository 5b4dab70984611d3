"""
Day 5: Binary Boarding
======================
A boarding pass code is a 10-bit binary number: ``F``/``L`` are 0 and
``B``/``R`` are 1. The first seven bits are the row, the last three the column.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Collection, Optional

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

_BITS = {"F": 0, "L": 0, "B": 1, "R": 1}
MAX_SEAT_ID = 1 << 11


@dataclass(frozen=True, order=True)
class Seat:
    id: int

    @classmethod
    def from_code(cls, code: str) -> Seat:
        seat_id = 0
        for char in code:
            if char not in _BITS:
                raise ValueError(f"Unexpected character {char!r} in seat code {code!r}")
            seat_id = (seat_id << 1) | _BITS[char]
        return cls(seat_id)

    @property
    def row(self) -> int:
        return self.id >> 3

    @property
    def column(self) -> int:
        return self.id & 0b111


def find_seat(allocated_ids: Collection[int]) -> Optional[int]:
    """Find the free seat whose neighbouring ids are both taken."""
    for seat_id in range(1, MAX_SEAT_ID):
        if (
            seat_id not in allocated_ids
            and seat_id - 1 in allocated_ids
            and seat_id + 1 in allocated_ids
        ):
            return seat_id
    return None


@register_puzzle
class BinaryBoarding(Puzzle):
    DAY = 5
    TITLE = "Binary Boarding"

    def solve(self, contents: str) -> list[Answer]:
        allocated = {Seat.from_code(line.strip()).id for line in contents.splitlines() if line.strip()}
        if not allocated:
            raise ValueError("No boarding passes in input")

        max_id = max(allocated)
        my_seat = find_seat(allocated)
        if my_seat is None:
            raise ValueError("No free seat between two allocated seats")

        return [
            Answer(1, max_id, f"Max Seat ID: {max_id}"),
            Answer(2, my_seat, f"My Seat ID: {my_seat}"),
        ]
