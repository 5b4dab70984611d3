"""
Day 9: Encoding Error
=====================
Each number after the preamble must be the sum of two of the numbers in the
window before it. Find the first that is not, then the contiguous run summing
to it.
"""
from __future__ import annotations

import itertools
import logging
from typing import Optional, Sequence

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

PREAMBLE = 25


def parse_numbers(contents: str) -> list[int]:
    return [int(line) for line in contents.splitlines() if line.strip()]


def find_first_invalid(numbers: Sequence[int], preamble: int) -> Optional[int]:
    for i in range(preamble, len(numbers)):
        window = numbers[i - preamble:i]
        if not any(a + b == numbers[i] for a, b in itertools.combinations(window, 2)):
            return numbers[i]
    return None


def find_weakness(numbers: Sequence[int], target: int) -> Optional[int]:
    """
    Find a contiguous run of at least two numbers summing to ``target`` and
    return the sum of its smallest and largest values.

    The input is positive, so the run only ever needs to shrink from the
    front when its sum overshoots.
    """
    start = 0
    total = 0
    for end, number in enumerate(numbers):
        total += number
        while total > target and start < end:
            total -= numbers[start]
            start += 1
        if total == target and end > start:
            run = numbers[start:end + 1]
            return min(run) + max(run)
    return None


@register_puzzle
class EncodingError(Puzzle):
    DAY = 9
    TITLE = "Encoding Error"

    def solve(self, contents: str) -> list[Answer]:
        numbers = parse_numbers(contents)

        invalid = find_first_invalid(numbers, PREAMBLE)
        if invalid is None:
            raise ValueError("Every number is a sum of two of its predecessors")

        weakness = find_weakness(numbers, invalid)
        if weakness is None:
            raise ValueError(f"No contiguous run sums to {invalid}")

        return [
            Answer(1, invalid, f"First invalid number is: {invalid}"),
            Answer(2, weakness, f"Encryption weakness: {weakness}"),
        ]
