"""
Day 10: Adapter Array
=====================
Joltage adapters differ by 1 or 3. Part one multiplies the counts of each gap;
part two counts the valid adapter chains. Only runs of consecutive 1-jolt gaps
offer choices, and a run of length ``n`` can be traversed in tribonacci(n)
ways, so the answer is the product over all runs.
"""
from __future__ import annotations

import functools
import logging
from typing import Sequence

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)


def parse(contents: str) -> list[int]:
    return sorted(int(line) for line in contents.splitlines() if line.strip())


def _gaps(adapters: Sequence[int]) -> list[int]:
    # the outlet is rated 0 jolts
    return [b - a for a, b in zip([0, *adapters], adapters)]


def calculate_jolts(adapters: Sequence[int]) -> tuple[int, int]:
    """Counts of 1-jolt and 3-jolt gaps, including the final jump to the device."""
    gaps = _gaps(adapters)
    return gaps.count(1), gaps.count(3) + 1


@functools.cache
def run_combinations(run: int) -> int:
    if run <= 1:
        return 1
    if run == 2:
        return 2
    return run_combinations(run - 1) + run_combinations(run - 2) + run_combinations(run - 3)


def calculate_combinations(adapters: Sequence[int]) -> int:
    combinations = 1
    run = 0
    for gap in _gaps(adapters):
        if gap == 1:
            run += 1
        elif gap == 3:
            combinations *= run_combinations(run)
            run = 0
        else:
            raise ValueError(f"Unsupported gap of {gap} jolts")

    return combinations * run_combinations(run)


@register_puzzle
class AdapterArray(Puzzle):
    DAY = 10
    TITLE = "Adapter Array"

    def solve(self, contents: str) -> list[Answer]:
        adapters = parse(contents)
        logger.debug(f"Parsed {len(adapters)} adapters")

        ones, threes = calculate_jolts(adapters)
        combinations = calculate_combinations(adapters)

        return [
            Answer(1, ones * threes, f"{ones} ones x {threes} threes = {ones * threes}"),
            Answer(2, combinations, f"{combinations} possible combinations"),
        ]
