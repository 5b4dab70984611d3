"""
Day 13: Shuttle Search
======================
Buses leave every ``bus_id`` minutes from timestamp 0. Part one finds the
first bus after a given time. Part two finds the earliest timestamp at which
each bus departs exactly its list index minutes later.

Part two is solved by sieving: once a timestamp satisfies the first ``k``
buses, stepping by the lcm of their ids keeps them satisfied while searching
for the next bus.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

OUT_OF_SERVICE = "x"


def parse_input(contents: str) -> tuple[int, list[tuple[int, int]]]:
    """
    Parse the earliest departure time and the in-service buses.

    Returns:
        The timestamp, and ``(index, bus_id)`` pairs for every bus that is
        not ``x``.

    Raises:
        ValueError: If either line is missing or not numeric.
    """
    lines = [line.strip() for line in contents.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("Expected a timestamp line and a bus list line")

    timestamp = int(lines[0])
    buses = [
        (index, int(bus_id))
        for index, bus_id in enumerate(lines[1].split(","))
        if bus_id != OUT_OF_SERVICE
    ]
    return timestamp, buses


def next_departure(timestamp: int, bus_id: int) -> int:
    """Minutes to wait from ``timestamp`` until ``bus_id`` next departs."""
    return -timestamp % bus_id


def find_best_departure(timestamp: int, bus_ids: Sequence[int]) -> tuple[int, int]:
    if not bus_ids:
        raise ValueError("No buses in service")
    best = min(bus_ids, key=lambda bus_id: next_departure(timestamp, bus_id))
    return best, next_departure(timestamp, best)


def find_sequential_departure(buses: Sequence[tuple[int, int]]) -> int:
    timestamp, period = 0, 1
    for index, bus_id in buses:
        while (timestamp + index) % bus_id:
            timestamp += period
        period = math.lcm(period, bus_id)
    return timestamp


@register_puzzle
class ShuttleSearch(Puzzle):
    DAY = 13
    TITLE = "Shuttle Search"

    def solve(self, contents: str) -> list[Answer]:
        timestamp, buses = parse_input(contents)
        logger.debug(f"Parsed {len(buses)} buses in service")

        bus_id, wait = find_best_departure(timestamp, [bus_id for _, bus_id in buses])
        sequence_start = find_sequential_departure(buses)

        return [
            Answer(1, bus_id * wait, f"The next bus: {bus_id} x wait time: {wait} minutes = {bus_id * wait}"),
            Answer(2, sequence_start, f"The first sequential start begins at timestamp {sequence_start}"),
        ]
