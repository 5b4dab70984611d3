"""
Day 1: Report Repair
====================
Find the entries of an expense report that sum to 2020: a pair for part one,
a triple for part two.

The pair search works on the sorted entries. Starting from the smallest value
``min``, anything larger than ``target - min`` can be thrown away; the new
largest value ``max`` then rules out anything smaller than ``target - max``.
Both bounds are found by binary search and the window narrows until the pair
is found or the bounds meet. The triple search fixes each value in turn and
runs the pair search on the values above it.
"""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

TARGET_SUM = 2020

_INTEGER = re.compile(r"-?\d+")


def read_to_ints(contents: str) -> list[int]:
    """Parse one integer per line, skipping lines that are not integers."""
    return [int(line) for line in contents.splitlines() if _INTEGER.fullmatch(line.strip())]


def _find_pair_in_range(
    values: npt.NDArray[np.int64],
    target_sum: int,
    low: int,
    high: int,
) -> Optional[tuple[int, int]]:
    """
    Narrow the sorted window ``values[low:high + 1]`` from both ends until two
    entries sum to ``target_sum``.

    Args:
        values: Entries sorted ascending.
        target_sum: Sum the pair must reach.
        low: Index of the smallest candidate.
        high: Index of the largest candidate.

    Returns:
        The pair in ascending order, or None when the window is exhausted.
    """
    while low < high:
        # Largest value that can still pair with values[low]
        bound = int(np.searchsorted(values, target_sum - values[low], side="right")) - 1
        high = min(high, bound)
        if high <= low:
            return None
        if values[low] + values[high] == target_sum:
            return int(values[low]), int(values[high])

        # Smallest value that can still pair with values[high]
        bound = int(np.searchsorted(values, target_sum - values[high], side="left"))
        low = max(low + 1, bound)
        if low >= high:
            return None
        if values[low] + values[high] == target_sum:
            return int(values[low]), int(values[high])

    return None


def _sorted_array(ints: Iterable[int]) -> npt.NDArray[np.int64]:
    return np.sort(np.fromiter(ints, dtype=np.int64))


def find_pair_sum(ints: Iterable[int], target_sum: int) -> Optional[tuple[int, int]]:
    """
    Find two entries summing to ``target_sum``.

    >>> find_pair_sum([1721, 979, 366, 299, 675, 1456], 2020)
    (299, 1721)
    """
    values = _sorted_array(ints)
    if values.size < 2:
        return None
    return _find_pair_in_range(values, target_sum, 0, values.size - 1)


def find_triple_sum(ints: Iterable[int], target_sum: int) -> Optional[tuple[int, int, int]]:
    """
    Find three entries summing to ``target_sum``.

    >>> find_triple_sum([1721, 979, 366, 299, 675, 1456], 2020)
    (366, 675, 979)
    """
    values = _sorted_array(ints)
    for i in range(values.size - 2):
        a = int(values[i])
        pair = _find_pair_in_range(values, target_sum - a, i + 1, values.size - 1)
        if pair is not None:
            return (a, *pair)
    return None


@register_puzzle
class ReportRepair(Puzzle):
    DAY = 1
    TITLE = "Report Repair"

    def solve(self, contents: str) -> list[Answer]:
        ints = read_to_ints(contents)
        logger.debug(f"Parsed {len(ints)} expense entries")

        pair = find_pair_sum(ints, TARGET_SUM)
        if pair is None:
            raise ValueError(f"No pair of entries sums to {TARGET_SUM}")
        a, b = pair

        triple = find_triple_sum(ints, TARGET_SUM)
        if triple is None:
            raise ValueError(f"No triple of entries sums to {TARGET_SUM}")
        x, y, z = triple

        return [
            Answer(1, a * b, f"{a} x {b} = {a * b}"),
            Answer(2, x * y * z, f"{x} x {y} x {z} = {x * y * z}"),
        ]
