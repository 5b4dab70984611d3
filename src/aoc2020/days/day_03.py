"""
Day 3: Toboggan Trajectory
==========================
Count the trees (``#``) hit when sliding down a map that repeats endlessly to
the right.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# (right, down)
SLOPES: tuple[tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def parse_grid(contents: str) -> npt.NDArray[np.bool_]:
    """Parse the map into a boolean array indexed ``[row, column]``, True for a tree."""
    rows = [[char == "#" for char in line] for line in contents.splitlines() if line]
    if not rows:
        raise ValueError("Map is empty")
    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise ValueError(f"Map rows have inconsistent widths: {sorted(widths)}")
    return np.array(rows, dtype=bool)


def count_trees(grid: npt.NDArray[np.bool_], slope: int, speed: int = 1) -> int:
    """
    Count trees hit from the top-left corner to the bottom of the map.

    Args:
        grid: Tree map from ``parse_grid``.
        slope: Columns moved right per step.
        speed: Rows moved down per step.
    """
    rows = np.arange(0, grid.shape[0], speed)
    columns = (np.arange(rows.size) * slope) % grid.shape[1]
    return int(np.count_nonzero(grid[rows, columns]))


@register_puzzle
class TobogganTrajectory(Puzzle):
    DAY = 3
    TITLE = "Toboggan Trajectory"

    def solve(self, contents: str) -> list[Answer]:
        grid = parse_grid(contents)
        logger.debug(f"Parsed map of shape {grid.shape}")

        counts = [count_trees(grid, slope, speed) for slope, speed in SLOPES]
        single = count_trees(grid, 3, 1)
        product = math.prod(counts)

        return [
            Answer(1, single, f"Encountered {single} trees."),
            Answer(2, product, f"Encountered {' x '.join(map(str, counts))} = {product} trees."),
        ]
