"""
Day 17: Conway Cubes
====================
Conway's Game of Life in three and four dimensions. Active cubes stay active
with 2 or 3 active neighbours; inactive cubes activate with exactly 3.

A ``CubeGrid`` stores a dense boolean block covering the active cells plus the
coordinates of the block's first corner, so the infinite space can grow in
any direction. Axes are in coordinate order ``(x, y, z, w, ...)``. Each step
pads the block by one cell, counts neighbours with an N-dimensional
convolution and trims the result back to the active cells.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np
from scipy import ndimage

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

ACTIVE = "#"
INACTIVE = "."
BOOT_CYCLES = 6


@dataclass
class CubeGrid:
    """
    Attributes:
        cells: Boolean block of cube states, indexed in coordinate order.
        origin: Coordinates of ``cells[0, 0, ...]``.
    """
    cells: npt.NDArray[np.bool_]
    origin: tuple[int, ...]

    @property
    def dimensions(self) -> int:
        return self.cells.ndim

    def _index(self, coords: tuple[int, ...]) -> Optional[tuple[int, ...]]:
        if len(coords) != self.dimensions:
            raise ValueError(f"Expected {self.dimensions} coordinates, got {len(coords)}")
        index = tuple(coord - offset for coord, offset in zip(coords, self.origin))
        if all(0 <= i < size for i, size in zip(index, self.cells.shape)):
            return index
        return None

    def is_cell_active(self, *coords: int) -> bool:
        index = self._index(coords)
        return index is not None and bool(self.cells[index])

    def count_active(self) -> int:
        return int(np.count_nonzero(self.cells))

    def count_adjacent(self, *coords: int) -> int:
        """Active cells among the ``3**N - 1`` neighbours of a cell."""
        count = 0
        for offsets in itertools.product((-1, 0, 1), repeat=len(coords)):
            if any(offsets) and self.is_cell_active(*(c + o for c, o in zip(coords, offsets))):
                count += 1
        return count

    @property
    def bounds(self) -> tuple[tuple[int, int], ...]:
        """Inclusive ``(min, max)`` of the active cells along each axis, zeros when empty."""
        active = np.nonzero(self.cells)
        if active[0].size == 0:
            return tuple((0, 0) for _ in range(self.dimensions))
        return tuple(
            (int(axis.min()) + offset, int(axis.max()) + offset)
            for axis, offset in zip(active, self.origin)
        )


def parse_input(contents: str, dimensions: int = 3) -> CubeGrid:
    """
    Parse the initial 2-D slice into a grid with ``dimensions`` axes.

    The slice lies at 0 on every axis beyond ``x`` and ``y``.

    Raises:
        ValueError: On fewer than 2 dimensions, ragged rows or unknown chars.
    """
    if dimensions < 2:
        raise ValueError(f"Need at least 2 dimensions, got {dimensions}")

    lines = [line.strip() for line in contents.splitlines() if line.strip()]
    if lines and any(len(line) != len(lines[0]) for line in lines):
        raise ValueError("Rows have differing lengths")

    rows = []
    for y, line in enumerate(lines):
        invalid = set(line) - {ACTIVE, INACTIVE}
        if invalid:
            raise ValueError(f"Invalid chars {sorted(invalid)} in row {y}")
        rows.append([char == ACTIVE for char in line])

    plane = np.array(rows, dtype=bool).reshape(len(lines), len(lines[0]) if lines else 0).T
    cells = plane.reshape(plane.shape + (1,) * (dimensions - 2))
    return CubeGrid(cells, (0,) * dimensions)


def _trim(cells: npt.NDArray[np.bool_], origin: tuple[int, ...]) -> CubeGrid:
    active = np.nonzero(cells)
    if active[0].size == 0:
        return CubeGrid(np.zeros((0,) * cells.ndim, dtype=bool), (0,) * cells.ndim)

    lows = [int(axis.min()) for axis in active]
    highs = [int(axis.max()) for axis in active]
    window = tuple(slice(low, high + 1) for low, high in zip(lows, highs))
    return CubeGrid(cells[window].copy(), tuple(offset + low for offset, low in zip(origin, lows)))


def iterate_grid(grid: CubeGrid) -> CubeGrid:
    padded = np.pad(grid.cells, 1)
    kernel = np.ones((3,) * grid.dimensions, dtype=np.int16)
    kernel[(1,) * grid.dimensions] = 0

    counts = ndimage.convolve(padded.astype(np.int16), kernel, mode="constant", cval=0)
    cells = (counts == 3) | (padded & (counts == 2))
    return _trim(cells, tuple(offset - 1 for offset in grid.origin))


def run_boot_cycle(grid: CubeGrid, cycles: int = BOOT_CYCLES) -> CubeGrid:
    for cycle in range(cycles):
        grid = iterate_grid(grid)
        logger.debug(f"After cycle {cycle + 1}: {grid.count_active()} active cubes")
    return grid


@register_puzzle
class ConwayCubes(Puzzle):
    DAY = 17
    TITLE = "Conway Cubes"

    def solve(self, contents: str) -> list[Answer]:
        active_3d = run_boot_cycle(parse_input(contents, 3)).count_active()
        active_4d = run_boot_cycle(parse_input(contents, 4)).count_active()

        return [
            Answer(1, active_3d, f"After the 6 step boot cycle there are {active_3d} active cells in the 3d grid"),
            Answer(2, active_4d, f"After the 6 step boot cycle there are {active_4d} active cells in the 4d grid"),
        ]
