"""
Day 11: Seating System
======================
A cellular automaton over a seat map. Empty seats (``L``) fill when no
neighbouring seat is occupied; occupied seats (``#``) empty when too many
neighbours are occupied; floor (``.``) never changes. The two parts differ in
what counts as a neighbour:

- Part 1: the eight adjacent cells, emptying at 4 occupied neighbours.
- Part 2: the first seat visible in each of the eight directions, emptying at 5.

The grid is a 2-D array of ``Seat`` codes indexed ``[y, x]``. Whole-grid steps
are vectorised: adjacent occupation is a convolution, and since floor never
changes the visible neighbours are resolved once into index pairs. The
per-cell lookups are kept for inspecting single cells.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np
from scipy import ndimage

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Seat(IntEnum):
    FLOOR = 0
    EMPTY = 1
    OCCUPIED = 2


SYMBOLS: dict[str, Seat] = {".": Seat.FLOOR, "L": Seat.EMPTY, "#": Seat.OCCUPIED}

# Row by row, skipping the centre cell
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

ADJACENT_THRESHOLD = 4
VISIBLE_THRESHOLD = 5

_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int16)

Lookup = Callable[["npt.NDArray[np.int8]", int, int], list[Seat]]
NeighbourCounter = Callable[["npt.NDArray[np.int8]"], "npt.NDArray[np.int16]"]


def parse_grid(contents: str) -> npt.NDArray[np.int8]:
    """
    Parse the seat map. Rows shorter than the first are padded with floor.

    Raises:
        ValueError: On an unknown symbol or a row longer than the first.
    """
    lines = [line for line in contents.splitlines() if line]
    if not lines:
        raise ValueError("Seat map is empty")

    row_length = len(lines[0])
    grid = np.full((len(lines), row_length), Seat.FLOOR, dtype=np.int8)
    for y, line in enumerate(lines):
        if len(line) > row_length:
            raise ValueError(f"Row {y} is longer than the first row ({len(line)} > {row_length})")
        for x, char in enumerate(line):
            if char not in SYMBOLS:
                raise ValueError(f"Invalid char {char!r} at ({x}, {y})")
            grid[y, x] = SYMBOLS[char]
    return grid


def render_grid(grid: npt.NDArray[np.int8]) -> str:
    symbols = {seat: char for char, seat in SYMBOLS.items()}
    return "\n".join("".join(symbols[Seat(int(cell))] for cell in row) for row in grid)


def _in_bounds(grid: npt.NDArray[np.int8], x: int, y: int) -> bool:
    return 0 <= y < grid.shape[0] and 0 <= x < grid.shape[1]


def lookup_surrounds(grid: npt.NDArray[np.int8], x: int, y: int) -> list[Seat]:
    """The cells adjacent to ``(x, y)`` that lie inside the grid."""
    return [
        Seat(int(grid[y + dy, x + dx]))
        for dx, dy in DIRECTIONS
        if _in_bounds(grid, x + dx, y + dy)
    ]


def lookup_visible_seat(grid: npt.NDArray[np.int8], x: int, y: int, dx: int, dy: int) -> Optional[Seat]:
    """The first non-floor cell seen from ``(x, y)`` along ``(dx, dy)``, if any."""
    x, y = x + dx, y + dy
    while _in_bounds(grid, x, y):
        if grid[y, x] != Seat.FLOOR:
            return Seat(int(grid[y, x]))
        x, y = x + dx, y + dy
    return None


def lookup_visible_seats(grid: npt.NDArray[np.int8], x: int, y: int) -> list[Seat]:
    seats = (lookup_visible_seat(grid, x, y, dx, dy) for dx, dy in DIRECTIONS)
    return [seat for seat in seats if seat is not None]


def iterate_cell(grid: npt.NDArray[np.int8], x: int, y: int, lookup: Lookup, occupation_threshold: int) -> Seat:
    seat = Seat(int(grid[y, x]))
    if seat is Seat.FLOOR:
        return seat

    occupied = lookup(grid, x, y).count(Seat.OCCUPIED)
    if seat is Seat.EMPTY:
        return Seat.OCCUPIED if occupied == 0 else Seat.EMPTY
    return Seat.EMPTY if occupied >= occupation_threshold else Seat.OCCUPIED


def count_adjacent_occupied(grid: npt.NDArray[np.int8]) -> npt.NDArray[np.int16]:
    occupied = (grid == Seat.OCCUPIED).astype(np.int16)
    return ndimage.convolve(occupied, _KERNEL, mode="constant", cval=0)


def visible_counter(grid: npt.NDArray[np.int8]) -> NeighbourCounter:
    """
    Build a counter of visible occupied seats for grids sharing ``grid``'s
    floor layout.
    """
    height, width = grid.shape
    sources: list[int] = []
    targets: list[int] = []
    for y, x in zip(*np.nonzero(grid != Seat.FLOOR)):
        for dx, dy in DIRECTIONS:
            tx, ty = x + dx, y + dy
            while _in_bounds(grid, tx, ty) and grid[ty, tx] == Seat.FLOOR:
                tx, ty = tx + dx, ty + dy
            if _in_bounds(grid, tx, ty):
                sources.append(int(y * width + x))
                targets.append(int(ty * width + tx))

    source_index = np.array(sources, dtype=np.int64)
    target_index = np.array(targets, dtype=np.int64)
    logger.debug(f"Resolved {source_index.size} lines of sight")

    def count(current: npt.NDArray[np.int8]) -> npt.NDArray[np.int16]:
        occupied = (current.ravel() == Seat.OCCUPIED)[target_index].astype(np.float64)
        counts = np.bincount(source_index, weights=occupied, minlength=height * width)
        return counts.astype(np.int16).reshape(height, width)

    return count


def iterate_grid(
    grid: npt.NDArray[np.int8],
    count_neighbours: NeighbourCounter,
    occupation_threshold: int,
) -> tuple[npt.NDArray[np.int8], int]:
    """
    Apply one step of the seating rules to every cell at once.

    Returns:
        The new grid and the number of cells that changed.
    """
    counts = count_neighbours(grid)
    new_grid = grid.copy()
    new_grid[(grid == Seat.EMPTY) & (counts == 0)] = Seat.OCCUPIED
    new_grid[(grid == Seat.OCCUPIED) & (counts >= occupation_threshold)] = Seat.EMPTY
    return new_grid, int(np.count_nonzero(new_grid != grid))


def _count_stable_occupation(
    grid: npt.NDArray[np.int8],
    count_neighbours: NeighbourCounter,
    occupation_threshold: int,
) -> int:
    rounds = 0
    while True:
        grid, changes = iterate_grid(grid, count_neighbours, occupation_threshold)
        rounds += 1
        if changes == 0:
            logger.debug(f"Seating stabilised after {rounds} rounds")
            return int(np.count_nonzero(grid == Seat.OCCUPIED))


def count_stable_adjacent_occupation(grid: npt.NDArray[np.int8]) -> int:
    return _count_stable_occupation(grid, count_adjacent_occupied, ADJACENT_THRESHOLD)


def count_stable_visible_occupation(grid: npt.NDArray[np.int8]) -> int:
    return _count_stable_occupation(grid, visible_counter(grid), VISIBLE_THRESHOLD)


@register_puzzle
class SeatingSystem(Puzzle):
    DAY = 11
    TITLE = "Seating System"

    def solve(self, contents: str) -> list[Answer]:
        grid = parse_grid(contents)
        logger.debug(f"Parsed seat map of shape {grid.shape}")

        adjacent = count_stable_adjacent_occupation(grid)
        visible = count_stable_visible_occupation(grid)

        return [
            Answer(1, adjacent, f"Once adjacent model has stabilised, there are {adjacent} occupied seats"),
            Answer(2, visible, f"Once visible model has stabilised, there are {visible} occupied seats"),
        ]
