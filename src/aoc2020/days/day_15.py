"""
Day 15: Rambunctious Recitation
===============================
The elves' memory game. After the seed numbers, each turn says 0 if the
previous number was new, otherwise how many turns ago it was last said.

The game state is a flat array mapping each number to the turn it was last
spoken, and the turn loop runs in a numba kernel so that 30 million turns
finish in well under a second.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

import numba as nb
import numpy as np

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

DEFAULT_SEED = "8,11,0,19,1,2"
SHORT_GAME = 2020
LONG_GAME = 30_000_000


def parse(contents: str) -> list[int]:
    """
    Parse the comma separated seed.

    Raises:
        ValueError: If the seed is empty or holds a non-integer.
    """
    seed = [int(number) for number in contents.strip().split(",") if number.strip()]
    if not seed:
        raise ValueError("Seed is empty")
    return seed


@nb.njit(cache=True)
def _play_turns(last_seen: npt.NDArray[np.int32], current: int, start: int, turns: int) -> int:
    for turn in range(start, turns):
        previous = last_seen[current]
        last_seen[current] = turn
        current = turn - previous if previous else 0
    return current


def play_memory_game(seed: Sequence[int], turns: int) -> int:
    """
    The number spoken on turn ``turns`` (1-based).

    Args:
        seed: Starting numbers, spoken in order on the first turns.
        turns: Turn to report.

    Returns:
        The number spoken on that turn.
    """
    if not seed:
        raise ValueError("Seed is empty")
    if turns < 1:
        raise ValueError(f"Turn must be positive, got {turns}")
    if turns <= len(seed):
        return seed[turns - 1]

    # Turn numbers are 1-based so that 0 can mean "never spoken"
    last_seen = np.zeros(max(turns, max(seed) + 1), dtype=np.int32)
    for turn, number in enumerate(seed[:-1], start=1):
        last_seen[number] = turn

    return int(_play_turns(last_seen, seed[-1], len(seed), turns))


@register_puzzle
class RambunctiousRecitation(Puzzle):
    DAY = 15
    TITLE = "Rambunctious Recitation"

    def load_input(self) -> str:
        """Use the input file when there is one, otherwise the built-in seed."""
        path = self.input_path()
        if not path.exists():
            logger.info(f"No input at {path}, using built-in seed {DEFAULT_SEED}")
            return DEFAULT_SEED
        return super().load_input()

    def solve(self, contents: str) -> list[Answer]:
        seed = parse(contents)
        logger.debug(f"Playing with seed {seed}")

        short = play_memory_game(seed, SHORT_GAME)
        long = play_memory_game(seed, LONG_GAME)

        return [
            Answer(1, short, f"The 2020th number is: {short}"),
            Answer(2, long, f"The 30,000,000th number is: {long}"),
        ]
