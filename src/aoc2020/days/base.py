"""
Puzzle Base Class
=================
Every day module defines one ``Puzzle`` subclass that knows how to turn the
text of its puzzle input into the answers for both parts.

Classes:
    Answer: One reported result.
    Puzzle: Abstract base for a single day's solver.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from aoc2020.config import input_file_for
from aoc2020.dev import timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Answer:
    """A single puzzle answer and the sentence used to report it."""
    part: int
    value: int
    message: str

    def __str__(self) -> str:
        return self.message


class Puzzle(ABC):
    """
    Abstract base class for a day's puzzle.

    Subclasses set ``DAY`` and ``TITLE`` and implement ``solve``. Parsing and
    solving are pure; only ``load_input`` touches the filesystem.
    """
    DAY: int = 0
    TITLE: str = ""

    def __init__(self, inputs_path: Optional[Path] = None) -> None:
        """
        Args:
            inputs_path: Directory holding the ``day-<N>-input`` files. Uses
                the configured default when omitted.
        """
        self.inputs_path = inputs_path

    def input_path(self) -> Path:
        return input_file_for(self.DAY, self.inputs_path)

    def load_input(self) -> str:
        """Read the raw puzzle input. Raises ``FileNotFoundError`` when missing."""
        path = self.input_path()
        logger.debug(f"Reading day {self.DAY} input from {path}")
        return path.read_text(encoding="utf-8")

    @abstractmethod
    def solve(self, contents: str) -> list[Answer]:
        """
        Compute the answers for the given puzzle input.

        Args:
            contents: Raw text of the puzzle input.

        Returns:
            One ``Answer`` per solved part, in part order.
        """
        pass

    @timer
    def run(self) -> list[Answer]:
        logger.info(f"Running day {self.DAY}: {self.TITLE}")
        answers = self.solve(self.load_input())
        logger.debug(f"Day {self.DAY} produced {len(answers)} answers")
        return answers
