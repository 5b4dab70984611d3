"""
Day 2: Password Philosophy
==========================
Each input line holds a policy and a password, e.g. ``1-3 a: abcde``. Part one
reads the policy as a min/max count of the letter; part two reads it as two
1-based positions of which exactly one must hold the letter.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

_LINE = re.compile(r"^(\d+)-(\d+) ([a-z]): ([a-z]+)$")


@dataclass(frozen=True)
class Policy:
    low: int
    high: int
    letter: str


def parse_line(line: str) -> Optional[tuple[Policy, str]]:
    match = _LINE.match(line)
    if match is None:
        return None
    low, high, letter, password = match.groups()
    return Policy(low=int(low), high=int(high), letter=letter), password


def is_valid_for_part_1(policy: Policy, password: str) -> bool:
    """The letter must appear between ``low`` and ``high`` times (inclusive)."""
    return policy.low <= password.count(policy.letter) <= policy.high


def is_valid_for_part_2(policy: Policy, password: str) -> bool:
    """Exactly one of the positions ``low`` and ``high`` (1-based) holds the letter."""
    if len(password) < policy.high:
        return False
    first = password[policy.low - 1] == policy.letter
    second = password[policy.high - 1] == policy.letter
    return first != second


@register_puzzle
class PasswordPhilosophy(Puzzle):
    DAY = 2
    TITLE = "Password Philosophy"

    def solve(self, contents: str) -> list[Answer]:
        entries = [entry for entry in map(parse_line, contents.splitlines()) if entry is not None]
        logger.debug(f"Parsed {len(entries)} password entries")

        sled_rental = sum(1 for policy, password in entries if is_valid_for_part_1(policy, password))
        toboggan = sum(1 for policy, password in entries if is_valid_for_part_2(policy, password))

        return [
            Answer(1, sled_rental, f"There were {sled_rental} valid sled rental lines"),
            Answer(2, toboggan, f"There were {toboggan} valid Official Toboggan lines"),
        ]
