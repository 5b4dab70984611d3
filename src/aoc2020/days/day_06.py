"""
Day 6: Custom Customs
=====================
Groups of answers are separated by blank lines, one person per line. Part one
counts the questions anyone in a group answered, part two the questions
everyone answered.
"""
from __future__ import annotations

import re
import string
from typing import Iterable

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

_GROUP_SEPARATOR = re.compile(r"\n\s*\n")
QUESTIONS = frozenset(string.ascii_lowercase)


def _split_groups(contents: str) -> list[str]:
    return _GROUP_SEPARATOR.split(contents.strip())


def union_group_from_lines(lines: str) -> set[str]:
    return set(lines) & QUESTIONS


def intersect_group_from_lines(lines: str) -> set[str]:
    answered = set(QUESTIONS)
    for line in lines.splitlines():
        answered &= union_group_from_lines(line)
    return answered


def parse_union_groups(contents: str) -> list[set[str]]:
    return [union_group_from_lines(group) for group in _split_groups(contents)]


def parse_intersect_groups(contents: str) -> list[set[str]]:
    return [intersect_group_from_lines(group) for group in _split_groups(contents)]


def sum_counts(groups: Iterable[set[str]]) -> int:
    return sum(len(group) for group in groups)


@register_puzzle
class CustomCustoms(Puzzle):
    DAY = 6
    TITLE = "Custom Customs"

    def solve(self, contents: str) -> list[Answer]:
        anyone = sum_counts(parse_union_groups(contents))
        everyone = sum_counts(parse_intersect_groups(contents))
        return [
            Answer(1, anyone, f"Sum of union group counts: {anyone}"),
            Answer(2, everyone, f"Sum of intersect group counts: {everyone}"),
        ]
