"""
Day 7: Handy Haversacks
=======================
Rules say which bags must directly contain which other bags. Part one walks
the rules backwards to find every bag that can eventually hold a shiny gold
bag; part two counts the bags nested inside one.
"""
from __future__ import annotations

import functools
import logging
import re
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

SEED_BAG = "shiny gold"
_SEPARATOR = " bags contain "
_EMPTY = "no other bags."
_CONTENT = re.compile(r"(\d+) ([a-z]+ [a-z]+)")


@dataclass
class Rule:
    label: str
    contents: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_line(cls, line: str) -> Rule:
        """Parse ``light red bags contain 1 bright white bag, 2 muted yellow bags.``"""
        label, separator, content_text = line.partition(_SEPARATOR)
        if not separator:
            raise ValueError(f"Invalid rule: {line!r}")
        if content_text == _EMPTY:
            return cls(label=label)
        contents = {inner: int(count) for count, inner in _CONTENT.findall(content_text)}
        if not contents:
            raise ValueError(f"Invalid rule contents: {content_text!r}")
        return cls(label=label, contents=contents)


def parse_rules(contents: str) -> list[Rule]:
    return [Rule.from_line(line) for line in contents.splitlines() if line.strip()]


def build_direct_containers(rules: Iterable[Rule]) -> dict[str, set[str]]:
    """Map each bag to the set of bags that directly contain it."""
    containers: dict[str, set[str]] = {}
    for rule in rules:
        for inner in rule.contents:
            containers.setdefault(inner, set()).add(rule.label)
    return containers


def find_all_containers(rules: Iterable[Rule], seed: str) -> set[str]:
    """Every bag that can eventually contain ``seed``."""
    direct_containers = build_direct_containers(rules)

    found: set[str] = set()
    to_check = deque([seed])
    while to_check:
        bag = to_check.popleft()
        for container in direct_containers.get(bag, set()) - found:
            found.add(container)
            to_check.append(container)

    return found


def count_bag_contents(rules: Iterable[Rule], outer_bag: str) -> int:
    """Number of bags inside ``outer_bag``. Bags without a rule hold nothing."""
    contents_by_label = {rule.label: rule.contents for rule in rules}

    @functools.cache
    def bags_including_self(label: str) -> int:
        return 1 + sum(
            count * bags_including_self(inner)
            for inner, count in contents_by_label.get(label, {}).items()
        )

    # exclude the outer bag itself
    return bags_including_self(outer_bag) - 1


@register_puzzle
class HandyHaversacks(Puzzle):
    DAY = 7
    TITLE = "Handy Haversacks"

    def solve(self, contents: str) -> list[Answer]:
        rules = parse_rules(contents)
        logger.debug(f"Parsed {len(rules)} bag rules")

        containers = len(find_all_containers(rules, SEED_BAG))
        inside = count_bag_contents(rules, SEED_BAG)

        return [
            Answer(1, containers, f"There are {containers} possible containers."),
            Answer(2, inside, f"There are {inside} bags in a {SEED_BAG} bag."),
        ]
