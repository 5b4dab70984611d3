"""
Day 12: Rain Risk
=================
Steer a ferry through a list of navigation instructions. In part one the
cardinal actions move the ship directly; in part two they move a waypoint
that the ship then travels towards on ``F``.

Coordinates follow screen convention: ``x`` grows eastwards and ``y`` grows
southwards, so north is ``(0, -1)``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Iterable

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)


class Action(StrEnum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"


@dataclass(frozen=True)
class Instruction:
    action: Action
    value: int


@dataclass(frozen=True)
class Facing:
    """A heading or waypoint offset, measured in units east and south."""
    dx: int
    dy: int

    def rotate(self, degrees: int) -> Facing:
        """
        Rotate clockwise by ``degrees``. Negative values rotate anticlockwise.

        Raises:
            ValueError: If ``degrees`` is not a multiple of 90.
        """
        turn = degrees % 360
        if turn == 0:
            return self
        if turn == 90:
            return Facing(-self.dy, self.dx)
        if turn == 180:
            return Facing(-self.dx, -self.dy)
        if turn == 270:
            return Facing(self.dy, -self.dx)
        raise ValueError(f"Cannot rotate by {degrees} degrees")

    def scale(self, factor: int) -> Facing:
        return Facing(self.dx * factor, self.dy * factor)

    def merge(self, other: Facing) -> Facing:
        return Facing(self.dx + other.dx, self.dy + other.dy)


NORTH = Facing(0, -1)
EAST = Facing(1, 0)
SOUTH = Facing(0, 1)
WEST = Facing(-1, 0)

CARDINALS: dict[Action, Facing] = {
    Action.NORTH: NORTH,
    Action.SOUTH: SOUTH,
    Action.EAST: EAST,
    Action.WEST: WEST,
}

WAYPOINT_START = Facing(10, -1)


def parse_input(contents: str) -> list[Instruction]:
    """
    Parse one instruction per line, e.g. ``F10`` or ``R90``.

    Raises:
        ValueError: On an unknown action letter or a non-numeric value.
    """
    instructions = []
    for line in contents.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            action = Action(line[0])
        except ValueError:
            raise ValueError(f"Invalid action in line {line!r}") from None
        instructions.append(Instruction(action, int(line[1:])))
    return instructions


@dataclass(frozen=True)
class Ship:
    """
    Position of the ferry plus either its heading or its waypoint.

    ``facing`` is the direction of travel in part one and the waypoint offset
    relative to the ship in part two.
    """
    x: int = 0
    y: int = 0
    facing: Facing = EAST

    @classmethod
    def with_waypoint(cls) -> Ship:
        return cls(facing=WAYPOINT_START)

    def _move(self, offset: Facing) -> Ship:
        return replace(self, x=self.x + offset.dx, y=self.y + offset.dy)

    def _turn(self, instruction: Instruction) -> Ship:
        degrees = instruction.value if instruction.action is Action.RIGHT else -instruction.value
        return replace(self, facing=self.facing.rotate(degrees))

    def navigate(self, instruction: Instruction) -> Ship:
        action = instruction.action
        if action in CARDINALS:
            return self._move(CARDINALS[action].scale(instruction.value))
        if action is Action.FORWARD:
            return self._move(self.facing.scale(instruction.value))
        return self._turn(instruction)

    def navigate_all(self, instructions: Iterable[Instruction]) -> Ship:
        ship = self
        for instruction in instructions:
            ship = ship.navigate(instruction)
        return ship

    def navigate_with_waypoint(self, instruction: Instruction) -> Ship:
        action = instruction.action
        if action in CARDINALS:
            waypoint = self.facing.merge(CARDINALS[action].scale(instruction.value))
            return replace(self, facing=waypoint)
        if action is Action.FORWARD:
            return self._move(self.facing.scale(instruction.value))
        return self._turn(instruction)

    def navigate_all_with_waypoint(self, instructions: Iterable[Instruction]) -> Ship:
        ship = self
        for instruction in instructions:
            ship = ship.navigate_with_waypoint(instruction)
        return ship

    def manhattan_distance(self) -> int:
        return abs(self.x) + abs(self.y)


@register_puzzle
class RainRisk(Puzzle):
    DAY = 12
    TITLE = "Rain Risk"

    def solve(self, contents: str) -> list[Answer]:
        instructions = parse_input(contents)
        logger.debug(f"Parsed {len(instructions)} navigation instructions")

        ship = Ship().navigate_all(instructions)
        guided = Ship.with_waypoint().navigate_all_with_waypoint(instructions)

        return [
            Answer(
                1,
                ship.manhattan_distance(),
                f"Ship ends at ({ship.x}, {ship.y}), {ship.manhattan_distance()} from the start",
            ),
            Answer(
                2,
                guided.manhattan_distance(),
                f"Using the waypoint the ship ends at ({guided.x}, {guided.y}), "
                f"{guided.manhattan_distance()} from the start",
            ),
        ]
