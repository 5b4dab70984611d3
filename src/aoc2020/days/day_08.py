"""
Day 8: Handheld Halting
=======================
A boot program of ``acc``/``jmp``/``nop`` instructions loops forever. Part one
reports the accumulator just before any instruction runs twice; part two
repairs the program by swapping a single ``jmp`` and ``nop``.
"""
from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

_INSTRUCTION = re.compile(r"(acc|jmp|nop) ([+-]\d+)")


class Operation(StrEnum):
    ACC = "acc"
    JMP = "jmp"
    NOP = "nop"


@dataclass(frozen=True)
class Instruction:
    operation: Operation
    argument: int


@dataclass(frozen=True)
class ProgramResult:
    """Outcome of a run: ``terminated`` is False when the program looped."""
    terminated: bool
    accumulator: int


_SWAPS = {Operation.JMP: Operation.NOP, Operation.NOP: Operation.JMP}


def parse_lines(contents: str) -> list[Instruction]:
    program = []
    for line in contents.splitlines():
        if not line.strip():
            continue
        match = _INSTRUCTION.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"Unexpected instruction {line!r}")
        program.append(Instruction(Operation(match.group(1)), int(match.group(2))))
    return program


def run_program(program: Sequence[Instruction]) -> ProgramResult:
    """
    Execute until an instruction is about to run a second time, or until the
    pointer lands just past the last instruction.

    Raises:
        IndexError: The pointer jumped anywhere else outside the program.
    """
    visited: set[int] = set()
    position = 0
    accumulator = 0

    while position not in visited:
        visited.add(position)
        if position == len(program):
            return ProgramResult(terminated=True, accumulator=accumulator)
        if not 0 <= position < len(program):
            raise IndexError(f"No instruction at position {position}")

        instruction = program[position]
        if instruction.operation is Operation.ACC:
            accumulator += instruction.argument
            position += 1
        elif instruction.operation is Operation.JMP:
            position += instruction.argument
        else:
            position += 1

    return ProgramResult(terminated=False, accumulator=accumulator)


def find_finite_program(program: Sequence[Instruction]) -> Optional[int]:
    """Accumulator of the first single jmp/nop swap that lets the program terminate."""
    for i, instruction in enumerate(program):
        swapped = _SWAPS.get(instruction.operation)
        if swapped is None:
            continue

        patched = list(program)
        patched[i] = dataclasses.replace(instruction, operation=swapped)
        result = run_program(patched)
        if result.terminated:
            logger.debug(f"Program terminates after swapping instruction {i}")
            return result.accumulator

    return None


@register_puzzle
class HandheldHalting(Puzzle):
    DAY = 8
    TITLE = "Handheld Halting"

    def solve(self, contents: str) -> list[Answer]:
        program = parse_lines(contents)
        logger.debug(f"Parsed {len(program)} instructions")

        original = run_program(program)
        fixed = find_finite_program(program)
        if fixed is None:
            raise ValueError("No single jmp/nop swap makes the program terminate")

        return [
            Answer(1, original.accumulator, f"Original result = {original.accumulator}"),
            Answer(2, fixed, f"Fixed result = {fixed}"),
        ]
