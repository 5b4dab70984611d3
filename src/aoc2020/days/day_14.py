"""
Day 14: Docking Data
====================
A tiny program of mask and memory writes over 36-bit values.

A mask line such as ``mask = 000000000000000000000000000000X1001X`` is held
as two bitmaps: ``floating`` marks the ``X`` positions and ``ones`` marks the
``1`` positions. Version 1 of the decoder masks the written value; version 2
masks the address instead, with every floating bit taking both values.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Union

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

WORD_SIZE = 36

_MASK_PATTERN = re.compile(r"^mask = ([01X]{36})$")
_MEM_PATTERN = re.compile(r"^mem\[(\d+)\] = (\d+)$")


@dataclass(frozen=True)
class Mask:
    floating: int = 0
    ones: int = 0

    @classmethod
    def from_string(cls, bits: str) -> Mask:
        floating = ones = 0
        for char in bits:
            floating = floating << 1 | (char == "X")
            ones = ones << 1 | (char == "1")
        return cls(floating, ones)


@dataclass(frozen=True)
class Mem:
    address: int
    value: int


Instruction = Union[Mask, Mem]


def parse_line(line: str) -> Instruction:
    """
    Raises:
        ValueError: If the line is neither a mask nor a memory write.
    """
    line = line.strip()
    mask = _MASK_PATTERN.match(line)
    if mask is not None:
        return Mask.from_string(mask.group(1))
    mem = _MEM_PATTERN.match(line)
    if mem is not None:
        return Mem(int(mem.group(1)), int(mem.group(2)))
    raise ValueError(f"Invalid line {line!r}")


def parse_program(contents: str) -> list[Instruction]:
    return [parse_line(line) for line in contents.splitlines() if line.strip()]


def run_program_v1(program: Iterable[Instruction]) -> dict[int, int]:
    """Apply the mask to each value before writing it."""
    memory: dict[int, int] = {}
    mask = Mask()
    for instruction in program:
        if isinstance(instruction, Mask):
            mask = instruction
        else:
            memory[instruction.address] = instruction.value & mask.floating | mask.ones
    return memory


def explode_addresses(mask: Mask, address: int) -> set[int]:
    """Every address produced by forcing the mask's ones and letting its floating bits vary."""
    addresses = {(address | mask.ones) & ~mask.floating}
    for bit in range(WORD_SIZE):
        flag = 1 << bit
        if mask.floating & flag:
            addresses |= {candidate | flag for candidate in addresses}
    return addresses


def run_program_v2(program: Iterable[Instruction]) -> dict[int, int]:
    """Write each value to every address the mask decodes to."""
    memory: dict[int, int] = {}
    mask = Mask()
    for instruction in program:
        if isinstance(instruction, Mask):
            mask = instruction
        else:
            for address in explode_addresses(mask, instruction.address):
                memory[address] = instruction.value
    return memory


def sum_memory(memory: dict[int, int]) -> int:
    return sum(memory.values())


@register_puzzle
class DockingData(Puzzle):
    DAY = 14
    TITLE = "Docking Data"

    def solve(self, contents: str) -> list[Answer]:
        program = parse_program(contents)
        logger.debug(f"Parsed {len(program)} instructions")

        memory_v1 = run_program_v1(program)
        memory_v2 = run_program_v2(program)
        logger.debug(f"v1 wrote {len(memory_v1)} cells, v2 wrote {len(memory_v2)} cells")

        sum_v1 = sum_memory(memory_v1)
        sum_v2 = sum_memory(memory_v2)
        return [
            Answer(1, sum_v1, f"The sum of memory values after running the program v1 is: {sum_v1}"),
            Answer(2, sum_v2, f"The sum of memory values after running the program v2 is: {sum_v2}"),
        ]
