from __future__ import annotations

from pathlib import Path
from typing import Optional

from aoc2020.days.base import Puzzle

_REGISTRY: dict[int, type[Puzzle]] = {}


def register_puzzle(cls: type[Puzzle]) -> type[Puzzle]:
    """Class decorator to register a puzzle by its DAY."""
    day = getattr(cls, "DAY", None)
    if not day:
        raise ValueError(f"{cls.__name__} must define DAY")
    existing = _REGISTRY.get(day)
    if existing is not None and existing is not cls:
        raise ValueError(f"Day {day} is already registered by {existing.__name__}")
    _REGISTRY[day] = cls
    return cls


def create_puzzle(day: int, inputs_path: Optional[Path] = None) -> Puzzle:
    cls = _REGISTRY.get(day)
    if not cls:
        raise KeyError(f"No puzzle registered for day {day}")
    return cls(inputs_path)


def list_days() -> list[int]:
    return sorted(_REGISTRY.keys())
