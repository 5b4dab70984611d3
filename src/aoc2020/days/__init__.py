"""
The DAYS layer holds one self-contained module per puzzle.
Modules share nothing but the ``Puzzle`` base class; importing this package
registers every day with the registry.
"""
from aoc2020.days import (  # noqa: F401
    day_01,
    day_02,
    day_03,
    day_04,
    day_05,
    day_06,
    day_07,
    day_08,
    day_09,
    day_10,
    day_11,
    day_12,
    day_13,
    day_14,
    day_15,
    day_16,
    day_17,
)
