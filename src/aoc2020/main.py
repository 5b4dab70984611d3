"""
Application Entry
=================
Selects a day, runs its puzzle and prints the answers.

Answers are printed to stdout; diagnostics go through logging. Day ``0`` runs
every registered day in order and reports the time each one took.

Exit codes:
    0: All selected puzzles ran.
    1: A puzzle failed (missing input, malformed input, failed lookup).
    2: The day selection was invalid.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import aoc2020.days  # noqa: F401  (registers every puzzle)
from aoc2020.config import RUN_ALL_SENTINEL, get_inputs_path
from aoc2020.days.registry import create_puzzle, list_days
from aoc2020.dev import stopwatch
from aoc2020.logging_config import setup_logging

logger = logging.getLogger(__name__)

PROMPT = "Which day? "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2020",
        description="Run the Advent of Code 2020 puzzle solutions",
    )
    parser.add_argument("day", type=int, nargs="?", default=None,
                        help=f"Day to run, or {RUN_ALL_SENTINEL} to run every day (prompted for when omitted)")
    parser.add_argument("--input-dir", type=Path, default=None,
                        help="Directory holding the day-<N>-input files")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also write the log to this file")
    return parser


def prompt_for_day() -> Optional[int]:
    """Ask for the day on stdin. Returns None when stdin is closed or the reply is not a number."""
    try:
        reply = input(PROMPT).strip()
    except EOFError:
        print("Invalid day: no selection")
        return None
    try:
        return int(reply)
    except ValueError:
        print(f"Invalid day: {reply}")
        return None


def run_day(day: int, inputs_path: Optional[Path] = None) -> None:
    puzzle = create_puzzle(day, inputs_path)
    for answer in puzzle.run():
        print(answer)


def run_all(inputs_path: Optional[Path] = None) -> None:
    for day in list_days():
        with stopwatch() as elapsed:
            run_day(day, inputs_path)
        print(f"Day {day} took {elapsed}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    day = args.day if args.day is not None else prompt_for_day()
    if day is None:
        return 2
    if day != RUN_ALL_SENTINEL and day not in list_days():
        print(f"Invalid day: {day}")
        return 2

    inputs_path = args.input_dir if args.input_dir is not None else get_inputs_path()
    if not inputs_path.is_dir():
        logger.warning(f"Inputs path not found at {inputs_path}")

    try:
        if day == RUN_ALL_SENTINEL:
            run_all(inputs_path)
        else:
            run_day(day, inputs_path)
    except (OSError, ValueError, LookupError):
        logger.exception(f"Day {day} failed")
        return 1

    return 0
