"""
Configuration & Path Management
===============================
File locations and global constants for the puzzle runner.

Puzzle inputs are personal to each Advent of Code account, so they are not
shipped with the package. They are looked up in a flat directory of files named
``day-<N>-input``. The directory is resolved on every call so that the
``AOC_INPUT_DIR`` override and the ``--input-dir`` option take effect at run
time.

Exports:
    RUN_ALL_SENTINEL (int): Day selection that runs every registered puzzle.
"""
import os
from pathlib import Path

INPUT_DIR_ENV_VAR = "AOC_INPUT_DIR"
INPUT_FILE_TEMPLATE = "day-{day}-input"
RUN_ALL_SENTINEL = 0


def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a resource relative to the project root.
    """
    # config.py is in src/aoc2020/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return project_root / relative_path


def get_inputs_path() -> Path:
    """Resolve the inputs directory: ``AOC_INPUT_DIR`` if set, else ``<project_root>/res``."""
    override = os.getenv(INPUT_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_resource_path("res")


def input_file_for(day: int, inputs_path: Path | None = None) -> Path:
    """Path of the puzzle input for ``day`` inside ``inputs_path``."""
    base = inputs_path if inputs_path is not None else get_inputs_path()
    return base / INPUT_FILE_TEMPLATE.format(day=day)
