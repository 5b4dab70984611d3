from pathlib import Path

import pytest

from aoc2020.config import input_file_for


@pytest.fixture()
def inputs_dir(tmp_path: Path, monkeypatch) -> Path:
    # Keep the real res/ directory out of reach
    monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture()
def write_input(inputs_dir: Path):
    def _write(day: int, contents: str) -> Path:
        path = input_file_for(day, inputs_dir)
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
