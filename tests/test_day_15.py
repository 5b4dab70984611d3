from __future__ import annotations

import pytest

from aoc2020.days.day_15 import DEFAULT_SEED, RambunctiousRecitation, parse, play_memory_game


def test_parse():
    assert parse("0,3,6\n") == [0, 3, 6]


def test_parse_rejects_empty_seed():
    with pytest.raises(ValueError):
        parse("\n")


def test_first_turns():
    spoken = [play_memory_game([0, 3, 6], turn) for turn in range(1, 11)]
    assert spoken == [0, 3, 6, 0, 3, 3, 1, 0, 4, 0]


@pytest.mark.parametrize(
    ("seed", "expected"),
    [
        ("0,3,6", 436),
        ("1,3,2", 1),
        ("2,1,3", 10),
        ("1,2,3", 27),
        ("2,3,1", 78),
        ("3,2,1", 438),
        ("3,1,2", 1836),
    ],
)
def test_play_2020_turns(seed, expected):
    assert play_memory_game(parse(seed), 2020) == expected


def test_seed_larger_than_game():
    assert play_memory_game([100, 100], 3) == 1
    assert play_memory_game([100, 100], 4) == 0


def test_play_rejects_non_positive_turns():
    with pytest.raises(ValueError):
        play_memory_game([0, 3, 6], 0)


@pytest.mark.slow
@pytest.mark.parametrize(
    ("seed", "expected"),
    [("0,3,6", 175594), ("1,3,2", 2578), ("3,1,2", 362)],
)
def test_play_30_million_turns(seed, expected):
    assert play_memory_game(parse(seed), 30_000_000) == expected


def test_load_input_falls_back_to_default_seed(inputs_dir):
    assert RambunctiousRecitation(inputs_dir).load_input() == DEFAULT_SEED


def test_load_input_reads_file(write_input, inputs_dir):
    write_input(15, "0,3,6\n")
    assert RambunctiousRecitation(inputs_dir).load_input() == "0,3,6\n"
