from __future__ import annotations

import pytest

from aoc2020.days.day_01 import ReportRepair, find_pair_sum, find_triple_sum, read_to_ints

EXPENSES = "1721\n979\n366\n299\n675\n1456\n"


def test_read_to_ints_skips_non_integers():
    assert read_to_ints("1721\nabc\n\n-5\n 979 \n") == [1721, -5, 979]


def test_find_pair_sum():
    assert find_pair_sum(read_to_ints(EXPENSES), 2020) == (299, 1721)


def test_find_pair_sum_uses_each_entry_once():
    assert find_pair_sum([1010, 5], 2020) is None
    assert find_pair_sum([1010, 1010], 2020) == (1010, 1010)


def test_find_pair_sum_without_match():
    assert find_pair_sum([1, 2, 3], 2020) is None
    assert find_pair_sum([2020], 2020) is None
    assert find_pair_sum([], 2020) is None


def test_find_triple_sum():
    assert find_triple_sum(read_to_ints(EXPENSES), 2020) == (366, 675, 979)


def test_find_triple_sum_without_match():
    assert find_triple_sum([1, 2, 3, 4], 2020) is None


def test_solve_reports_products():
    answers = ReportRepair().solve(EXPENSES)
    assert [answer.value for answer in answers] == [514579, 241861950]
    assert str(answers[0]) == "299 x 1721 = 514579"


def test_solve_without_pair_raises():
    with pytest.raises(ValueError):
        ReportRepair().solve("1\n2\n3\n")
