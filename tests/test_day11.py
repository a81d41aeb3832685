import pytest

from aoc2024.day11 import count_stones, part1, part2


def test_part1_example_1():
    assert part1("125 17") == "55312"


@pytest.mark.parametrize(
    ("blinks", "expected"),
    [(0, 2), (1, 3), (2, 4), (3, 5), (4, 9), (5, 13), (6, 22)],
)
def test_count_stones_example_progression(blinks, expected):
    assert count_stones("125 17", blinks) == expected


def test_zero_becomes_one_then_2024():
    assert count_stones("0", 1) == 1
    assert count_stones("0", 3) == 2


def test_invalid_tokens_ignored():
    assert count_stones("125 abc 17 -5", 6) == 22


def test_empty_input_has_no_stones():
    assert part1("") == "0"


def test_part2_example():
    assert part2("125 17") == "65601038650482"