import pytest

from aoc2024.day07 import parse_equations, part1, part2
from aoc2024.runner import InputError

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13

192: 17 8 14

21037: 9 7 18 13
292: 11 6 16 20"""


def test_part1_example():
    assert part1(EXAMPLE) == "3749"


def test_part2_example():
    assert part2(EXAMPLE) == "11387"


def test_concatenation_only_in_part2():
    assert part1("156: 15 6") == "0"
    assert part2("156: 15 6") == "156"


def test_concatenating_zero_keeps_value():
    assert part1("50: 5 0") == "0"
    assert part2("50: 5 0") == "0"


def test_parse_equations():
    assert parse_equations("190: 10 19\n\nno colon here\n83: 17 5") == [
        (190, [10, 19]),
        (83, [17, 5]),
    ]


def test_bad_number_is_rejected():
    with pytest.raises(InputError):
        parse_equations("12: 3 x")


def test_bad_target_is_rejected():
    with pytest.raises(InputError):
        part1("-12: 3 4")


def test_missing_operands_are_rejected():
    with pytest.raises(InputError):
        part2("12:")