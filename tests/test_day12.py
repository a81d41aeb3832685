import pytest

from aoc2024.day12 import part1, part2
from aoc2024.runner import InputError

SMALL = """AAAA
BBCD
BBCC
EEEC"""

NESTED = """OOOOO
OXOXO
OOOOO
OXOXO
OOOOO"""

E_SHAPE = """EEEEE
EXXXX
EEEEE
EXXXX
EEEEE"""

LARGE = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""


def test_part1_example_1():
    assert part1(SMALL) == "140"


def test_part1_example_2():
    assert part1(NESTED) == "772"


def test_part1_example_3():
    assert part1(LARGE) == "1930"


def test_part2_example_1():
    assert part2(SMALL) == "80"


def test_part2_example_2():
    assert part2(E_SHAPE) == "236"


def test_part2_example_3():
    assert part2(LARGE) == "1206"


def test_single_cell():
    assert part1("A") == "4"
    assert part2("A") == "4"


def test_non_square_rejected():
    with pytest.raises(InputError):
        part1("AAA\nAAA")


def test_empty_rejected():
    with pytest.raises(InputError):
        part2("")