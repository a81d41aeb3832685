import pytest

from aoc2024.day06 import Direction, part1, part2
from aoc2024.runner import InputError

EXAMPLE = """....#.....
.........#
..........
..#.......

.......#..
..........
.#..^.....
........#.

#.........
......#..."""

TRAPPED = """.#..
.^.#
#...
..#."""


def test_part1_example():
    assert part1(EXAMPLE) == "41"


def test_part2_example():
    assert part2(EXAMPLE) == "6"


def test_turn_cycles_clockwise():
    assert Direction.UP.turn() is Direction.RIGHT
    assert Direction.RIGHT.turn() is Direction.DOWN
    assert Direction.DOWN.turn() is Direction.LEFT
    assert Direction.LEFT.turn() is Direction.UP


def test_four_turns_return_to_start():
    assert Direction.UP.turn().turn().turn().turn() is Direction.UP
    assert Direction.RIGHT.turn().turn().turn().turn() is Direction.RIGHT
    assert Direction.DOWN.turn().turn().turn().turn() is Direction.DOWN
    assert Direction.LEFT.turn().turn().turn().turn() is Direction.LEFT


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (0, 1)),
        (Direction.DOWN, (2, 1)),
        (Direction.LEFT, (1, 0)),
        (Direction.RIGHT, (1, 2)),
    ],
)
def test_step_inside(direction, expected):
    assert direction.step(3, 3, 1, 1) == expected


def test_step_off_map():
    assert Direction.UP.step(3, 3, 0, 1) is None
    assert Direction.LEFT.step(3, 3, 1, 0) is None
    assert Direction.DOWN.step(3, 3, 2, 1) is None
    assert Direction.RIGHT.step(3, 3, 1, 2) is None


def test_part1_straight_line():
    assert part1(">..") == "3"


def test_part1_without_guard():
    assert part1("...\n.#.\n...") == "0"


def test_part1_loop_raises():
    with pytest.raises(InputError):
        part1(TRAPPED)


def test_part2_without_guard_raises():
    with pytest.raises(InputError):
        part2("...\n.#.\n...")


def test_empty_map_raises():
    with pytest.raises(InputError):
        part1("\n\n")