"""Day 4: word search for XMAS and X-shaped MAS."""

from __future__ import annotations

from enum import Enum

from aoc2024.runner import InputError

_WORD = "XMAS"

_X_PATTERNS = (
    ("M.S", ".A.", "M.S"),
    ("S.M", ".A.", "S.M"),
    ("M.M", ".A.", "S.S"),
    ("S.S", ".A.", "M.M"),
)


class Direction(Enum):
    """The eight compass directions on a grid, as (row, column) offsets."""

    UP_LEFT = (-1, -1)
    UP = (-1, 0)
    UP_RIGHT = (-1, 1)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    DOWN_LEFT = (1, -1)
    DOWN = (1, 0)
    DOWN_RIGHT = (1, 1)

    def neighbor(
        self, rows: int, cols: int, row: int, col: int
    ) -> list[tuple[int, int]]:
        """The cell one step away in this direction, if it lies on the grid."""
        dr, dc = self.value
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            return [(r, c)]
        return []


def _grid(text: str) -> list[str]:
    grid = [line for line in text.split("\n") if line.strip()]
    if not grid:
        raise InputError("The word search grid is empty")
    return grid


def _matches_from(
    grid: list[str], rows: int, cols: int, start: tuple[int, int], direction: Direction
) -> bool:
    row, col = start
    for index, letter in enumerate(_WORD):
        if grid[row][col] != letter:
            return False
        if index + 1 == len(_WORD):
            return True
        step = direction.neighbor(rows, cols, row, col)
        if not step:
            return False
        row, col = step[0]
    return False


def _matches_pattern(grid: list[str], row: int, col: int, pattern: tuple[str, ...]) -> bool:
    return all(
        expected == "." or grid[row + dr][col + dc] == expected
        for dr, line in enumerate(pattern)
        for dc, expected in enumerate(line)
    )


def part1(text: str) -> str:
    """Number of times XMAS appears in any of the eight directions."""
    grid = _grid(text)
    rows, cols = len(grid), len(grid[0])
    count = sum(
        _matches_from(grid, rows, cols, (row, col), direction)
        for row in range(rows)
        for col in range(cols)
        for direction in Direction
    )
    return str(count)


def part2(text: str) -> str:
    """Number of 3x3 windows holding two crossing MAS words."""
    grid = _grid(text)
    rows, cols = len(grid), len(grid[0])
    count = sum(
        any(_matches_pattern(grid, row, col, pattern) for pattern in _X_PATTERNS)
        for row in range(max(0, rows - 2))
        for col in range(max(0, cols - 2))
    )
    return str(count)