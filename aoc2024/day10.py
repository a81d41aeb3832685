"""Day 10: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

from aoc2024.runner import InputError

Cell = tuple[int, int]

_PEAK = 9


def _grid(text: str) -> list[list[int]]:
    grid = []
    for line in text.splitlines():
        if not (line.isascii() and line.isdecimal()):
            raise InputError(f"Invalid map row: {line!r}")
        grid.append([int(char) for char in line])
    if not grid:
        raise InputError("The topographic map is empty")
    if any(len(row) != len(grid[0]) for row in grid):
        raise InputError("The topographic map is not rectangular")
    return grid


def _neighbors(rows: int, cols: int, cell: Cell) -> Iterator[Cell]:
    row, col = cell
    for dr, dc in ((-1, 0), (1, 0), (0, 1), (0, -1)):
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _trails(grid: list[list[int]]) -> Iterator[Counter[Cell]]:
    """For each trailhead, the peaks it reaches with the number of paths to each."""
    rows, cols = len(grid), len(grid[0])
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != 0:
                continue
            frontier: Counter[Cell] = Counter({(row, col): 1})
            for height in range(1, _PEAK + 1):
                step: Counter[Cell] = Counter()
                for cell, paths in frontier.items():
                    for r, c in _neighbors(rows, cols, cell):
                        if grid[r][c] == height:
                            step[(r, c)] += paths
                frontier = step
            yield frontier


def part1(text: str) -> str:
    """Sum over trailheads of the number of distinct peaks reachable."""
    return str(sum(len(peaks) for peaks in _trails(_grid(text))))


def part2(text: str) -> str:
    """Sum over trailheads of the number of distinct hiking trails."""
    return str(sum(sum(peaks.values()) for peaks in _trails(_grid(text))))