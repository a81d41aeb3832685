"""Day 12: pricing fences around garden regions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from aoc2024.runner import InputError

Cell = tuple[int, int]

_EMPTY = "."


def _grid(text: str) -> list[str]:
    grid = text.splitlines()
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise InputError("Invalid input. Check the size of Map.")
    return grid


def _neighbors(n: int, cell: Cell) -> Iterator[Cell]:
    row, col = cell
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        r, c = row + dr, col + dc
        if 0 <= r < n and 0 <= c < n:
            yield r, c


def _regions(grid: list[str], skip_empty: bool) -> Iterator[set[Cell]]:
    n = len(grid)
    seen: set[Cell] = set()
    for row in range(n):
        for col in range(n):
            start = (row, col)
            if start in seen or (skip_empty and grid[row][col] == _EMPTY):
                continue
            plant = grid[row][col]
            region = {start}
            queue = deque([start])
            while queue:
                cell = queue.popleft()
                for r, c in _neighbors(n, cell):
                    if (r, c) not in region and grid[r][c] == plant:
                        region.add((r, c))
                        queue.append((r, c))
            seen |= region
            yield region


def _perimeter(region: set[Cell]) -> int:
    return sum(
        (r + dr, c + dc) not in region
        for r, c in region
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
    )


def _sides(region: set[Cell]) -> int:
    """Number of straight sides, counted as the number of corners."""
    points = {(r + dr, c + dc) for r, c in region for dr in (0, 1) for dc in (0, 1)}
    corners = 0
    for i, j in points:
        up_left = (i - 1, j - 1) in region
        down_left = (i, j - 1) in region
        down_right = (i, j) in region
        up_right = (i - 1, j) in region
        filled = up_left + down_left + down_right + up_right
        if filled in (1, 3):
            corners += 1
        elif filled == 2 and up_left == down_right:
            corners += 2
    return corners


def part1(text: str) -> str:
    """Total fence price using area times perimeter; '.' cells are not plots."""
    grid = _grid(text)
    return str(
        sum(len(region) * _perimeter(region) for region in _regions(grid, skip_empty=True))
    )


def part2(text: str) -> str:
    """Total fence price using area times number of sides."""
    grid = _grid(text)
    return str(
        sum(len(region) * _sides(region) for region in _regions(grid, skip_empty=False))
    )