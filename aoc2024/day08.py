"""Day 8: counting antinodes created by resonant antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations

from aoc2024.runner import InputError

Cell = tuple[int, int]


def _grid(text: str) -> list[str]:
    grid = [line for line in text.splitlines() if line.strip()]
    if not grid:
        raise InputError("The antenna map is empty")
    return grid


def _antennas(grid: list[str]) -> dict[str, list[Cell]]:
    locations: dict[str, list[Cell]] = defaultdict(list)
    for r, line in enumerate(grid):
        for c, char in enumerate(line):
            if char != ".":
                locations[char].append((r, c))
    return locations


def _inside(rows: int, cols: int, cell: Cell) -> bool:
    r, c = cell
    return 0 <= r < rows and 0 <= c < cols


def part1(text: str) -> str:
    """Number of map cells holding an antinode one spacing beyond a pair."""
    grid = _grid(text)
    rows, cols = len(grid), len(grid[0])
    antinodes: set[Cell] = set()
    for positions in _antennas(grid).values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            dr, dc = r2 - r1, c2 - c1
            for cell in ((r2 + dr, c2 + dc), (r1 - dr, c1 - dc)):
                if _inside(rows, cols, cell):
                    antinodes.add(cell)
    return str(len(antinodes))


def part2(text: str) -> str:
    """Number of map cells in line with any pair of same-frequency antennas."""
    grid = _grid(text)
    rows, cols = len(grid), len(grid[0])
    antinodes: set[Cell] = set()
    for positions in _antennas(grid).values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            antinodes.update({(r1, c1), (r2, c2)})
            dr, dc = r2 - r1, c2 - c1
            cell = (r2 + dr, c2 + dc)
            while _inside(rows, cols, cell):
                antinodes.add(cell)
                cell = (cell[0] + dr, cell[1] + dc)
            cell = (r1 - dr, c1 - dc)
            while _inside(rows, cols, cell):
                antinodes.add(cell)
                cell = (cell[0] - dr, cell[1] - dc)
    return str(len(antinodes))