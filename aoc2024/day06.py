"""Day 6: following a patrolling guard around a lab map."""

from __future__ import annotations

from enum import Enum

from aoc2024.runner import InputError

Cell = tuple[int, int]


class Direction(Enum):
    """The four ways the guard can face, as (row, column) offsets."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)
    DOWN = (1, 0)

    def turn(self) -> Direction:
        """The direction after a right turn."""
        return _RIGHT_TURN[self]

    def step(self, rows: int, cols: int, row: int, col: int) -> Cell | None:
        """The next cell in this direction, or None when it leaves the map."""
        dr, dc = self.value
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            return r, c
        return None


_RIGHT_TURN = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_GUARDS = {
    "^": Direction.UP,
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
}

_WALL = "#"


def _grid(text: str) -> list[str]:
    grid = [line for line in text.splitlines() if line.strip()]
    if not grid:
        raise InputError("The map is empty")
    return grid


def _find_guard(grid: list[str]) -> tuple[Cell, Direction] | None:
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _GUARDS:
                return (row, col), _GUARDS[char]
    return None


def _walk(
    grid: list[str], start: Cell, direction: Direction, obstacle: Cell | None = None
) -> tuple[bool, set[tuple[int, int, Direction]]]:
    """Walk the guard; return whether it loops and the states it passed through."""
    rows, cols = len(grid), len(grid[0])
    row, col = start
    visited = {(row, col, direction)}
    turns_in_place = 0
    while (nxt := direction.step(rows, cols, row, col)) is not None:
        r, c = nxt
        if (r, c, direction) in visited:
            return True, visited
        if grid[r][c] == _WALL or nxt == obstacle:
            direction = direction.turn()
            turns_in_place += 1
            if turns_in_place >= 4:
                return True, visited
            continue
        turns_in_place = 0
        visited.add((r, c, direction))
        row, col = r, c
    return False, visited


def part1(text: str) -> str:
    """Number of cells the guard covers before leaving the map."""
    grid = _grid(text)
    guard = _find_guard(grid)
    if guard is None:
        return "0"
    rows, cols = len(grid), len(grid[0])
    (row, col), direction = guard
    marked: set[Cell] = set()
    states: set[tuple[int, int, Direction]] = set()
    while (nxt := direction.step(rows, cols, row, col)) is not None:
        state = (row, col, direction)
        if state in states:
            raise InputError("The guard never leaves the map")
        states.add(state)
        r, c = nxt
        if grid[r][c] == _WALL:
            direction = direction.turn()
            continue
        marked.add((row, col))
        row, col = r, c
    return str(len(marked) + 1)


def part2(text: str) -> str:
    """Number of single obstacle placements that trap the guard in a loop."""
    grid = _grid(text)
    guard = _find_guard(grid)
    if guard is None:
        raise InputError("Unable to find the guards position")
    start, direction = guard
    looped, states = _walk(grid, start, direction)
    if looped:
        candidates = {
            (r, c) for r, line in enumerate(grid) for c in range(len(grid[0])) if c < len(line)
        }
    else:
        # An obstacle off the guard's route leaves the route unchanged.
        candidates = {(r, c) for r, c, _ in states}
    count = sum(
        _walk(grid, start, direction, obstacle=cell)[0]
        for cell in candidates
        if grid[cell[0]][cell[1]] != _WALL and grid[cell[0]][cell[1]] not in _GUARDS
    )
    return str(count)