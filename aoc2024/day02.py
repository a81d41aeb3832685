"""Day 2: checking reactor reports for safety."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from aoc2024.runner import InputError


def is_safe(levels: Sequence[int]) -> bool:
    """True when levels strictly move one way in steps of at most three."""
    if len(levels) < 2:
        raise InputError("A report needs at least two levels")
    increasing = levels[0] <= levels[1]
    for a, b in zip(levels, levels[1:]):
        if abs(a - b) > 3:
            return False
        if increasing and a >= b:
            return False
        if not increasing and a <= b:
            return False
    return True


def _reports(text: str) -> Iterator[list[int]]:
    for line in text.split("\n"):
        if not line.strip():
            continue
        yield [int(value) for value in line.split()]


def _is_safe_dampened(levels: list[int]) -> bool:
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:skip] + levels[skip + 1 :]) for skip in range(len(levels))
    )


def part1(text: str) -> str:
    """Number of safe reports."""
    return str(sum(is_safe(levels) for levels in _reports(text)))


def part2(text: str) -> str:
    """Number of reports that are safe after removing at most one level."""
    return str(sum(_is_safe_dampened(levels) for levels in _reports(text)))