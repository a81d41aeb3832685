"""Day 1: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter

from aoc2024.runner import InputError


def _parse_columns(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.strip().split("\n"):
        values = line.split()
        if len(values) != 2:
            raise InputError("Incorrect input found")
        left.append(int(values[0]))
        right.append(int(values[1]))
    return left, right


def part1(text: str) -> str:
    """Sum of distances between the sorted left and right columns."""
    left, right = _parse_columns(text)
    total = sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))
    return str(total)


def part2(text: str) -> str:
    """Similarity score: each left value times its count in the right column."""
    left, right = _parse_columns(text)
    counts = Counter(right)
    return str(sum(value * counts[value] for value in left))