"""Day 11: counting stones that split and change as you blink."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def _expand(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    if stone == 0:
        return _expand(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _expand(int(digits[:half]), blinks - 1) + _expand(
            int(digits[half:]), blinks - 1
        )
    return _expand(stone * 2024, blinks - 1)


def count_stones(text: str, blinks: int) -> int:
    """Number of stones after *blinks* blinks; non-numeric tokens are ignored."""
    stones = [
        int(token) for token in text.split() if token.isascii() and token.isdecimal()
    ]
    return sum(_expand(stone, blinks) for stone in stones)


def part1(text: str) -> str:
    """Number of stones after 25 blinks."""
    return str(count_stones(text, 25))


def part2(text: str) -> str:
    """Number of stones after 75 blinks."""
    return str(count_stones(text, 75))