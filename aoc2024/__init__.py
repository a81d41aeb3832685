"""Solutions to the 2024 Advent of Code puzzles, days 1 to 12, with a small command line."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "runner",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
    "day12",
]