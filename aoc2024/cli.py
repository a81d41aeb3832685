"""Command line entry point: run one day's puzzle part on an input file."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from aoc2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
)
from aoc2024.runner import solve_file

Solver = Callable[[str], str]

_DAYS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
}


def get_solver(day: int | str, part: int | str) -> Solver:
    """Return the solver for *part* ("1" or "2") of puzzle *day*."""
    try:
        module = _DAYS[int(day)]
    except (KeyError, ValueError):
        raise ValueError(
            f"Day can be 1 to {max(_DAYS)}. Provided: {day}"
        ) from None
    part = str(part)
    if part == "1":
        return module.part1
    if part == "2":
        return module.part2
    raise ValueError(f"Input can be (1 or 2). Provided: {part}")


def _default_input(day: int, part: str) -> str:
    if day == 12:
        return "res/input.txt"
    if day == 1:
        return "res/part1-input.txt"
    return f"res/part{part}-input.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2024", description="Solve one part of a day's puzzle."
    )
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", help="puzzle part: 1 or 2")
    parser.add_argument(
        "file", nargs="?", default=None, help="input file (defaults under res/)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen solver and print its answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        solver = get_solver(args.day, args.part)
    except ValueError as err:
        parser.error(str(err))
    path = args.file if args.file is not None else _default_input(args.day, args.part)
    solve_file(path, solver)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())