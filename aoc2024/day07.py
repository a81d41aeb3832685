"""Day 7: finding operators that make calibration equations true."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from aoc2024.runner import InputError

Operator = Callable[[int, int], int]


def _parse_number(token: str, line: str) -> int:
    token = token.strip()
    if not (token and token.isascii() and token.isdecimal()):
        raise InputError(f"Unable to parse {token!r} in line: {line!r}")
    return int(token)


def parse_equations(text: str) -> list[tuple[int, list[int]]]:
    """Parse lines of the form 'target: a b c'; lines without ':' are skipped."""
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        head, colon, tail = line.partition(":")
        if not colon:
            continue
        target = _parse_number(head, line)
        operands = [_parse_number(token, line) for token in tail.split()]
        if not operands:
            raise InputError(f"No operands in line: {line!r}")
        equations.append((target, operands))
    return equations


def _add(a: int, b: int) -> int:
    return a + b


def _mul(a: int, b: int) -> int:
    return a * b


def _concat(a: int, b: int) -> int:
    multiplier = 10 ** len(str(b)) if b > 0 else 1
    return a * multiplier + b


def _possible(target: int, operands: Sequence[int], operators: Sequence[Operator]) -> bool:
    values = {operands[0]}
    for operand in operands[1:]:
        values = {op(value, operand) for value in values for op in operators}
    return target in values


def _total(text: str, operators: Sequence[Operator]) -> str:
    return str(
        sum(
            target
            for target, operands in parse_equations(text)
            if _possible(target, operands, operators)
        )
    )


def part1(text: str) -> str:
    """Sum of targets reachable with + and *."""
    return _total(text, (_add, _mul))


def part2(text: str) -> str:
    """Sum of targets reachable with +, * and digit concatenation."""
    return _total(text, (_add, _mul, _concat))