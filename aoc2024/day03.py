"""Day 3: summing products of uncorrupted mul instructions."""

from __future__ import annotations

import re

_MUL = "mul("
_DO = "do()"
_DONT = "don't()"
_ARGS = re.compile(r"(\d{1,3}),(\d{1,3})\)")


def _scan(text: str, conditional: bool) -> int:
    total = 0
    enabled = True
    pos = 0
    end = len(text) - 4
    while pos < end:
        if text.startswith(_MUL, pos):
            pos += 4
            if not enabled:
                pos += 1
                continue
            match = _ARGS.match(text, pos)
            if match:
                total += int(match[1]) * int(match[2])
                pos = match.end()
        elif conditional and text.startswith(_DONT, pos):
            enabled = False
            pos += 1
        elif conditional and text.startswith(_DO, pos):
            enabled = True
            pos += 1
        else:
            pos += 1
    return total


def part1(text: str) -> str:
    """Sum of every valid mul(a,b) product."""
    return str(_scan(text, conditional=False))


def part2(text: str) -> str:
    """Sum of mul products, honouring do() and don't() switches."""
    return str(_scan(text, conditional=True))