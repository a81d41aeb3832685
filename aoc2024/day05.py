"""Day 5: checking and repairing page orderings against rules."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from aoc2024.runner import InputError


def _parse_number(token: str) -> int | None:
    token = token.strip()
    if token and token.isascii() and token.isdecimal():
        return int(token)
    return None


class Rules:
    """Page ordering rules: each page maps to the pages allowed after it."""

    def __init__(self) -> None:
        self.data: dict[int, set[int]] = {}

    def add(self, before: int, after: int) -> None:
        """Record that *before* must come before *after*."""
        self.data.setdefault(before, set()).add(after)
        self.data.setdefault(after, set())

    def validate(self, ledger: Sequence[int]) -> bool:
        """True when every known page is followed only by pages it allows."""
        for i in reversed(range(len(ledger))):
            allowed = self.data.get(ledger[i])
            if allowed is None:
                continue
            if any(value not in allowed for value in ledger[i + 1 :]):
                return False
        return True

    def correct(self, ledger: Sequence[int]) -> list[int]:
        """Reorder *ledger* by moving offending pages forward until valid."""
        fixed = list(ledger)
        while not self.validate(fixed):
            snapshot = list(fixed)
            for i in reversed(range(len(snapshot))):
                allowed = self.data.get(snapshot[i])
                if allowed is None:
                    continue
                for j in range(i + 1, len(snapshot)):
                    if snapshot[j] not in allowed:
                        fixed.insert(i, fixed.pop(j))
                        break
        return fixed


def _parse(text: str) -> tuple[Rules, list[list[int]]]:
    rule_text, sep, ledger_text = text.partition("\n\n")
    if not sep:
        raise InputError("Invalid input")
    rules = Rules()
    for line in rule_text.splitlines():
        left, bar, right = line.strip().partition("|")
        before, after = _parse_number(left), _parse_number(right)
        if not bar or before is None or after is None:
            raise InputError(f"Invalid rule: {line!r}")
        rules.add(before, after)
    return rules, list(_ledgers(ledger_text))


def _ledgers(text: str) -> Iterator[list[int]]:
    for line in text.splitlines():
        pages = [n for n in map(_parse_number, line.split(",")) if n is not None]
        if pages:
            yield pages


def part1(text: str) -> str:
    """Sum of middle pages of the correctly ordered updates."""
    rules, ledgers = _parse(text)
    return str(sum(pages[len(pages) // 2] for pages in ledgers if rules.validate(pages)))


def part2(text: str) -> str:
    """Sum of middle pages of the incorrectly ordered updates once fixed."""
    rules, ledgers = _parse(text)
    fixed = (rules.correct(pages) for pages in ledgers if not rules.validate(pages))
    return str(sum(pages[len(pages) // 2] for pages in fixed))