"""Day 9: compacting files on a fragmented disk."""

from __future__ import annotations

from aoc2024.runner import InputError


def _digits(text: str) -> list[int]:
    digits = []
    for line in text.strip().splitlines():
        for char in line:
            if not ("0" <= char <= "9"):
                raise InputError(f"Invalid disk map character: {char!r}")
            digits.append(int(char))
    if not digits:
        raise InputError("The disk map is empty")
    return digits


def _blocks(digits: list[int]) -> list[int | None]:
    blocks: list[int | None] = []
    for index, length in enumerate(digits):
        owner = index // 2 if index % 2 == 0 else None
        blocks.extend([owner] * length)
    return blocks


def part1(text: str) -> str:
    """Checksum after moving single blocks from the end into free space."""
    blocks = _blocks(_digits(text))
    if not blocks:
        return "0"
    start, end = 0, len(blocks) - 1
    while start < end:
        while start < end and blocks[start] is not None:
            start += 1
        while start < end and blocks[end] is None:
            end -= 1
        if blocks[start] is None:
            blocks[start], blocks[end] = blocks[end], blocks[start]
            end -= 1
        start += 1
    return str(sum(pos * fid for pos, fid in enumerate(blocks) if fid is not None))


def part2(text: str) -> str:
    """Checksum after moving whole files into the leftmost space that fits."""
    files: dict[int, tuple[int, int]] = {}
    blanks: list[tuple[int, int]] = []
    pos = 0
    for index, length in enumerate(_digits(text)):
        if index % 2 == 0:
            files[index // 2] = (pos, length)
        elif length:
            blanks.append((pos, length))
        pos += length

    for fid in sorted(files, reverse=True):
        file_pos, size = files[fid]
        for i, (start, length) in enumerate(blanks):
            if start >= file_pos:
                del blanks[i:]
                break
            if size <= length:
                files[fid] = (start, size)
                if size == length:
                    del blanks[i]
                else:
                    blanks[i] = (start + size, length - size)
                break

    return str(
        sum(
            fid * block
            for fid, (start, size) in files.items()
            for block in range(start, start + size)
        )
    )