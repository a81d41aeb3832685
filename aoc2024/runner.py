"""Reading puzzle input files and running solvers on them."""

from __future__ import annotations

import sys
from collections.abc import Callable
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]


class InputError(ValueError):
    """Raised by a solver when the puzzle input does not have the expected shape."""


def read_input(path: PathType) -> str:
    """Return the whole contents of the file at *path* as text."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def solve_file(path: PathType, solver: Callable[[str], str]) -> str | None:
    """Run *solver* on the contents of *path* and print the answer.

    Failures are reported on standard error rather than raised; the answer
    is returned, or None when reading or solving failed.
    """
    try:
        text = read_input(path)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error thrown by file reader: {err}", file=sys.stderr)
        return None
    try:
        result = solver(text)
    except InputError as err:
        print(f"Error thrown by solver: {err}", file=sys.stderr)
        return None
    print(result)
    return result