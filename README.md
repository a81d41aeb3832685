# aoc2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 12. Each day has two parts. Every part takes the puzzle input as text and returns the answer as a string.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
aoc2024 DAY PART [FILE]
```

- `DAY` is the day number, from 1 to 12.
- `PART` is `1` or `2`.
- `FILE` is the puzzle input. If you leave it out, a default under `res/` is read, relative to the current directory:
  - day 1: `res/part1-input.txt` for both parts;
  - day 12: `res/input.txt` for both parts;
  - other days: `res/part1-input.txt` or `res/part2-input.txt`, depending on the part.

The answer is printed to standard output. An unknown day or part is rejected with a usage error. If the file cannot be read, or the solver reports that the input is malformed, a message goes to standard error instead of an answer.

Example:

```
aoc2024 5 2 my-input.txt
```

## Library use

Each day lives in its own module, `aoc2024.day01` to `aoc2024.day12`, and has the functions `part1(text)` and `part2(text)`:

```python
from aoc2024 import day01

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
print(day01.part1(text))  # "11"
print(day01.part2(text))  # "31"
```

A few days expose helpers as well:

- `aoc2024.day02.is_safe(levels)` checks one report.
- `aoc2024.day04.Direction` and `aoc2024.day06.Direction` are grid directions.
- `aoc2024.day05.Rules` holds page ordering rules, with `add`, `validate` and `correct`.
- `aoc2024.day07.parse_equations(text)` parses calibration equations.
- `aoc2024.day11.count_stones(text, blinks)` counts stones after any number of blinks.

Other helpers:

- `aoc2024.cli.get_solver(day, part)` returns the solver for a day and part, and raises `ValueError` for an unknown day or part.
- `aoc2024.runner.read_input(path)` returns the contents of a file as text; it raises `OSError` when the file cannot be opened.
- `aoc2024.runner.solve_file(path, solver)` reads a file, applies a solver to it and prints the result. Read failures and `InputError` raised by the solver are reported on standard error; it returns the answer, or `None` on failure.
- `aoc2024.runner.InputError` (a `ValueError`) is raised by solvers when the input does not have the expected shape.

## What it does not do

The package does not download puzzle inputs or submit answers; inputs must already be on disk or passed as text.