# adventkit

This package solves Advent of Code puzzles. Each day has its own module:

- 2020: day 1 (`y2020_day01`)
- 2022: days 1, 2, 4, 5, 6, 7, 8 and 11
- 2023: days 1, 2, 4, 5, 6, 7, 8, 9, 10, 11, 14 and 15
- 2025: days 1 to 8

Modules are named `y<year>_day<NN>`, for example `y2023_day07`. Every solver
takes the raw puzzle input as a string and returns the answer. The package has
no runtime dependencies.

## Installation

```
pip install .
```

To install the test dependencies and run the test suite:

```
pip install ".[test]"
pytest
```

## Using the solvers

Most modules provide a `part1` and a `part2` function. Both take the full puzzle
text:

```python
from adventkit import y2022_day06, y2023_day15

y2022_day06.part1("mjqjpqmgbljsphdztnvjfqwrcgsmlb")   # 7
y2022_day06.part2("mjqjpqmgbljsphdztnvjfqwrcgsmlb")   # 19

y2023_day15.part1("rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7")  # 1320
y2023_day15.part2("rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7")  # 145
```

Some modules do not follow this pattern:

- `y2020_day01` has only `part1`. It returns 0 when no two entries sum to 2020.
- `y2025_day01` has `count_zero_passes(text)`.
- `y2022_day11.solve(text, rounds, part2)` takes the number of rounds and which
  worry rules to apply.

Other solvers take an extra parameter:

```python
from pathlib import Path

from adventkit import y2022_day11, y2023_day11, y2025_day08

text = Path("input.txt").read_text()

y2022_day11.solve(text, 10_000, True)   # monkeys, part 2 worry rules
y2023_day11.part2(text, 1_000_000)      # galaxy expansion ratio (the default)
y2025_day08.part1(text, 1000)           # number of closest pairs to join
```

Many modules also expose their parsers and helpers. Examples are
`y2022_day07.directory_sizes`, `y2023_day05.parse_converter`,
`y2023_day10.trace_loop` and `y2025_day03.largest_number`. You can use them to
check the intermediate steps of a solution.

Malformed input raises an exception, usually `ValueError`.

## What the package does not do

- It has no command-line program. You read the input file yourself and pass its
  text to a solver function.
- It does not solve 2022 days 3, 9 and 10, or 2023 day 3.