"""Trash compactor: a worksheet of column arithmetic problems."""

import re
from math import prod

_UNSIGNED = re.compile(r"\+?[0-9]+")
_DIGITS = frozenset("0123456789")


def parse(text):
    """Return the number of cells on the last row and every cell in reading order.

    Cells that are numbers become ints; anything else stays a string.
    """
    width = 0
    cells = []
    for line in text.splitlines():
        row = [int(token) if _UNSIGNED.fullmatch(token) else token for token in line.split()]
        width = len(row)
        cells.extend(row)
    return width, cells


def _apply(operator, operands):
    if operator == "*":
        return prod(operands)
    if operator == "+":
        return sum(operands)
    raise ValueError(f"unknown operator: {operator!r}")


def part1(text):
    """Sum of the answers, each problem read down its column."""
    width, cells = parse(text)
    if width == 0:
        raise ValueError("no problems in worksheet")
    height = len(cells) // width
    total = 0
    for column in range(width):
        operands = []
        for cell in cells[column::width][:height]:
            if isinstance(cell, int):
                operands.append(cell)
            else:
                total += _apply(cell, operands)
    return total


def part2(text):
    """Sum of the answers, numbers read top to bottom, columns right to left."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty worksheet")
    width = max(map(len, lines))
    total = 0
    numbers = []
    slot = 0
    pending = False
    for column in reversed(range(width)):
        for line in lines:
            char = line[column] if column < len(line) else ""
            if char in _DIGITS:
                digit = int(char)
                if slot < len(numbers):
                    numbers[slot] = numbers[slot] * 10 + digit
                else:
                    numbers.append(digit)
                pending = True
            elif char == "*" or char == "+":
                total += _apply(char, numbers)
                numbers = []
                slot = 0
                pending = False
        if pending:
            slot += 1
    return total