"""Lobby: largest joltage picked from banks of batteries."""


def _digits(line):
    if not (line.isascii() and line.isdigit()) and line:
        raise ValueError(f"not a battery bank: {line!r}")
    return [int(char) for char in line]


def largest_number(line, length):
    """Largest number formed by `length` digits of `line`, kept in order."""
    digits = _digits(line)
    count = len(digits)
    chosen = [0] * length
    for position, digit in enumerate(digits):
        first = max(position - (count - length), 0)
        for slot in range(first, length):
            if digit > chosen[slot]:
                chosen[slot] = digit
                chosen[slot + 1:] = [0] * (length - slot - 1)
                break
    value = 0
    for digit in chosen:
        value = value * 10 + digit
    return value


def part1(text):
    """Sum of the largest two-digit joltage of every bank."""
    total = 0
    for line in text.strip().splitlines():
        if not line:
            raise ValueError("empty battery bank")
        total += largest_number(line, 2)
    return total


def part2(text):
    """Sum of the largest twelve-digit joltage of every bank."""
    return sum(largest_number(line, 12) for line in text.strip().splitlines())