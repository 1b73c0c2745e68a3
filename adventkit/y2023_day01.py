"""Trebuchet calibration: first and last digits of each line."""

DIGIT_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _is_digit(char):
    return "0" <= char <= "9"


def _line_value(line):
    digits = [char for char in line if _is_digit(char)]
    if not digits:
        raise ValueError(f"no digit in {line!r}")
    return int(digits[0]) * 10 + int(digits[-1])


def part1(text):
    """Sum the two-digit values formed by the first and last digit of each line."""
    return sum(_line_value(line) for line in text.splitlines())


def _first_digit(line):
    for start in range(len(line)):
        rest = line[start:]
        if _is_digit(rest[0]):
            return int(rest[0])
        for value, word in enumerate(DIGIT_WORDS, start=1):
            if rest.startswith(word):
                return value
    raise ValueError(f"no digit in {line!r}")


def _last_digit(line):
    for end in range(len(line), 0, -1):
        head = line[:end]
        if _is_digit(head[-1]):
            return int(head[-1])
        for value, word in enumerate(DIGIT_WORDS, start=1):
            if head.endswith(word):
                return value
    raise ValueError(f"no digit in {line!r}")


def part2(text):
    """As part1, but spelled-out digits count too."""
    return sum(
        _first_digit(line) * 10 + _last_digit(line) for line in text.splitlines()
    )