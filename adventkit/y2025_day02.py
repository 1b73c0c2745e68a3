"""Gift shop: product ids made of repeated digit sequences."""

import re

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _unsigned(token):
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return int(token)


def parse_ranges(text):
    """Return (start, end) for every comma-separated 'start-end' range."""
    ranges = []
    for piece in text.split(","):
        start, sep, end = piece.strip().partition("-")
        if not sep:
            raise ValueError(f"not a range: {piece!r}")
        ranges.append((_unsigned(start), _unsigned(end)))
    return ranges


def _ids(text):
    for start, end in parse_ranges(text):
        yield from range(start, end + 1)


def _doubled(value):
    digits = str(value)
    middle, odd = divmod(len(digits), 2)
    return not odd and digits[:middle] == digits[middle:]


def _repeated(value):
    digits = str(value)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length // 2 + 1)
    )


def part1(text):
    """Sum of the ids made of one digit sequence written twice."""
    return sum(value for value in _ids(text) if _doubled(value))


def part2(text):
    """Sum of the ids made of one digit sequence written two or more times."""
    return sum(value for value in _ids(text) if _repeated(value))