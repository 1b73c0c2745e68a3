"""Cafeteria: fresh ingredient ids and the ranges that mark them."""

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _integer(token):
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return int(token)


def parse(text):
    """Return the fresh ranges as (start, end) and the ingredient ids.

    The ranges are the leading lines of the form 'start-end'; the ids follow
    after the line that ends them.
    """
    lines = text.splitlines()
    ranges = []
    for line in lines:
        start, sep, end = line.partition("-")
        if not sep:
            break
        ranges.append((_integer(start), _integer(end)))
    values = [_integer(line) for line in lines[len(ranges) + 1:]]
    return ranges, values


def part1(text):
    """Count the ingredient ids that fall inside at least one fresh range."""
    ranges, values = parse(text)
    return sum(
        1 for value in values if any(start <= value <= end for start, end in ranges)
    )


def part2(text):
    """Count the ids covered by the fresh ranges, trimming each against the others."""
    ranges, _ = parse(text)
    trimmed = list(ranges)
    for index, (start, end) in enumerate(ranges):
        snapshot = list(trimmed)
        for other, (other_start, other_end) in enumerate(snapshot):
            if other == index:
                continue
            if other_start <= start <= other_end:
                if end <= other_end:
                    start, end = 1, 0
                else:
                    start = other_end + 1
            trimmed[index] = (start, end)
    return sum(end - start + 1 for start, end in trimmed)