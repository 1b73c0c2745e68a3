"""Wait for it: ways to win boat races."""

import re
from math import prod

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _tokens(lines, prefix):
    line = next(lines, None)
    if line is None:
        raise ValueError(f"missing {prefix!r} line")
    line = line.strip()
    while prefix and line.startswith(prefix):
        line = line[len(prefix):]
    return line.split()


def parse(text):
    """Return the lists of race times and record distances."""
    lines = iter(text.splitlines())
    times = [int(t) for t in _tokens(lines, "Time:") if _UNSIGNED.fullmatch(t)]
    distances = [int(t) for t in _tokens(lines, "Distance:") if _UNSIGNED.fullmatch(t)]
    return times, distances


def _joined(tokens):
    digits = "".join(tokens)
    if not _UNSIGNED.fullmatch(digits):
        raise ValueError(f"not a number: {digits!r}")
    return int(digits)


def parse_joined(text):
    """Return the single race time and distance, ignoring the spaces between digits."""
    lines = iter(text.splitlines())
    time = _joined(_tokens(lines, "Time:"))
    distance = _joined(_tokens(lines, "Distance:"))
    return time, distance


def _ways_to_win(time, distance):
    """Count hold times in 1..time-1 that travel further than `distance`."""
    half = time // 2
    if half < 1 or half * (time - half) <= distance:
        return 0
    low, high = 1, half
    while low < high:
        middle = (low + high) // 2
        if middle * (time - middle) > distance:
            high = middle
        else:
            low = middle + 1
    return time - 2 * low + 1


def part1(text):
    """Product of the number of ways to win each race."""
    times, distances = parse(text)
    return prod(_ways_to_win(t, d) for t, d in zip(times, distances))


def part2(text):
    """Number of ways to win the single long race."""
    return _ways_to_win(*parse_joined(text))