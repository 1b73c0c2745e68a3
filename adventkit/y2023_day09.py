"""Mirage maintenance: extrapolating sequences by repeated differences."""

import re
from itertools import pairwise

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_input(text):
    """Return the integers of each line."""
    return [
        [int(token) for token in line.split() if _INTEGER.fullmatch(token)]
        for line in text.splitlines()
    ]


def _differences(values):
    return [b - a for a, b in pairwise(values)]


def _forward_step(values):
    diffs = _differences(values)
    if any(diffs):
        return _forward_step(diffs) + diffs[-1]
    return 0


def _backward_step(values):
    diffs = _differences(values)
    if any(diffs):
        return diffs[0] - _backward_step(diffs)
    return 0


def extrapolate_forward(values):
    """Return the value that would follow the sequence."""
    if not values:
        raise ValueError("cannot extrapolate an empty sequence")
    return values[-1] + _forward_step(values)


def extrapolate_backward(values):
    """Return the value that would precede the sequence."""
    if not values:
        raise ValueError("cannot extrapolate an empty sequence")
    return values[0] - _backward_step(values)


def part1(text):
    """Sum of the next value of every sequence."""
    return sum(extrapolate_forward(values) for values in parse_input(text))


def part2(text):
    """Sum of the previous value of every sequence."""
    return sum(extrapolate_backward(values) for values in parse_input(text))