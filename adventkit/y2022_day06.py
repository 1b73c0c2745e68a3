"""Tuning trouble: finding start-of-packet and start-of-message markers."""

import string

_LETTERS = frozenset(string.ascii_lowercase)


def find_marker(signal, unique):
    """Return how many characters are read when the last `unique` are all distinct."""
    if not set(signal) <= _LETTERS:
        raise ValueError("signal must hold only lowercase letters")
    if len(signal) < unique:
        raise ValueError("signal is shorter than the marker")
    for end in range(unique, len(signal) + 1):
        if len(set(signal[end - unique:end])) == unique:
            return end
    raise ValueError("no marker in signal")


def part1(signal):
    """Position of the start-of-packet marker."""
    return find_marker(signal, 4)


def part2(signal):
    """Position of the start-of-message marker."""
    return find_marker(signal, 14)