"""Report repair: find two entries that sum to 2020."""

import re

TARGET = 2020

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(token):
    """Return the token as a non-negative integer, or None if it is not one."""
    if _UNSIGNED.fullmatch(token):
        return int(token)
    return None


def part1(text):
    """Return the product of the two entries summing to 2020, or 0 if none do."""
    wanted = set()
    for line in text.splitlines():
        value = _parse_unsigned(line.strip())
        if value is None:
            continue
        if value in wanted:
            return value * (TARGET - value)
        wanted.add(TARGET - value)
    return 0