"""Secret entrance: counting how often a dial lands on zero."""

import re

DIAL_SIZE = 100
START = 50

_UNSIGNED = re.compile(r"\+?[0-9]+")


def count_zero_passes(text):
    """Count every click that leaves the dial pointing at zero.

    Each line is 'L' or 'R' followed by a number of clicks; the dial starts at 50.
    """
    position = START
    count = 0
    for line in text.splitlines():
        if not line:
            raise ValueError("empty rotation")
        direction, amount = line[0], line[1:]
        if direction not in ("L", "R"):
            raise ValueError(f"not a rotation: {line!r}")
        if not _UNSIGNED.fullmatch(amount):
            raise ValueError(f"not a rotation: {line!r}")
        clicks = int(amount)
        if direction == "R":
            count += (position + clicks) // DIAL_SIZE
            position = (position + clicks) % DIAL_SIZE
        else:
            count += ((DIAL_SIZE - position) % DIAL_SIZE + clicks) // DIAL_SIZE
            position = (position - clicks) % DIAL_SIZE
    return count