"""Cosmic expansion: distances between galaxies in an expanding universe."""

from itertools import combinations

PART2_RATIO = 1_000_000


def parse_input(text):
    """Return the (x, y) position of every galaxy, in reading order."""
    return [
        (x, y)
        for y, line in enumerate(text.splitlines())
        for x, char in enumerate(line.strip())
        if char == "#"
    ]


def _span(a, b, empties, extra):
    low, high = sorted((a, b))
    crossed = sum(1 for empty in empties if low < empty < high)
    return high - low + crossed * extra


def total_distance(text, ratio):
    """Sum the distances between every pair of galaxies.

    Every empty row or column is counted `ratio` times.
    """
    if ratio < 1:
        raise ValueError("ratio must be at least 1")
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty image")
    rows = len(lines)
    width = len(lines[0].strip())
    galaxies = parse_input(text)
    used_x = {x for x, _ in galaxies}
    used_y = {y for _, y in galaxies}
    empty_x = [x for x in range(rows) if x not in used_x]
    empty_y = [y for y in range(width) if y not in used_y]
    extra = ratio - 1
    return sum(
        _span(x1, x2, empty_x, extra) + _span(y1, y2, empty_y, extra)
        for (x1, y1), (x2, y2) in combinations(galaxies, 2)
    )


def part1(text):
    """Sum of distances when every empty row and column doubles."""
    return total_distance(text, 2)


def part2(text, ratio=PART2_RATIO):
    """Sum of distances when every empty row and column grows `ratio` times."""
    return total_distance(text, ratio)