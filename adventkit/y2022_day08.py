"""Treetop tree house: visibility and scenic scores in a grid of trees."""

from itertools import takewhile


def parse_lines(text):
    """Return every row and every column of the grid.

    Each line is a list of ((x, y), height) pairs in grid order.
    """
    rows = []
    columns = {}
    for y, line in enumerate(text.splitlines()):
        row = [((x, y), int(char)) for x, char in enumerate(line)]
        rows.append(row)
        for cell in row:
            columns.setdefault(cell[0][0], []).append(cell)
    return [*rows, *columns.values()]


def _viewing_distance(trees, height, limit):
    """Trees seen before the view is blocked, capped at the trees available."""
    return min(sum(1 for _ in takewhile(lambda tree: tree < height, trees)) + 1, limit)


def part1(text):
    """Count the trees visible from outside the grid."""
    visible = set()
    for line in parse_lines(text):
        heights = [height for _, height in line]
        last = len(heights) - 1
        for i, (coordinates, height) in enumerate(line):
            if (
                i == 0
                or i == last
                or height > max(heights[:i])
                or height > max(heights[i + 1:])
            ):
                visible.add(coordinates)
    return len(visible)


def part2(text):
    """Return the highest scenic score of any tree."""
    scores = {}
    for line in parse_lines(text):
        heights = [height for _, height in line]
        for i, (coordinates, height) in enumerate(line):
            before = _viewing_distance(reversed(heights[:i]), height, i)
            after = _viewing_distance(heights[i + 1:], height, len(heights) - i - 1)
            scores[coordinates] = scores.get(coordinates, 1) * before * after
    return max(scores.values())