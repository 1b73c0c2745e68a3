"""Printing department: paper rolls a forklift can reach."""

ROLL = "@"
EMPTY = "."
CROWDED = 4

_OFFSETS = [
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
]


def parse_grid(text):
    """Return the grid as a list of rows of characters."""
    return [list(line) for line in text.splitlines()]


def _neighbouring_rolls(grid, i, j):
    count = 0
    for di, dj in _OFFSETS:
        ni, nj = i + di, j + dj
        if ni < 0 or nj < 0 or ni >= len(grid):
            continue
        row = grid[ni]
        if nj < len(row) and row[nj] == ROLL:
            count += 1
    return count


def removable(grid):
    """Return (row, column) of every roll with fewer than four neighbouring rolls."""
    if not grid:
        raise ValueError("empty grid")
    width = len(grid[0])
    return [
        (i, j)
        for i, row in enumerate(grid)
        for j in range(width)
        if row[j] == ROLL and _neighbouring_rolls(grid, i, j) < CROWDED
    ]


def part1(text):
    """Number of rolls reachable right away."""
    return len(removable(parse_grid(text)))


def part2(text):
    """Number of rolls removed when reachable rolls are taken away until none are left."""
    grid = parse_grid(text)
    total = 0
    while True:
        cells = removable(grid)
        if not cells:
            return total
        total += len(cells)
        for i, j in cells:
            grid[i][j] = EMPTY