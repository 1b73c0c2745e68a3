"""Pipe maze: following the loop through a grid of pipes."""

# Openings of each tile, in the order up, right, down, left.
_TILES = {
    "|": (True, False, True, False),
    "-": (False, True, False, True),
    "L": (True, True, False, False),
    "J": (True, False, False, True),
    "7": (False, False, True, True),
    "F": (False, True, True, False),
    ".": (False, False, False, False),
    "S": (True, True, True, True),
}

_UP, _RIGHT, _DOWN, _LEFT = range(4)


def parse_input(text):
    """Return the grid of tiles, each as (up, right, down, left) openings."""
    grid = []
    for line in text.splitlines():
        row = []
        for char in line.strip():
            if char not in _TILES:
                raise ValueError(f"not a pipe: {char!r}")
            row.append(_TILES[char])
        grid.append(row)
    return grid


def _width(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty maze")
    return len(lines[0])


def _start(text, width):
    flat = "".join(line.strip() for line in text.splitlines())
    index = flat.find("S")
    if index < 0:
        raise ValueError("no start tile")
    y, x = divmod(index, width)
    return y, x


def trace_loop(text):
    """Return the cells (y, x) visited walking the loop from S, in order."""
    width = _width(text)
    y, x = _start(text, width)
    grid = parse_input(text)
    visited = set()
    path = []

    def open_to(ny, nx, side):
        return (
            0 <= ny < len(grid)
            and 0 <= nx < len(grid[ny])
            and grid[ny][nx][side]
            and (ny, nx) not in visited
        )

    while True:
        here = grid[y][x]
        if here[_UP] and open_to(y - 1, x, _DOWN):
            y -= 1
        elif here[_RIGHT] and open_to(y, x + 1, _LEFT):
            x += 1
        elif here[_DOWN] and open_to(y + 1, x, _UP):
            y += 1
        elif here[_LEFT] and open_to(y, x - 1, _RIGHT):
            x -= 1
        else:
            return path
        visited.add((y, x))
        path.append((y, x))


def part1(text):
    """Steps to the point of the loop farthest from the start."""
    return len(trace_loop(text)) // 2


def part2(text):
    """Count the tiles enclosed by the loop."""
    width = _width(text)
    loop = set(trace_loop(text))
    symbols = "".join(line.strip() for line in text.replace("S", "J").splitlines())
    inside = 0
    for y in range(width):
        for x in range(width):
            if (y, x) in loop:
                continue
            crossings = sum(
                1
                for right in range(x + 1, width)
                if (y, right) in loop and symbols[y * width + right] in "|LJ"
            )
            if crossings % 2 == 1:
                inside += 1
    return inside