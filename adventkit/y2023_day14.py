"""Parabolic reflector dish: tilting rounded rocks around a platform."""

from dataclasses import dataclass, replace
from enum import Enum

SPIN_CYCLES = 1_000_000_000


class ShapeKind(Enum):
    """What a rock on the platform is."""

    ROUND = "O"
    CUBE = "#"


class Direction(Enum):
    """A direction the platform can be tilted in."""

    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"


@dataclass(frozen=True)
class Shape:
    """A rock and its position on the platform."""

    kind: ShapeKind
    x: int
    y: int


_SPIN = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


def parse_input(text):
    """Return every rock on the platform, in reading order."""
    return [
        Shape(ShapeKind(char), x, y)
        for y, line in enumerate(text.splitlines())
        for x, char in enumerate(line.strip())
        if char in ("O", "#")
    ]


def tilt(shapes, direction, width, height):
    """Return the rocks after the rounded ones have rolled in `direction`."""
    vertical = direction in (Direction.NORTH, Direction.SOUTH)
    if direction in (Direction.NORTH, Direction.WEST):
        ordered = sorted(shapes, key=lambda shape: (shape.y, shape.x))
    else:
        ordered = sorted(shapes, key=lambda shape: (shape.x, shape.y), reverse=True)

    last = {}
    moved = []
    for shape in ordered:
        lane = shape.x if vertical else shape.y
        if shape.kind is ShapeKind.CUBE:
            placed = shape
        else:
            stop = last.get(lane)
            if stop is None:
                position = {
                    Direction.NORTH: 0,
                    Direction.WEST: 0,
                    Direction.SOUTH: height - 1,
                    Direction.EAST: width - 1,
                }[direction]
            elif direction in (Direction.NORTH, Direction.WEST):
                position = stop + 1
            else:
                position = max(stop - 1, 0)
            placed = replace(shape, y=position) if vertical else replace(shape, x=position)
        moved.append(placed)
        last[lane] = placed.y if vertical else placed.x
    return moved


def north_load(shapes, height):
    """Total load of the rounded rocks on the north support beams."""
    return sum(height - shape.y for shape in shapes if shape.kind is ShapeKind.ROUND)


def _dimensions(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty platform")
    return len(lines[0].strip()), len(lines)


def part1(text):
    """North load after tilting the platform north once."""
    height = len(text.splitlines())
    width = len(text.splitlines()[0].strip()) if height else 0
    return north_load(tilt(parse_input(text), Direction.NORTH, width, height), height)


def part2(text):
    """North load after a billion spin cycles."""
    width, height = _dimensions(text)
    shapes = parse_input(text)
    seen = {}
    cycle = 0
    while cycle < SPIN_CYCLES:
        key = tuple(shapes)
        if key in seen:
            first = seen[key]
            cycle = SPIN_CYCLES - ((SPIN_CYCLES - first) % (cycle - first))
        else:
            seen[key] = cycle
        for direction in _SPIN:
            shapes = tilt(shapes, direction, width, height)
        cycle += 1
    return north_load(shapes, height)