"""Playground: wiring junction boxes into circuits, closest pairs first."""

import math
import re
from dataclasses import dataclass
from itertools import combinations

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Coord:
    """A junction box position."""

    x: int
    y: int
    z: int

    def _squared(self, other):
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2

    def distance(self, other):
        """Straight-line distance to another box."""
        return math.sqrt(self._squared(other))


def _integer(token):
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return int(token)


def parse(text):
    """Return the box of every 'x,y,z' line."""
    coords = []
    for line in text.splitlines():
        fields = line.split(",")
        if len(fields) < 3:
            raise ValueError(f"not a position: {line!r}")
        coords.append(Coord(*(_integer(field) for field in fields[:3])))
    return coords


def _closest_pairs(coords):
    return sorted(combinations(coords, 2), key=lambda pair: pair[0]._squared(pair[1]))


def _join(circuits, circuit_of, a, b, new_index):
    """Connect two boxes; return False when they already share a circuit."""
    first = circuit_of.get(a)
    second = circuit_of.get(b)
    if first is None and second is None:
        circuits[new_index] = [a, b]
        circuit_of[a] = new_index
        circuit_of[b] = new_index
    elif first is None:
        circuits[second].append(a)
        circuit_of[a] = second
    elif second is None:
        circuits[first].append(b)
        circuit_of[b] = first
    else:
        if first == second:
            return False
        circuits[first].extend(circuits[second])
        circuits[second].clear()
        for box, circuit in circuit_of.items():
            if circuit == second:
                circuit_of[box] = first
    return True


def part1(text, pairs):
    """Product of the three largest circuit sizes after wiring the `pairs` closest pairs."""
    coords = parse(text)
    circuits = [[] for _ in range(pairs)]
    circuit_of = {}
    created = 0
    for a, b in _closest_pairs(coords)[:pairs]:
        if _join(circuits, circuit_of, a, b, created):
            created += 1
    sizes = sorted(map(len, circuits), reverse=True)
    return math.prod(sizes[:3])


def part2(text):
    """Product of the x coordinates of the pair whose wiring leaves no box unconnected."""
    coords = parse(text)
    pairs = _closest_pairs(coords)
    circuits = [[] for _ in pairs]
    circuit_of = {}
    everyone = len(set(coords))
    for index, (a, b) in enumerate(pairs):
        if _join(circuits, circuit_of, a, b, index) and len(circuit_of) == everyone:
            return a.x * b.x
    raise ValueError("not every box can be connected")