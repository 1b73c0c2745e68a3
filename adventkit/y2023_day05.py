"""Seed fertilizer: mapping seeds through a chain of converters."""

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
# Any ASCII letter or ASCII punctuation separates the sections.
_SEPARATOR = re.compile(r"[A-Za-z!-/:-@\[-`{-~]")


@dataclass(frozen=True)
class Converter:
    """Maps values starting at `source` onto values starting at `dest`."""

    dest: int
    source: int
    range: int

    def convert(self, value):
        """Return the mapped value, or None when `value` is outside this converter."""
        if self.source <= value <= self.source + self.range:
            return self.dest + (value - self.source)
        return None


def parse_converter(line):
    """Parse 'dest source range' into a converter."""
    parts = line.split(" ", 2)
    if len(parts) != 3:
        raise ValueError(f"not a converter: {line!r}")
    return Converter(*(int(part) for part in parts))


def _sections(text):
    sections = []
    for chunk in _SEPARATOR.split(text):
        lines = [line.strip() for line in chunk.splitlines()]
        lines = [line for line in lines if line]
        if lines:
            sections.append(lines)
    if not sections:
        raise ValueError("no seeds in input")
    seeds_line, *stages = sections
    converters = [[parse_converter(line) for line in stage] for stage in stages]
    return seeds_line[0], converters


def _location(seed, converters):
    for stage in converters:
        for converter in stage:
            mapped = converter.convert(seed)
            if mapped is not None:
                seed = mapped
                break
    return seed


def part1(text):
    """Lowest location reached by any listed seed."""
    seeds_line, converters = _sections(text)
    seeds = [int(token) for token in seeds_line.split(" ") if _UNSIGNED.fullmatch(token)]
    return min(_location(seed, converters) for seed in seeds)


def part2(text):
    """Lowest location reached by any seed in the listed (start, count) ranges."""
    seeds_line, converters = _sections(text)
    tokens = seeds_line.split(" ")
    ranges = []
    for index in range(0, len(tokens), 2):
        pair = tokens[index:index + 2]
        start, count = int(pair[0]), int(pair[-1])
        ranges.append(range(start, start + count))
    lowest = [
        min(_location(seed, converters) for seed in seeds) for seeds in ranges if seeds
    ]
    if not lowest:
        raise ValueError("no seeds in input")
    return min(lowest)