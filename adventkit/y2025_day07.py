"""Laboratories: tachyon beams split by a manifold of splitters."""

START = "S"
SPLITTER = "^"


def _width(lines):
    if not lines:
        raise ValueError("empty manifold")
    return len(lines[0])


def part1(text):
    """Count how many times a beam is split."""
    lines = text.splitlines()
    beams = [False] * _width(lines)
    splits = 0
    for line in lines:
        for i, char in enumerate(line):
            if char == START:
                beams[i] = True
                continue
            if char == SPLITTER and beams[i]:
                beams[i] = False
                if i > 0:
                    beams[i - 1] = True
                if i + 1 < len(beams):
                    beams[i + 1] = True
                splits += 1
    return splits


def part2(text):
    """Count the timelines a single particle ends up in."""
    lines = text.splitlines()
    timelines = [0] * _width(lines)
    for line in lines:
        for i, char in enumerate(line):
            if char == START:
                timelines[i] = 1
                continue
            count = timelines[i]
            if char == SPLITTER and count > 0:
                if i > 0:
                    timelines[i - 1] += count
                if i + 1 < len(timelines):
                    timelines[i + 1] += count
                timelines[i] = 0
    return sum(timelines)