"""Calorie counting: totals carried by each elf."""

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def elf_totals(text):
    """Return the calorie total of every elf, largest first.

    Any line that is not an integer closes the current elf's list.
    """
    totals = []
    current = 0
    for line in text.splitlines():
        if _INTEGER.fullmatch(line):
            current += int(line)
        else:
            totals.append(current)
            current = 0
    totals.append(current)
    totals.sort(reverse=True)
    return totals


def part1(text):
    """Return the largest calorie total."""
    return elf_totals(text)[0]


def part2(text):
    """Return the sum of the three largest calorie totals."""
    return sum(elf_totals(text)[:3])