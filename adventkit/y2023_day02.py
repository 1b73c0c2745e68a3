"""Cube conundrum: games of coloured cubes drawn from a bag."""

from dataclasses import dataclass
from enum import Enum
from math import prod


class Color(Enum):
    """A cube colour."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"


@dataclass(frozen=True)
class Subset:
    """A count of cubes of one colour shown in a draw."""

    n: int
    color: Color


@dataclass(frozen=True)
class Game:
    """A numbered game and every subset of cubes shown in it."""

    game: int
    subsets: list


LIMITS = {Color.RED: 12, Color.GREEN: 13, Color.BLUE: 14}


def parse_subset(text):
    """Parse '3 blue' into a subset."""
    n, sep, color = text.strip().partition(" ")
    if not sep:
        raise ValueError(f"not a subset: {text!r}")
    return Subset(int(n.strip()), Color(color.strip()))


def parse_game(line):
    """Parse 'Game 1: 3 blue, 4 red; 1 red' into a game."""
    head, sep, draws = line.partition(":")
    if not sep:
        raise ValueError(f"not a game: {line!r}")
    head = head.strip()
    if not head.startswith("Game "):
        raise ValueError(f"not a game: {line!r}")
    subsets = [
        parse_subset(part) for draw in draws.split(";") for part in draw.split(",")
    ]
    return Game(int(head[len("Game "):]), subsets)


def part1(text):
    """Sum the ids of games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(
        game.game
        for game in map(parse_game, text.splitlines())
        if all(subset.n <= LIMITS[subset.color] for subset in game.subsets)
    )


def _power(game):
    return prod(
        max(subset.n for subset in game.subsets if subset.color is color)
        for color in (Color.RED, Color.GREEN, Color.BLUE)
    )


def part2(text):
    """Sum the powers of the smallest cube sets that make each game possible."""
    return sum(_power(parse_game(line)) for line in text.splitlines())