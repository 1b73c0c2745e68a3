"""Scratchcards: winning numbers and won copies."""

import re

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _numbers(text):
    return [int(token) for token in text.split(" ") if _UNSIGNED.fullmatch(token)]


def card_matches(text):
    """Return, for each card, how many of its numbers are winning numbers."""
    matches = []
    for line in text.splitlines():
        _, sep, body = line.partition(":")
        if not sep:
            raise ValueError(f"not a card: {line!r}")
        winning, sep, owned = body.partition("|")
        if not sep:
            raise ValueError(f"not a card: {line!r}")
        wins = _numbers(winning)
        matches.append(sum(1 for number in _numbers(owned) if number in wins))
    return matches


def part1(text):
    """Sum the card scores: 1 for the first match, doubled for each further one."""
    return sum(2 ** (count - 1) for count in card_matches(text) if count)


def part2(text):
    """Count the cards held once every won copy has been processed."""
    copies = {}
    for index, count in enumerate(card_matches(text)):
        copies[index] = copies.get(index, 0) + 1
        held = copies[index]
        for won in range(index + 1, index + 1 + count):
            copies[won] = copies.get(won, 0) + held
    return sum(copies.values())