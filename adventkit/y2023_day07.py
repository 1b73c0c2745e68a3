"""Camel cards: ranking poker-like hands and totalling their winnings."""

from collections import Counter

JOKER = 0

_FACES = {"A": 14, "K": 13, "Q": 12, "J": JOKER, "T": 11}


def parse_card(char):
    """Return the strength of a card.

    Jacks rank lowest, then digits by value, then T, Q, K and A.
    """
    if char in _FACES:
        return _FACES[char]
    if "0" <= char <= "9":
        return 1 + int(char)
    raise ValueError(f"not a card: {char!r}")


def parse_input(text):
    """Return (cards, bid) for each line of the form '32T3K 765'."""
    hands = []
    for line in text.splitlines():
        cards, sep, bid = line.strip().partition(" ")
        if not sep:
            raise ValueError(f"not a hand: {line!r}")
        hands.append(([parse_card(char) for char in cards], int(bid)))
    return hands


def _hand_key(cards, jokers_wild):
    if jokers_wild:
        counts = list(Counter(card for card in cards if card != JOKER).values())
        jokers = sum(1 for card in cards if card == JOKER)
        if jokers:
            if counts:
                counts[counts.index(max(counts))] += jokers
            else:
                counts = [5]
    else:
        counts = list(Counter(cards).values())
    pairs = counts.count(2)
    return (
        5 in counts,
        4 in counts,
        3 in counts and 2 in counts,
        3 in counts,
        pairs == 2,
        pairs == 1,
        tuple(cards),
    )


def _winnings(text, jokers_wild):
    hands = sorted(parse_input(text), key=lambda hand: _hand_key(hand[0], jokers_wild))
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


def part1(text):
    """Total winnings, jacks counted as ordinary cards."""
    return _winnings(text, jokers_wild=False)


def part2(text):
    """Total winnings, jacks acting as jokers that join the most common card."""
    return _winnings(text, jokers_wild=True)