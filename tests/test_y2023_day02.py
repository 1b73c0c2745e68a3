import pytest

from adventkit.y2023_day02 import Color, Subset, parse_game, parse_subset, part1, part2

INPUT = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
        Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
        Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
        Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
        Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


def test_part1_example():
    assert part1(INPUT) == 8


def test_part2_example():
    assert part2(INPUT) == 2286


def test_parse_subset():
    assert parse_subset(" 14 red ") == Subset(14, Color.RED)


def test_parse_game():
    game = parse_game("        Game 7: 3 blue, 4 red; 2 green")
    assert game.game == 7
    assert game.subsets == [
        Subset(3, Color.BLUE),
        Subset(4, Color.RED),
        Subset(2, Color.GREEN),
    ]


def test_unknown_color_rejected():
    with pytest.raises(ValueError):
        parse_subset("3 purple")


def test_missing_prefix_rejected():
    with pytest.raises(ValueError):
        parse_game("Round 1: 3 blue")


def test_part2_missing_colour_raises():
    with pytest.raises(ValueError):
        part2("Game 1: 3 blue, 4 red")