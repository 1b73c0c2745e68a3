import itertools

import pytest

from adventkit.y2022_day02 import part1, part2

EXAMPLE = "A Y\nB X\nC Z"

ALL_LINES = [f"{a} {b}" for a, b in itertools.product("ABC", "XYZ")]


def test_part1_example():
    assert part1(EXAMPLE) == 15


def test_part2_example():
    assert part2(EXAMPLE) == 12


@pytest.mark.parametrize("line", ALL_LINES)
def test_single_round_scores_in_range(line):
    assert 1 <= part1(line) <= 9
    assert 1 <= part2(line) <= 9


@pytest.mark.parametrize("opponent,same", [("A", "X"), ("B", "Y"), ("C", "Z")])
def test_draw_matches_playing_same_shape(opponent, same):
    assert part2(f"{opponent} Y") == part1(f"{opponent} {same}")


def test_total_is_sum_of_rounds():
    assert part1("\n".join(ALL_LINES)) == sum(part1(line) for line in ALL_LINES)
    assert part2("\n".join(ALL_LINES)) == sum(part2(line) for line in ALL_LINES)


def test_line_without_space_scores_nothing():
    assert part1("A Y\nBX") == part1("A Y")
    assert part2("A Y\nBX") == part2("A Y")


def test_order_does_not_matter():
    lines = EXAMPLE.splitlines()
    assert part1("\n".join(reversed(lines))) == part1(EXAMPLE)