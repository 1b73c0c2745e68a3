import pytest

from adventkit.y2022_day04 import parse_pairs, part1, part2

EXAMPLE = "\n".join(
    ["2-4,6-8", "2-3,4-5", "5-7,7-9", "2-8,3-7", "6-6,4-6", "2-6,4-8"]
)


def test_parse_pairs():
    assert parse_pairs("2-4,6-8\n12-30,5-99") == [(2, 4, 6, 8), (12, 30, 5, 99)]


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_contained_never_exceeds_overlapping():
    assert part1(EXAMPLE) <= part2(EXAMPLE)


def test_all_contained_lines_are_counted():
    lines = ["2-8,3-7", "6-6,4-6", "1-9,1-9", "3-4,1-10"]
    assert part1("\n".join(lines)) == len(lines)
    assert part2("\n".join(lines)) == len(lines)


def test_disjoint_lines_count_nothing():
    assert part2("2-3,4-5\n6-7,1-2") == part2("")
    assert part1("2-3,4-5\n6-7,1-2") == part1("")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_pairs("2-4 6-8")
    with pytest.raises(ValueError):
        parse_pairs("2,4-6-8")