import pytest

from adventkit.y2025_day05 import parse, part1, part2

EXAMPLE = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n"


def test_parse_splits_ranges_and_ids():
    ranges, values = parse("3-5\n10-14\n\n1\n5")
    assert ranges == [(3, 5), (10, 14)]
    assert values == [1, 5]


def test_parse_rejects_bad_id():
    with pytest.raises(ValueError):
        parse("3-5\n\nabc")


def test_part1_example():
    assert part1(EXAMPLE) == 3


def test_part2_example():
    assert part2(EXAMPLE) == 14


def test_part2_overlapping_ranges():
    assert part2("3-5\n10-14\n16-20\n12-18\n1-6") == 17


def test_part2_touching_range():
    assert part2("3-5\n10-14\n16-20\n12-18\n1-6\n5-7") == 18


def test_part2_contained_range():
    assert part2("3-5\n10-14\n16-20\n12-18\n1-6\n1-4\n5-7") == 18