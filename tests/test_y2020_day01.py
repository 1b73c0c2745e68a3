from adventkit.y2020_day01 import part1

EXAMPLE = """1721
        979
        366
        299
        675
        1456"""


def test_part1_example():
    assert part1(EXAMPLE) == 514579


def test_part1_no_pair_gives_zero():
    assert part1("1\n2\n3") == 0


def test_part1_ignores_unparsable_lines():
    assert part1("abc\n1721\n\n299\n-5") == 1721 * 299


def test_part1_empty_input():
    assert part1("") == 0