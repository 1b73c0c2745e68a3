from adventkit.y2022_day01 import elf_totals, part1, part2

EXAMPLE = "\n".join(
    [
        "1000",
        "2000",
        "3000",
        "",
        "4000",
        "",
        "5000",
        "6000",
        "",
        "7000",
        "8000",
        "9000",
        "",
        "10000",
    ]
)


def test_part1_example():
    assert part1(EXAMPLE) == 24000


def test_part2_example():
    assert part2(EXAMPLE) == 45000


def test_totals_sorted_and_complete():
    totals = elf_totals(EXAMPLE)
    assert totals == sorted(totals, reverse=True)
    assert sum(totals) == sum(int(token) for token in EXAMPLE.split())
    assert len(totals) == EXAMPLE.count("\n\n") + 1


def test_totals_of_small_input():
    assert elf_totals("5\n\n7") == [7, 5]


def test_non_numeric_line_separates_elves():
    assert elf_totals("4\nx\n6") == [6, 4]


def test_part2_with_fewer_than_three_elves():
    assert part2("5\n\n7") == sum(elf_totals("5\n\n7"))


def test_part1_is_first_total():
    assert part1(EXAMPLE) == elf_totals(EXAMPLE)[0]


def test_empty_input_has_one_empty_elf():
    assert elf_totals("") == [0]