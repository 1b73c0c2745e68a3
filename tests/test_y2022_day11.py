import pytest

from adventkit.y2022_day11 import (
    Operation,
    parse_monkey,
    parse_monkeys,
    parse_operation,
    solve,
)

EXAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_part1_example():
    assert solve(EXAMPLE, 20, False) == 10605


def test_part2_example():
    assert solve(EXAMPLE, 10_000, True) == 2713310158


def test_parse_operation_square():
    operation = parse_operation("Operation: new = old * old")
    assert operation == Operation("*", None)
    assert operation.apply(3) == 9


def test_parse_operation_add():
    assert parse_operation("Operation: new = old + 6").apply(4) == 10


def test_parse_operation_rejects_garbage():
    with pytest.raises(ValueError):
        parse_operation("Operation: new = old / 2")


def test_parse_monkeys():
    monkeys = parse_monkeys(EXAMPLE)
    assert len(monkeys) == 4
    assert monkeys[1].items == [54, 65, 75, 74]
    assert monkeys[2].operation == Operation("*", None)
    assert (monkeys[3].test, monkeys[3].if_true, monkeys[3].if_false) == (17, 0, 1)


def test_inspect():
    monkey = parse_monkey(EXAMPLE.splitlines()[:7])
    assert monkey.inspect() == ([], [620, 500])
    assert monkey.inspected == 2
    assert monkey.items == []


def test_inspect_modular():
    monkey = parse_monkey(EXAMPLE.splitlines()[:7])
    assert monkey.inspect_modular(1000) == ([], [862, 501])
    assert monkey.inspected == 2


def test_incomplete_monkey_rejected():
    with pytest.raises(ValueError):
        parse_monkey(EXAMPLE.splitlines()[:3])