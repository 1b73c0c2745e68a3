"""Monkey in the middle: tracking items thrown between monkeys."""

import re
from dataclasses import dataclass, field
from math import prod

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MONKEY_LINES = 7


@dataclass(frozen=True)
class Operation:
    """How a monkey changes the worry level; a missing operand means the old value."""

    operator: str
    operand: int | None = None

    def apply(self, value):
        other = value if self.operand is None else self.operand
        if self.operator == "+":
            return value + other
        return value * other


def _after(line, prefix):
    if not line.startswith(prefix):
        raise ValueError(f"expected {prefix!r} in {line!r}")
    return line[len(prefix):]


def parse_operation(line):
    """Parse 'Operation: new = old * 19' and its kin."""
    rest = _after(line, "Operation: new = old ")
    operator, sep, operand = rest.partition(" ")
    if not sep or operator not in ("+", "*"):
        raise ValueError(f"not an operation: {line!r}")
    value = int(operand) if _UNSIGNED.fullmatch(operand) else None
    return Operation(operator, value)


@dataclass
class Monkey:
    """A monkey holding items and deciding where to throw them."""

    items: list
    operation: Operation
    test: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def _throw_all(self, worry_of):
        to_true, to_false = [], []
        while self.items:
            item = self.items.pop()
            self.inspected += 1
            worry = worry_of(item)
            (to_true if worry % self.test == 0 else to_false).append(worry)
        return to_true, to_false

    def inspect(self):
        """Inspect every item, dividing worry by three; return (to_true, to_false)."""
        return self._throw_all(lambda item: self.operation.apply(item) // 3)

    def inspect_modular(self, modulus):
        """Inspect every item, keeping worry modulo `modulus`; return (to_true, to_false)."""
        return self._throw_all(lambda item: self.operation.apply(item) % modulus)


def parse_monkey(lines):
    """Parse one monkey from its block of lines, heading included."""
    rest = [line.strip() for line in list(lines)[1:6]]
    if len(rest) < 5:
        raise ValueError("incomplete monkey description")
    items_line, operation_line, test_line, true_line, false_line = rest
    items = [int(item) for item in _after(items_line, "Starting items: ").split(", ")]
    return Monkey(
        items=items,
        operation=parse_operation(operation_line),
        test=int(_after(test_line, "Test: divisible by ")),
        if_true=int(_after(true_line, "If true: throw to monkey ")),
        if_false=int(_after(false_line, "If false: throw to monkey ")),
    )


def parse_monkeys(text):
    """Parse every monkey, each described by a block of seven lines."""
    lines = text.splitlines()
    return [
        parse_monkey(lines[start:start + _MONKEY_LINES])
        for start in range(0, len(lines), _MONKEY_LINES)
    ]


def solve(text, rounds, part2):
    """Return the product of the two highest inspection counts after `rounds`."""
    monkeys = parse_monkeys(text)
    modulus = prod(monkey.test for monkey in monkeys)

    for _ in range(rounds):
        in_flight = {}
        for index, monkey in enumerate(monkeys):
            monkey.items.extend(in_flight.pop(index, []))
            if part2:
                to_true, to_false = monkey.inspect_modular(modulus)
            else:
                to_true, to_false = monkey.inspect()
            in_flight.setdefault(monkey.if_true, []).extend(to_true)
            in_flight.setdefault(monkey.if_false, []).extend(to_false)
        for index, monkey in enumerate(monkeys):
            monkey.items.extend(in_flight.pop(index, []))

    counts = sorted((monkey.inspected for monkey in monkeys), reverse=True)
    return prod(counts[:2])