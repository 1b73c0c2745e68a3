"""Supply stacks: moving crates between stacks."""

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Instruction:
    """Move `count` crates from stack `source` to stack `target`."""

    count: int
    source: int
    target: int

    def _take(self, stacks):
        stack = stacks.get(self.source)
        if stack is None:
            return []
        if self.count > len(stack):
            raise IndexError(
                f"stack {self.source} holds {len(stack)} crates, {self.count} requested"
            )
        cut = len(stack) - self.count
        taken = stack[cut:]
        del stack[cut:]
        return taken

    def _put(self, stacks, crates):
        stack = stacks.get(self.target)
        if stack is not None:
            stack.extend(crates)

    def move_one_by_one(self, stacks):
        """Move the crates one at a time, reversing their order."""
        self._put(stacks, reversed(self._take(stacks)))

    def move_together(self, stacks):
        """Move the crates all at once, keeping their order."""
        self._put(stacks, self._take(stacks))


def parse_instruction(line):
    """Parse 'move N from A to B'; raise ValueError for any other line."""
    numbers = []
    for token in line.split()[1::2]:
        if not _UNSIGNED.fullmatch(token):
            break
        numbers.append(int(token))
    if len(numbers) != 3:
        raise ValueError(f"not an instruction: {line!r}")
    return Instruction(*numbers)


def parse_instructions(text):
    """Return the instructions found among the lines of the text."""
    instructions = []
    for line in text.splitlines():
        try:
            instructions.append(parse_instruction(line))
        except ValueError:
            continue
    return instructions


def parse_crates(text):
    """Return the stacks keyed by number, each listed from bottom to top."""
    stacks = {}
    for line in text.splitlines():
        for column, start in enumerate(range(0, len(line), 4), start=1):
            cell = line[start:start + 4]
            if cell.startswith("[") and len(cell) > 1:
                stacks.setdefault(column, []).append(cell[1])
    for stack in stacks.values():
        stack.reverse()
    return stacks


def top_crates(stacks):
    """Return the top crate of every stack, in stack order."""
    return "".join(stacks[key][-1] for key in sorted(stacks))


def part1(text):
    """Top crates after moving crates one at a time."""
    stacks = parse_crates(text)
    for instruction in parse_instructions(text):
        instruction.move_one_by_one(stacks)
    return top_crates(stacks)


def part2(text):
    """Top crates after moving crates in groups."""
    stacks = parse_crates(text)
    for instruction in parse_instructions(text):
        instruction.move_together(stacks)
    return top_crates(stacks)