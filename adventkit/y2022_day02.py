"""Rock paper scissors strategy guide scoring."""


def _columns(line):
    """Return the opponent and second column as 0..2, or None without a space."""
    opponent, sep, second = line.partition(" ")
    if not sep:
        return None
    return ord(opponent[0]) - ord("A"), ord(second[0]) - ord("X")


def _score_as_shape(line):
    columns = _columns(line)
    if columns is None:
        return 0
    opponent, mine = columns
    difference = opponent - mine
    if difference in (-2, 1):
        outcome = 0
    elif difference == 0:
        outcome = 3
    else:
        outcome = 6
    return mine + 1 + outcome


def _score_as_outcome(line):
    columns = _columns(line)
    if columns is None:
        return 0
    opponent, outcome = columns
    total = opponent + outcome
    shape = {0: 3, 4: 1}.get(total, total)
    return outcome * 3 + shape


def part1(text):
    """Score the guide reading the second column as the shape to play."""
    return sum(_score_as_shape(line) for line in text.splitlines())


def part2(text):
    """Score the guide reading the second column as the required outcome."""
    return sum(_score_as_outcome(line) for line in text.splitlines())