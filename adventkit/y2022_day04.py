"""Camp cleanup: overlapping section assignments."""


def _split_pair(text, separator):
    left, sep, right = text.partition(separator)
    if not sep:
        raise ValueError(f"expected {separator!r} in {text!r}")
    return left, right


def parse_pairs(text):
    """Return (a, b, c, d) for each line of the form 'a-b,c-d'."""
    pairs = []
    for line in text.splitlines():
        first, second = _split_pair(line, ",")
        a, b = _split_pair(first, "-")
        c, d = _split_pair(second, "-")
        pairs.append((int(a), int(b), int(c), int(d)))
    return pairs


def _covers(outer_start, outer_end, inner_start, inner_end):
    """Whether every value of the half-open inner range lies in the outer one."""
    return inner_start >= inner_end or (
        outer_start <= inner_start and inner_end <= outer_end
    )


def _fully_contained(a, b, c, d):
    if c > b or a > d:
        return False
    if b - a > d - c:
        return _covers(a, b, c, d)
    return _covers(c, d, a, b)


def part1(text):
    """Count pairs where one assignment contains the other."""
    return sum(1 for pair in parse_pairs(text) if _fully_contained(*pair))


def part2(text):
    """Count pairs whose assignments overlap at all."""
    return sum(1 for a, b, c, d in parse_pairs(text) if c <= b and a <= d)