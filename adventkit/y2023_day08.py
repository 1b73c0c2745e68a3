"""Haunted wasteland: walking a left/right network of nodes."""

from math import lcm


def parse_input(text):
    """Return the direction string and the network as {node: (left, right)}."""
    lines = iter(text.splitlines())
    first = next(lines, None)
    if first is None:
        raise ValueError("missing directions")
    network = {}
    for line in lines:
        node, sep, targets = line.partition(" = ")
        if not sep:
            continue
        left, sep, right = targets.partition(", ")
        if not sep:
            raise ValueError(f"not a node: {line!r}")
        network[node.strip()] = (left.strip().lstrip("("), right.strip().rstrip(")"))
    return first.strip(), network


def _step(network, node, direction):
    if direction == "L":
        return network[node][0]
    if direction == "R":
        return network[node][1]
    raise ValueError(f"not a direction: {direction!r}")


def part1(text):
    """Steps needed to walk from AAA to ZZZ."""
    directions, network = parse_input(text)
    if not directions:
        raise ValueError("no directions")
    node = "AAA"
    steps = 0
    while True:
        node = _step(network, node, directions[steps % len(directions)])
        steps += 1
        if node == "ZZZ":
            return steps


def part2(text):
    """Steps until every walk from a node ending in A is on a node ending in Z."""
    directions, network = parse_input(text)
    if not directions:
        raise ValueError("no directions")
    walkers = [node for node in network if node.endswith("A")]
    if not walkers:
        raise ValueError("no starting nodes")
    arrivals = []
    steps = 0
    while walkers:
        direction = directions[steps % len(directions)]
        walkers = [_step(network, node, direction) for node in walkers]
        steps += 1
        arrived = [node for node in walkers if node.endswith("Z")]
        arrivals.extend(steps for _ in arrived)
        walkers = [node for node in walkers if not node.endswith("Z")]
    return lcm(*arrivals)