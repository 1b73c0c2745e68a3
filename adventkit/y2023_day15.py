"""Lens library: the HASH algorithm and the boxes of lenses it fills."""

BOX_COUNT = 256


def parse_input(text):
    """Return the comma-separated steps of the initialisation sequence."""
    return text.strip().split(",")


def hash_label(label):
    """Return the HASH value of a string, in 0..255."""
    value = 0
    for byte in label.encode("utf-8"):
        value = ((value + byte) * 17) % BOX_COUNT
    return value


def part1(text):
    """Sum of the HASH values of every step."""
    return sum(hash_label(step) for step in parse_input(text))


def _split_step(step):
    end = 0
    while end < len(step) and step[end].isascii() and step[end].isalpha():
        end += 1
    return step[:end], step[end:end + 1], step[end + 1:]


def part2(text):
    """Total focusing power once every step has been applied."""
    boxes = [{} for _ in range(BOX_COUNT)]
    for step in parse_input(text):
        label, operation, value = _split_step(step)
        lenses = boxes[hash_label(label)]
        if operation == "=":
            lenses[label] = int(value)
        elif operation == "-":
            lenses.pop(label, None)
        else:
            raise ValueError(f"not a step: {step!r}")
    return sum(
        box_number * slot * focal
        for box_number, lenses in enumerate(boxes, start=1)
        for slot, focal in enumerate(lenses.values(), start=1)
    )