import pytest

from adventkit.y2023_day14 import (
    Direction,
    Shape,
    ShapeKind,
    north_load,
    parse_input,
    part1,
    part2,
    tilt,
)

SAMPLE = "\n".join(
    [
        "O....#....",
        "O.OO#....#",
        ".....##...",
        "OO.#O....O",
        ".O.....O#.",
        "O.#..O.#.#",
        "..O..#O..O",
        ".......O..",
        "#....###..",
        "#OO..#....",
    ]
)


def test_part1_sample():
    assert part1(SAMPLE) == 136


def test_part2_sample():
    assert part2(SAMPLE) == 64


def test_parse_input():
    assert parse_input(".O\n#.") == [
        Shape(ShapeKind.ROUND, 1, 0),
        Shape(ShapeKind.CUBE, 0, 1),
    ]


@pytest.mark.parametrize(
    "text, direction, expected",
    [
        (".\nO", Direction.NORTH, (0, 0)),
        ("O\n.", Direction.SOUTH, (0, 1)),
        ("O..", Direction.EAST, (2, 0)),
        ("..O", Direction.WEST, (0, 0)),
    ],
)
def test_single_rock_rolls_to_edge(text, direction, expected):
    lines = text.splitlines()
    (rock,) = tilt(parse_input(text), direction, len(lines[0]), len(lines))
    assert (rock.x, rock.y) == expected


def test_rock_stops_against_cube():
    moved = tilt(parse_input("#..O"), Direction.WEST, 4, 1)
    rounds = [shape for shape in moved if shape.kind is ShapeKind.ROUND]
    assert rounds == [Shape(ShapeKind.ROUND, 1, 0)]


@pytest.mark.parametrize("direction", list(Direction))
def test_tilt_keeps_cubes_and_rock_count(direction):
    shapes = parse_input(SAMPLE)
    moved = tilt(shapes, direction, 10, 10)
    cubes = {shape for shape in shapes if shape.kind is ShapeKind.CUBE}
    assert {shape for shape in moved if shape.kind is ShapeKind.CUBE} == cubes
    assert len(set(moved)) == len(shapes)


def test_north_load_matches_part1():
    moved = tilt(parse_input(SAMPLE), Direction.NORTH, 10, 10)
    assert north_load(moved, 10) == part1(SAMPLE)


def test_part2_empty_rejected():
    with pytest.raises(ValueError):
        part2("")