import pytest

from adventkit.y2025_day04 import parse_grid, part1, part2, removable

FULL = "@@@\n@@@\n@@@"
MIXED = "..@@.@@@@.\n@@@.@.@.@@\n@@@@@.@.@@\n@.@@@@..@.\n@@.@@@@.@@"


def test_parse_grid_rows():
    assert parse_grid("@.\n.@") == [["@", "."], [".", "@"]]


def test_full_square_corners_reachable():
    assert part1(FULL) == 4


def test_full_square_eventually_cleared():
    assert part2(FULL) == FULL.count("@")


def test_lone_roll_reachable():
    text = "...\n.@.\n..."
    assert part1(text) == text.count("@")


def test_no_rolls():
    assert part1("...\n...") == 0


def test_removable_cells_hold_rolls():
    grid = parse_grid(MIXED)
    cells = removable(grid)
    assert cells
    assert all(grid[i][j] == "@" for i, j in cells)


def test_part2_bounds():
    assert part1(MIXED) <= part2(MIXED) <= MIXED.count("@")


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        part1("")