"""No space left on device: directory sizes from a terminal session."""

from pathlib import PurePosixPath

TOTAL_DISK_SPACE = 70_000_000
DISK_SPACE_REQUIRED = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000


def directory_sizes(text):
    """Return the total size of every directory that holds files, by path."""
    path = PurePosixPath()
    sizes = {}
    for line in text.splitlines():
        if line.startswith("$ cd "):
            target = line[len("$ cd "):]
            if target == "..":
                if not path.parents:
                    raise ValueError(f"cannot leave {path}")
                path = path.parent
            else:
                path = path / target
            continue
        tokens = line.split()
        if tokens and tokens[0].isascii() and tokens[0].isdigit():
            size = int(tokens[0])
            for directory in (path, *path.parents):
                sizes[directory] = sizes.get(directory, 0) + size
    return sizes


def part1(text):
    """Sum the sizes of directories no bigger than 100000."""
    return sum(
        size for size in directory_sizes(text).values() if size <= SMALL_DIRECTORY_LIMIT
    )


def part2(text):
    """Size of the smallest directory whose deletion frees enough space."""
    sizes = directory_sizes(text).values()
    used = max(sizes)
    return min(
        size
        for size in sizes
        if TOTAL_DISK_SPACE - (used - size) >= DISK_SPACE_REQUIRED
    )