"""Validation of rectangular tile maps.

A map is a list of lines over the tile set ``0`` (floor), ``1`` (wall),
``E`` (exit), ``C`` (collectible) and ``P`` (player start).
"""

from __future__ import annotations

import os
from typing import Sequence

from berlint.reader import count_lines, read_map_lines

TILES = "01ECP"
COMPONENTS = "10ECP"
WALL = "1"


def has_only_walls(line: str) -> bool:
    """True when every character of *line* is a wall; an empty line counts."""
    return all(char == WALL for char in line)


def ends_with_wall(line: str) -> bool:
    """True when the last character of *line* is a wall."""
    return line.endswith(WALL)


def is_surrounded_by_walls(lines: Sequence[str], line_count: int) -> bool:
    """Check the border of the first *line_count* lines.

    The first and last of them must be walls only, and every line between
    them must start and end with a wall. A *line_count* that does not fit
    within *lines* means the map cannot be closed, and gives False.
    """
    if line_count < 1 or line_count > len(lines):
        return False
    if not has_only_walls(lines[0]) or not has_only_walls(lines[line_count - 1]):
        return False
    return all(
        line.startswith(WALL) and ends_with_wall(line)
        for line in lines[1 : line_count - 1]
    )


def has_foreign_chars(lines: Sequence[str]) -> bool:
    """True when any line holds a character outside the tile set."""
    allowed = set(TILES)
    return any(not set(line) <= allowed for line in lines)


def lines_same_length(lines: Sequence[str]) -> bool:
    """True when all lines are as long as the first one."""
    return len({len(line) for line in lines}) <= 1


def is_component_missing(lines: Sequence[str]) -> bool:
    """Report whether the last component of :data:`COMPONENTS` is absent.

    Only the final component, the player start ``P``, decides the result;
    the earlier ones are looked up but do not affect it.
    """
    present = False
    for component in COMPONENTS:
        present = any(component in line for line in lines)
    return not present


def count_char(lines: Sequence[str], char: str) -> int:
    """Total number of occurrences of *char* over all lines."""
    return sum(line.count(char) for line in lines)


def components_correct(lines: Sequence[str]) -> bool:
    """Exactly one exit, at least one collectible and exactly one player start."""
    if is_component_missing(lines):
        return False
    return (
        count_char(lines, "E") == 1
        and count_char(lines, "C") >= 1
        and count_char(lines, "P") == 1
    )


def is_map_valid(lines: Sequence[str], line_count: int) -> bool:
    """Run every check on *lines*, *line_count* being the file's line count."""
    return (
        lines_same_length(lines)
        and not has_foreign_chars(lines)
        and components_correct(lines)
        and is_surrounded_by_walls(lines, line_count)
    )


def check_map_file(path) -> bool:
    """Validate the map stored at *path*, creating an empty file if missing."""
    line_count = count_lines(path)
    with open(os.fspath(path), encoding="latin-1", newline="") as stream:
        lines = read_map_lines(stream)
    return is_map_valid(lines, line_count)