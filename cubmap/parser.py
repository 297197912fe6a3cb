"""Reading and validating a whole .cub file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Union

from cubmap.elements import Elements, validate_elements
from cubmap.mapgrid import GameMap, validate_map
from cubmap.util.lines import iter_lines

_BLANKS = " \t\r\f"
_PLAYERS = frozenset("NESW")
_CELLS = ("1", "0")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class CubFile:
    """A validated .cub file."""

    lines: list[str]
    map_start: int
    elements: Elements
    game_map: GameMap


def read_lines(path: PathLike) -> list[str]:
    """Return the lines of the file, each with its line ending.

    Raises OSError when the file cannot be opened and ValueError when it
    is empty.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
        lines = list(iter_lines(stream))
    if not lines:
        raise ValueError("File is empty.")
    return lines


def find_map_start(lines: Sequence[str]) -> int:
    """Index of the first map row, or the number of lines when there is none."""
    for index, line in enumerate(lines):
        stripped = line.lstrip(_BLANKS)
        if stripped[:1] in _CELLS:
            return index
        if stripped[:1] in _PLAYERS and stripped[1:2] in _CELLS:
            return index
    return len(lines)


def validate_file(lines: Sequence[str]) -> CubFile:
    """Validate the elements and the map; raises CubError on the first fault."""
    map_start = find_map_start(lines)
    elements = validate_elements(lines, map_start)
    game_map = validate_map(lines, map_start)
    return CubFile(list(lines), map_start, elements, game_map)


def parse_file(path: PathLike) -> CubFile:
    """Read and validate the .cub file at ``path``."""
    return validate_file(read_lines(path))