"""The map grid of a .cub file: extraction and validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from cubmap.elements import CubError, remove_whitespace

_BLANKS = " \t\r\f"
_PLAYERS = frozenset("NESW")
_ROW_START = frozenset("10NESW\n")
_MAP_CHARS = frozenset(" 10NESW\n")


@dataclass
class GameMap:
    """Map rows with their dimensions and the player's start, once located."""

    rows: list[str]
    width: int
    height: int
    player: Optional[tuple[int, int]] = None
    direction: Optional[str] = None


def map_height(lines: Sequence[str], start: int) -> int:
    """Number of consecutive map rows from ``start``.

    A row ends the map when it is empty, or when its first non-blank
    character is not a wall, floor, player or newline.
    """
    height = 0
    for line in lines[start:]:
        if line.startswith("\n"):
            break
        if line.lstrip(_BLANKS)[:1] not in _ROW_START:
            break
        height += 1
    return height


def map_width(lines: Sequence[str], start: int) -> int:
    """Length of the longest line from ``start`` to the end of the file."""
    return max((len(line) for line in lines[start:]), default=0)


def create_map(lines: Sequence[str], start: int) -> GameMap:
    """Build a GameMap from the rows starting at ``start``."""
    height = map_height(lines, start)
    return GameMap(
        rows=list(lines[start:start + height]),
        width=map_width(lines, start),
        height=height,
    )


def check_map_characters(lines: Sequence[str], start: int) -> None:
    """Raise CubError for any character that may not appear in the map."""
    for line in lines[start:]:
        if line.startswith("\n"):
            break
        for ch in line:
            if ch not in _MAP_CHARS:
                raise CubError(f"Invalid element on the map : '{ch}'.")


def check_map_is_last(lines: Sequence[str], start: int, height: int) -> None:
    """Raise CubError when anything but blank lines follows the map."""
    for line in lines[start + height:]:
        cleaned = remove_whitespace(line)
        if cleaned and not cleaned.startswith("\n"):
            raise CubError("Map is not at the end of the file.")


def locate_player(game_map: GameMap) -> Optional[tuple[int, int]]:
    """Find the single player, store it on ``game_map`` and return (x, y).

    Returns None when there is no player; raises CubError for more than one.
    """
    found: Optional[tuple[int, int]] = None
    direction: Optional[str] = None
    for y, row in enumerate(game_map.rows):
        for x, ch in enumerate(row):
            if ch in _PLAYERS:
                if found is not None:
                    raise CubError("Invalid map : too many players.")
                found, direction = (x, y), ch
    game_map.player = found
    game_map.direction = direction
    return found


def is_closed(game_map: GameMap) -> bool:
    """True when walls enclose every cell reachable from the player."""
    if game_map.player is None:
        return False
    grid = [list(row) for row in game_map.rows]
    stack = [game_map.player]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < game_map.width and 0 <= y < game_map.height):
            return False
        row = grid[y]
        if x >= len(row) or row[x] == " ":
            return False
        if row[x] == "1":
            continue
        row[x] = "1"
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return True


def validate_map(lines: Sequence[str], start: int) -> GameMap:
    """Extract the map at ``start`` and check every map rule."""
    check_map_characters(lines, start)
    game_map = create_map(lines, start)
    check_map_is_last(lines, start, game_map.height)
    if locate_player(game_map) is None:
        raise CubError("Invalid map : no players.")
    if not is_closed(game_map):
        raise CubError("Map is not closed.")
    return game_map