"""Texture and colour elements that precede the map in a .cub file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from cubmap.util.chars import is_digit

_BLANKS = frozenset(" \t\r\f")

# Identifier, attribute and the number of identifier characters to skip.
_ELEMENTS = (
    ("NO", "north", 2),
    ("EA", "east", 2),
    ("SO", "south", 2),
    ("WE", "west", 2),
    ("C", "ceiling", 1),
    ("F", "floor", 1),
)
_BY_LETTER = {ident[0]: (attr, skip) for ident, attr, skip in _ELEMENTS}
_TEXTURE_IDENTIFIERS = frozenset(ident for ident, _, skip in _ELEMENTS if skip == 2)


class CubError(Exception):
    """A .cub file breaks one of the format's rules."""


@dataclass
class Elements:
    """Raw values of the six elements, as they follow their identifiers."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None
    ceiling: Optional[str] = None
    floor: Optional[str] = None

    def missing(self) -> list[str]:
        """Identifiers of the elements that have not been set."""
        return [ident for ident, attr, _ in _ELEMENTS if getattr(self, attr) is None]


def remove_whitespace(text: str) -> str:
    """Drop spaces, tabs, carriage returns and form feeds; newlines stay."""
    return "".join(ch for ch in text if ch not in _BLANKS)


def is_element_line(line: str) -> bool:
    """True when ``line`` starts with F, C, NO, EA, SO or WE."""
    if line[:1] in ("F", "C"):
        return True
    return line[:2] in _TEXTURE_IDENTIFIERS


def parse_elements(lines: Sequence[str], map_start: int) -> Elements:
    """Collect the elements from the lines before ``map_start``.

    Blank lines and lines starting with a digit are skipped. Raises
    CubError for an unknown line or a repeated element.
    """
    elements = Elements()
    for raw in lines[:map_start]:
        line = remove_whitespace(raw)
        if not line or is_digit(line[0]) or line[0] == "\n":
            continue
        if not is_element_line(line):
            raise CubError(f"Invalid line in file. Line is {line.rstrip(chr(10))}")
        attr, skip = _BY_LETTER[line[0]]
        if getattr(elements, attr) is not None:
            raise CubError("Duplicate element.")
        setattr(elements, attr, line[skip:])
    return elements


def is_valid_rgb_format(text: str) -> bool:
    """True for three comma-separated groups of at most three digits.

    Checking stops at the first newline.
    """
    groups = 1
    digits = 0
    for index, ch in enumerate(text):
        if ch == "\n":
            break
        if is_digit(ch) and digits < 3:
            digits += 1
        elif ch == "," and index != 0 and groups < 3:
            digits = 0
            groups += 1
        else:
            return False
    return groups == 3


def is_valid_rgb_code(text: str) -> bool:
    """True when every separated value is present and at most 255."""
    index = 0
    while index < len(text):
        start = index
        while index < len(text) and is_digit(text[index]):
            index += 1
        value = text[start:index]
        if not value or int(value) > 255:
            return False
        if index < len(text):
            index += 1
    return True


def check_colors(elements: Elements) -> None:
    """Raise CubError unless the floor and ceiling colours are valid."""
    floor = elements.floor or ""
    ceiling = elements.ceiling or ""
    if not is_valid_rgb_format(floor):
        raise CubError("invalid floor format")
    if not is_valid_rgb_format(ceiling):
        raise CubError("invalid ceiling format")
    if not is_valid_rgb_code(floor):
        raise CubError("invalid floor code")
    if not is_valid_rgb_code(ceiling):
        raise CubError("invalid ceiling code")


def validate_elements(lines: Sequence[str], map_start: int) -> Elements:
    """Parse the elements and check that all are present and the colours valid."""
    elements = parse_elements(lines, map_start)
    if elements.missing():
        raise CubError("Some element types are missing or placed after the map.")
    check_colors(elements)
    return elements