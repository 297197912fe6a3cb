# cubmap

`cubmap` reads a `.cub` scene description file and checks that it is
valid. A scene like this is the input for a simple raycasting game:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

## What is checked

- The four wall textures (`NO`, `SO`, `WE`, `EA`) and the floor (`F`) and
  ceiling (`C`) colours each appear exactly once, before the map. Any
  other non-blank line before the map is an error.
- Each colour is three comma-separated groups of at most three digits,
  each value at most 255.
- The map uses only `0`, `1`, spaces and one player start (`N`, `S`, `E`
  or `W`).
- Nothing but blank lines follows the map.
- The map is closed: from the player's start, no space and no edge of the
  map can be reached without passing a wall.

## Command line

```
pip install .
cubmap maps/level.cub
```

The command expects exactly one argument, a file name of at least five
characters that ends in `.cub`. It prints `it worked!` when the file is
valid. When the file breaks one of the rules above, it prints the reason
and exits with status 1. Wrong arguments, a file that cannot be opened
and an empty file each print a message and exit with status 0.

## Library

```python
from cubmap.parser import parse_file
from cubmap.elements import CubError

try:
    cub = parse_file("maps/level.cub")
except CubError as err:
    print(f"invalid map: {err}")
```

`parse_file` raises `OSError` when the file cannot be opened and
`ValueError` when it is empty. It returns a `CubFile` with:

- `lines`: the file's lines, each with its line ending;
- `map_start`: the index of the first map row;
- `elements`: an `Elements` whose `north`, `south`, `west`, `east`,
  `ceiling` and `floor` hold the raw text after each identifier, with
  blanks removed (a trailing newline is kept);
- `game_map`: a `GameMap` with the map `rows`, its `width` and `height`,
  the player's position as `player` (an `(x, y)` tuple) and its facing as
  `direction`.

The steps can also be called on their own:

- `cubmap.parser`: `read_lines`, `find_map_start`, `validate_file`;
- `cubmap.elements`: `parse_elements`, `validate_elements`,
  `check_colors`, `is_valid_rgb_format`, `is_valid_rgb_code`,
  `remove_whitespace`, `is_element_line`;
- `cubmap.mapgrid`: `create_map`, `map_height`, `map_width`,
  `check_map_characters`, `check_map_is_last`, `locate_player`,
  `is_closed`, `validate_map`.

`cubmap.util` holds small helpers the package is built on: character
tests and integer conversion (`chars`), byte-buffer operations
(`memory`), string helpers (`strings`), stream writers (`output`), a
singly linked list (`linkedlist`) and a buffered line reader, `LineReader`
and `iter_lines` (`lines`).

## What it does not do

`cubmap` only validates scene files. It opens no window, renders
nothing and runs no game. It does not check that the texture files named
by `NO`, `SO`, `WE` and `EA` exist, and it does not turn the colour
values into numbers.

## Running the tests

```
pip install .[test]
pytest
```