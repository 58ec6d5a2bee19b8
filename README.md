# berlint

`berlint` checks tile maps written in the `.ber` format. This is the plain-text
layout used by small 2D maze games. It tells you whether a map passes the
format's rules.

## The map format

A map is a text file made of rows of single-character tiles:

| Tile | Meaning       |
|------|---------------|
| `1`  | wall          |
| `0`  | empty floor   |
| `C`  | collectible   |
| `E`  | exit          |
| `P`  | player start  |

A map is valid when all of the following hold:

- Every row has the same length.
- There are no characters other than `0`, `1`, `C`, `E` and `P`.
- There is exactly one exit `E`.
- There is exactly one start `P`.
- There is at least one collectible `C`.
- The map is closed by walls. The first and last rows are all `1`, and every
  row in between starts and ends with `1`.

Rows are taken from the file split on newlines, with empty rows dropped. The
wall check counts every line of the file, blank lines included, so a map with
blank lines in it is rejected. Files are read as Latin-1.

Here is a valid map:

```
1111111
1P0C0E1
1111111
```

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

```
berlint map.ber
```

The command takes exactly one argument, and that argument must be `map.ber`
exactly.

- If a file of that name does not exist, it is created, empty and read-only.
- If the argument is a different name, or the map breaks any rule above,
  `Error` is written to standard error and the exit status is 1.
- A valid map produces no output and exit status 0.
- With no argument, or with more than one, the command prints nothing and
  exits with status 0.

## Library use

```python
from berlint.validate import check_map_file, is_map_valid

check_map_file("map.ber")

rows = ["1111111", "1P0C0E1", "1111111"]
is_map_valid(rows, len(rows))
```

`berlint.validate` also exposes the single rules. You can use them to report
which rule a map fails:

- `lines_same_length`
- `has_foreign_chars`
- `components_correct`
- `count_char`
- `is_surrounded_by_walls`
- `has_only_walls`
- `ends_with_wall`

`berlint.reader` handles the input files:

- `read_map_lines` reads the rows of a map from an open text stream.
- `iter_lines` yields the lines of a stream, reading it in chunks.
- `count_lines` counts the lines of a file.

The package also carries small helper modules. They follow C-string rules,
where text ends at the first NUL:

- `berlint.chars`: character classes and case conversion.
- `berlint.strings`: `strlen`, `strchr`, `strcmp`, `atoi`, `substr` and others.
- `berlint.transform`: `strjoin`, `strtrim`, `split`, `itoa`, `strmapi` and
  `striteri`.
- `berlint.memory`: `memset`, `memcpy`, `memcmp`, `calloc` and others, working
  on byte buffers.
- `berlint.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing to
  a text stream.

## What it does not do

`berlint` only checks a map's rows, tiles, counts and border. It does not check
that the player can actually reach every collectible and the exit. It has no
game, window or rendering of any kind.