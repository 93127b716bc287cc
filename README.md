# farmrun

A small tile-based puzzle game. The farmer starts at the house. The goal is to
collect every carrot on the map and then reach the pig.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
farmrun path/to/level.ber
```

The game opens a window the size of the map (48 pixels per tile). The arrow
keys move the farmer one tile; walls cannot be entered. Each move that succeeds
adds one to the move counter, which is drawn in the window. After every key
press a status line with the move count and the carrots still left is written
to the terminal. Walking onto a carrot collects it. Once every carrot is
collected, stepping onto the pig ends the game and a "YOU WIN!!!" message is
shown; further moves are ignored. Escape or closing the window quits.

When the argument is missing, is not a `.ber` file, or names a map that fails
the checks below, the message is printed and the command exits with status 1.

### Images

The images are read from an `assets` directory in the current working
directory, which must hold these files:

`Ground.xpm`, `Tree.xpm`, `Player.xpm`, `Player_start.xpm`, `Carrot_big.xpm`,
`House.xpm`, `Pig.xpm`.

If one of them cannot be loaded, the command prints which image failed and
exits with status 1.

## Map files

A map is a plain text file with the `.ber` extension. Each line is one row of
tiles:

| Character | Meaning                           |
|-----------|-----------------------------------|
| `1`       | tree (wall)                       |
| `0`       | open ground                       |
| `P`       | house, where the farmer starts    |
| `C`       | carrot                            |
| `E`       | pig                               |

Example (the file ends with a newline):

```
1111111
1P0C0E1
1111111
```

The map width is taken from the last line less its newline, so every line,
the last one included, should end with a newline.

A map is rejected with an error message when:

- the first row is shorter than four tiles;
- it has no carrots;
- it has no house, or more than one;
- it holds any other character;
- its rows differ in length;
- its border is not made entirely of trees;
- a carrot cannot be reached from the house, or the number of pigs reachable
  from it is not exactly one.

## Using it as a library

The map rules can be used without opening a window:

```python
from farmrun.game_map import parse_map, MapError

game_map = parse_map("1111\n1PC1\n1E01\n1111\n")
game_map.check()          # raises MapError on a bad map
game_map.validate_path()  # raises MapError if something is unreachable
```

- `farmrun.game_map`: `check_map_path`, `parse_map`, `read_map` and
  `load_map` (read, check and validate a `.ber` file in one call), the
  `GameMap` class and `MapError`.
- `farmrun.movement`: `Game` applies `Key` presses to a loaded map with
  `move`, and `step` collects carrots and detects the win.
- `farmrun.render`: `Renderer` draws a game onto a pygame surface;
  `load_images` loads the images from a directory.
- `farmrun.cli`: `main`, `handle_input` and `status_line`.

The package also carries small helpers used by the game or usable on their
own: `farmrun.chars` (ASCII classification, `atoi`, `itoa`),
`farmrun.strutil` (string helpers), `farmrun.memory` (bytearray helpers),
`farmrun.linkedlist` (`LinkedList`), `farmrun.printf` (`sprintf`, `printf`)
and `farmrun.lines` (`LineReader`, chunked line reading from a descriptor or
binary stream).

## What it does not do

No images are included: the game cannot be played until an `assets`
directory with the files listed above is provided. There is no level editor
and no map files are shipped.