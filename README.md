# solong

A small top-down tile game. You walk a character around a walled map,
pick up every collectible, and then step onto the exit to win.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
so_long maps/level.ber
```

The `so_long` command takes exactly one argument: the path to a map file
whose name is at least five characters long and ends in `.ber`. With any
other number of arguments it prints `Error` / `Invalid number of arguments!`;
with a bad file name it prints `Invalid extension !!`. A map that cannot be
read or fails validation prints `Error` / `Invalid map!`. In each of these
cases the command exits with status 1.

Controls:

| Key                | Action      |
|--------------------|-------------|
| `W` / Up arrow     | move up     |
| `S` / Down arrow   | move down   |
| `A` / Left arrow   | move left   |
| `D` / Right arrow  | move right  |
| `Esc`              | quit        |

Walls block movement. Every step that moves the player prints
`Moves: N`. Stepping onto the exit while holding every collectible prints
`You won in N moves!` and ends the game with status 0; stepping onto the
exit earlier just moves the player there. `Esc` quits with status 0,
closing the window quits with status 1.

## Map format

A map is a plain-text file, one row per line, built from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only if:

- the first line ends with a newline and every row has the same width as it
  (the last row may omit its newline; blank lines are not allowed);
- it is at most 76 columns wide and 37 rows tall;
- it is fully enclosed by walls;
- it uses no characters other than the five above;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- every collectible and the exit can be reached from the start.

Example:

```
1111111111
1P0C00C0E1
1111111111
```

## Using it as a library

```python
from solong.mapfile import read_map, MapError
from solong.game import Game, Direction

try:
    game_map = read_map("level.ber")
except MapError as exc:
    print("Invalid map:", exc)
else:
    game = Game.from_map(game_map)
    moved = game.step(Direction.RIGHT)
    print(moved, game.player, game.collected, game.moves, game.won)
```

`solong.mapfile`:

- `read_map(path)` reads a file and `parse_map(text)` parses text; both
  return a `GameMap` or raise `MapError`.
- `validate_walls(rows)`, `scan_tiles(rows)` (returning a `MapInfo` with the
  player start and collectible count) and `validate_playability(rows, info)`
  are the individual checks, each raising `MapError` on failure.
- `check_extension(path)` and `validate_arguments(argv)` check command-line
  input; the latter raises `UsageError`.
- `GameMap` holds the `tiles` (rows of `Tile`), `player`,
  `total_collectibles`, `width` and `height`, with `tile_at(x, y)` and
  `set_tile(x, y, tile)`.

`solong.game`:

- `Game.from_map(game_map)` starts a game on a copy of the map.
- `Game.move(dx, dy)` and `Game.step(direction)` return whether the player
  moved. Picking up a collectible turns its tile into floor. Once the game
  is won, no further moves are taken.

`solong.app`:

- `direction_for_key(key)` maps a pygame key code to a `Direction`.
- `render(surface, game)` draws the map and player onto a pygame surface.
- `run(game)` opens the window and plays; `main(argv=None)` is the
  `so_long` command.

## What it does not do

The game draws tiles as plain coloured shapes (32 pixels per tile); it does
not load image textures. It has no sound, no on-screen move counter (moves
are printed to standard output) and no saving of progress.

## Running the tests

```
pip install .[test]
pytest
```