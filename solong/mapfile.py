"""Map files: command-line checks, parsing and validation of ``.ber`` maps."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

MAP_EXTENSION = ".ber"
MAX_WIDTH = 76
MAX_HEIGHT = 37


class Tile(str, Enum):
    """A single cell of the map, keyed by its character in the file."""

    WALL = "1"
    FLOOR = "0"
    PLAYER = "P"
    EXIT = "E"
    COLLECTIBLE = "C"


class MapError(ValueError):
    """Raised when a map file cannot be read or is not a valid map."""


class UsageError(ValueError):
    """Raised when the program is started with bad arguments."""


@dataclass(frozen=True)
class MapInfo:
    """What a scan of the map found: the player start and the collectible count."""

    player: tuple[int, int]
    collectibles: int


@dataclass
class GameMap:
    """A validated, rectangular map."""

    tiles: list[list[Tile]]
    player: tuple[int, int]
    total_collectibles: int

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def height(self) -> int:
        return len(self.tiles)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile in column ``x`` of row ``y``."""
        self._check_bounds(x, y)
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Replace the tile in column ``x`` of row ``y``."""
        self._check_bounds(x, y)
        self.tiles[y][x] = Tile(tile)

    def __str__(self) -> str:
        return "\n".join("".join(tile.value for tile in row) for row in self.tiles)


def check_extension(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` names a map file: at least five characters ending in ``.ber``."""
    name = os.fspath(path)
    return len(name) >= len(MAP_EXTENSION) + 1 and name.endswith(MAP_EXTENSION)


def validate_arguments(argv: Sequence[str]) -> str:
    """Check the arguments that follow the program name and return the map path."""
    args = list(argv)
    if len(args) != 1:
        raise UsageError("Error\nInvalid number of arguments!")
    if not check_extension(args[0]):
        raise UsageError("Invalid extension !!")
    return args[0]


def _split_lines(text: str) -> list[str]:
    """Split on newlines only, keeping each newline with its line."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _measure(text: str) -> list[str]:
    lines = _split_lines(text)
    if not lines:
        raise MapError("map file is empty")
    # The width is taken from the first line, which must end with a newline.
    width = len(lines[0]) - 1
    rows = []
    for number, line in enumerate(lines, start=1):
        content = line[:-1] if line.endswith("\n") else line
        if len(content) != width:
            raise MapError(f"line {number} does not match the map width {width}")
        rows.append(content)
    if width <= 0:
        raise MapError("map has no columns")
    return rows


def validate_walls(rows: Sequence[str]) -> None:
    """Require the map to be closed by walls on all four sides."""
    if not rows or not rows[0]:
        raise MapError("map is empty")
    wall = Tile.WALL.value
    if any(ch != wall for ch in rows[0]) or any(ch != wall for ch in rows[-1]):
        raise MapError("map is not closed by walls at the top and bottom")
    if any(row[0] != wall or row[-1] != wall for row in rows):
        raise MapError("map is not closed by walls at the sides")


def scan_tiles(rows: Sequence[str]) -> MapInfo:
    """Check every character and count the player starts, exits and collectibles."""
    players = 0
    player = (0, 0)
    exits = 0
    collectibles = 0
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            try:
                tile = Tile(ch)
            except ValueError:
                raise MapError(f"invalid character {ch!r} at ({x}, {y})") from None
            if tile is Tile.PLAYER:
                players += 1
                player = (x, y)
            elif tile is Tile.EXIT:
                exits += 1
            elif tile is Tile.COLLECTIBLE:
                collectibles += 1
    if players != 1:
        raise MapError(f"map must have exactly one player start, found {players}")
    if exits != 1:
        raise MapError(f"map must have exactly one exit, found {exits}")
    if collectibles == 0:
        raise MapError("map must have at least one collectible")
    return MapInfo(player=player, collectibles=collectibles)


def validate_playability(rows: Sequence[str], info: MapInfo) -> None:
    """Require every collectible and the exit to be reachable from the player start."""
    wall = Tile.WALL.value
    seen = {info.player}
    queue = deque([info.player])
    reached_collectibles = 0
    reached_exit = False
    while queue:
        x, y = queue.popleft()
        ch = rows[y][x]
        if ch == Tile.COLLECTIBLE.value:
            reached_collectibles += 1
        elif ch == Tile.EXIT.value:
            reached_exit = True
        for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
            if (nx, ny) in seen:
                continue
            if not (0 <= ny < len(rows) and 0 <= nx < len(rows[ny])):
                continue
            if rows[ny][nx] == wall:
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    if reached_collectibles != info.collectibles:
        raise MapError("not every collectible can be reached")
    if not reached_exit:
        raise MapError("the exit cannot be reached")


def parse_map(text: str) -> GameMap:
    """Parse and validate the contents of a map file."""
    rows = _measure(text)
    height, width = len(rows), len(rows[0])
    if height > MAX_HEIGHT or width > MAX_WIDTH:
        raise MapError(
            f"map is {width}x{height}, larger than {MAX_WIDTH}x{MAX_HEIGHT}"
        )
    validate_walls(rows)
    info = scan_tiles(rows)
    validate_playability(rows, info)
    tiles = [[Tile(ch) for ch in row] for row in rows]
    return GameMap(tiles=tiles, player=info.player, total_collectibles=info.collectibles)


def read_map(path: str | os.PathLike[str]) -> GameMap:
    """Read a map file from disk and validate it."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(f"cannot read map file {os.fspath(path)}: {exc}") from exc
    return parse_map(data.decode("latin-1"))