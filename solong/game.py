"""Game state: the player's position, moves, collected items and the win."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from solong.mapfile import GameMap, Tile


class Direction(Enum):
    """A step of one tile on the map."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class Game:
    """A game being played on a validated map."""

    map: GameMap
    player: tuple[int, int]
    total_collectibles: int
    collected: int = 0
    moves: int = 0
    won: bool = False

    @classmethod
    def from_map(cls, game_map: GameMap) -> Game:
        """Start a game on a copy of ``game_map``, leaving the original untouched."""
        board = GameMap(
            tiles=[list(row) for row in game_map.tiles],
            player=game_map.player,
            total_collectibles=game_map.total_collectibles,
        )
        return cls(
            map=board,
            player=game_map.player,
            total_collectibles=game_map.total_collectibles,
        )

    def _is_open(self, x: int, y: int) -> bool:
        if not (0 <= x < self.map.width and 0 <= y < self.map.height):
            return False
        return self.map.tile_at(x, y) is not Tile.WALL

    def move(self, dx: int, dy: int) -> bool:
        """Move the player by ``(dx, dy)``; return whether the player moved.

        Stepping on a collectible picks it up. Stepping on the exit once every
        collectible is held wins the game; after that no move is taken.
        """
        if self.won:
            return False
        x, y = self.player
        nx, ny = x + dx, y + dy
        if not self._is_open(nx, ny):
            return False
        tile = self.map.tile_at(nx, ny)
        if tile is Tile.COLLECTIBLE:
            self.collected += 1
            self.map.set_tile(nx, ny, Tile.FLOOR)
        elif tile is Tile.EXIT and self.collected == self.total_collectibles:
            self.won = True
        self.player = (nx, ny)
        self.moves += 1
        return True

    def step(self, direction: Direction) -> bool:
        """Move the player one tile in ``direction``."""
        return self.move(direction.dx, direction.dy)