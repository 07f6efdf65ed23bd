"""The playable window: key handling, drawing and the command entry point."""

from __future__ import annotations

import os
import sys
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Direction, Game  # noqa: E402
from solong.mapfile import MapError, Tile, UsageError, read_map, validate_arguments  # noqa: E402

TILE_SIZE = 32
WINDOW_TITLE = "so_long"
FRAME_RATE = 60

FLOOR_COLOR = (214, 196, 150)
WALL_COLOR = (70, 60, 55)
COLLECTIBLE_COLOR = (220, 30, 60)
EXIT_COLOR = (120, 70, 30)
PLAYER_COLOR = (40, 40, 40)

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """Return the direction a key moves the player, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def _draw_tile(surface: pygame.Surface, tile: Tile, x: int, y: int) -> None:
    rect = pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
    surface.fill(FLOOR_COLOR, rect)
    if tile is Tile.WALL:
        surface.fill(WALL_COLOR, rect)
    elif tile is Tile.COLLECTIBLE:
        pygame.draw.circle(surface, COLLECTIBLE_COLOR, rect.center, TILE_SIZE // 4)
    elif tile is Tile.EXIT:
        surface.fill(EXIT_COLOR, rect.inflate(-TILE_SIZE // 4, -TILE_SIZE // 4))


def render(surface: pygame.Surface, game: Game) -> None:
    """Draw the whole map and the player onto ``surface``."""
    for y, row in enumerate(game.map.tiles):
        for x, tile in enumerate(row):
            _draw_tile(surface, tile, x, y)
    px, py = game.player
    center = (px * TILE_SIZE + TILE_SIZE // 2, py * TILE_SIZE + TILE_SIZE // 2)
    pygame.draw.circle(surface, PLAYER_COLOR, center, TILE_SIZE // 3)


def run(game: Game) -> int:
    """Open the window and play until the game ends; return the exit status."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 1
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return 0
                direction = direction_for_key(event.key)
                if direction is None or not game.step(direction):
                    continue
                if game.won:
                    print(f"You won in {game.moves} moves!", flush=True)
                    return 0
                print(f"Moves: {game.moves}", flush=True)
            render(screen, game)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments, load the map and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = validate_arguments(args)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        game_map = read_map(path)
    except MapError:
        print("Error\nInvalid map!")
        return 1
    try:
        return run(Game.from_map(game_map))
    except pygame.error as exc:
        print(f"Error\n{exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())