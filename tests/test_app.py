import pygame
import pytest

from solong.app import (
    COLLECTIBLE_COLOR,
    EXIT_COLOR,
    FLOOR_COLOR,
    PLAYER_COLOR,
    TILE_SIZE,
    WALL_COLOR,
    direction_for_key,
    main,
    render,
)
from solong.game import Direction, Game
from solong.mapfile import parse_map

LINE_MAP = "11111\n1PEC1\n11111\n"


def _center(x, y):
    return (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)


def _color_at(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_w, Direction.UP),
        (pygame.K_UP, Direction.UP),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_d, Direction.RIGHT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ],
)
def test_direction_for_key(key, direction):
    assert direction_for_key(key) is direction


@pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q, pygame.K_SPACE])
def test_other_keys_have_no_direction(key):
    assert direction_for_key(key) is None


def test_render_draws_each_tile():
    game = Game.from_map(parse_map(LINE_MAP))
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    render(surface, game)
    assert _color_at(surface, _center(0, 0)) == WALL_COLOR
    assert _color_at(surface, _center(1, 1)) == PLAYER_COLOR
    assert _color_at(surface, _center(2, 1)) == EXIT_COLOR
    assert _color_at(surface, _center(3, 1)) == COLLECTIBLE_COLOR
    assert _color_at(surface, (3 * TILE_SIZE, TILE_SIZE)) == FLOOR_COLOR


def test_render_follows_player_and_collection():
    game = Game.from_map(parse_map(LINE_MAP))
    game.step(Direction.RIGHT)
    game.step(Direction.RIGHT)
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    render(surface, game)
    assert _color_at(surface, _center(1, 1)) == FLOOR_COLOR
    assert _color_at(surface, _center(3, 1)) == PLAYER_COLOR


def test_main_rejects_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nInvalid number of arguments!\n"


def test_main_rejects_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == "Invalid extension !!\n"


def test_main_rejects_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("111\n1P1\n111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map!\n"


def test_main_rejects_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map!\n"