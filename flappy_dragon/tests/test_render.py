"""
Tests for the character-grid console and the screen layouts.
"""

import os
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import random
import pygame
import pytest

from flappy_dragon.game.config import CELL_PX, BLACK, LIGHTBLUE4, SCREEN_WIDTH, SCREEN_HEIGHT
from flappy_dragon.game.console import Console, BASE_LAYER, SPRITE_LAYER, OVERLAY_LAYER
from flappy_dragon.game.obstacle import Obstacle
from flappy_dragon.game.render import draw
from flappy_dragon.game.state import Command, DragonGame, GameMode


@pytest.fixture(scope="module")
def console():
    pygame.font.init()
    return Console()


def cell_corner(console, layer, x, y):
    return tuple(console.layers[layer].get_at((x * CELL_PX, y * CELL_PX)))


def test_console_size(console):
    assert console.size_px == (SCREEN_WIDTH * CELL_PX, SCREEN_HEIGHT * CELL_PX)


def test_set_outside_grid_is_clipped(console):
    console.clear_all()
    console.set(-1, 0, (255, 0, 0), (255, 0, 0), "|")
    console.set(SCREEN_WIDTH, SCREEN_HEIGHT, (255, 0, 0), (255, 0, 0), "|")
    assert cell_corner(console, BASE_LAYER, 0, 0) == BLACK + (255,)


def test_print_right_ends_on_column(console):
    console.clear_all()
    console.print_right(10, 3, "abc", bg=(9, 9, 9))
    assert cell_corner(console, BASE_LAYER, 10, 3) == (9, 9, 9, 255)
    assert cell_corner(console, BASE_LAYER, 8, 3) == (9, 9, 9, 255)
    assert cell_corner(console, BASE_LAYER, 11, 3) == BLACK + (255,)
    assert cell_corner(console, BASE_LAYER, 7, 3) == BLACK + (255,)


@pytest.mark.parametrize("command", [None, Command.OPEN_SETTINGS, Command.PLAY])
def test_every_screen_draws(console, command):
    game = DragonGame(rng=random.Random(5))
    game.tick(0.0, command)
    draw(game.state, console)
    target = pygame.Surface(console.size_px)
    console.compose(target)


def test_wall_is_drawn_outside_the_gap(console):
    game = DragonGame(rng=random.Random(5))
    game.tick(0.0, Command.PLAY)
    s = game.state
    s.obstacle = Obstacle(x=s.player.x + 10, gap_center_y=25, size=10)
    draw(s, console)
    assert cell_corner(console, BASE_LAYER, 10, 3) == BLACK + (255,)
    assert cell_corner(console, BASE_LAYER, 10, 49) == BLACK + (255,)
    assert cell_corner(console, BASE_LAYER, 10, 25) == LIGHTBLUE4 + (255,)


def test_sprite_goes_on_its_own_layer(console):
    game = DragonGame(rng=random.Random(5))
    game.tick(0.0, Command.PLAY)
    sprite = pygame.Surface((8, 8), pygame.SRCALPHA)
    sprite.fill((255, 255, 0, 255))
    draw(game.state, console, [sprite])
    y = game.state.player.y
    centre = (int(1 * CELL_PX + CELL_PX / 2), int(y * CELL_PX + CELL_PX / 2))
    assert tuple(console.layers[SPRITE_LAYER].get_at(centre)) == (255, 255, 0, 255)


def test_dev_overlay_only_when_toggled(console):
    game = DragonGame(rng=random.Random(5))
    game.tick(0.0, Command.PLAY)
    draw(game.state, console)
    assert pygame.mask.from_surface(console.layers[OVERLAY_LAYER]).count() == 0

    game.tick(0.0, Command.TOGGLE_DEV_OVERLAY)
    assert game.state.mode is GameMode.PLAYING
    draw(game.state, console)
    assert pygame.mask.from_surface(console.layers[OVERLAY_LAYER]).count() > 0


@pytest.mark.parametrize("frame_count", [3, 6])
def test_sprite_animation_walks_every_frame(console, monkeypatch, frame_count):
    frames = [pygame.Surface((4, 4), pygame.SRCALPHA) for _ in range(frame_count)]
    ids = [id(f) for f in frames]
    drawn = []
    monkeypatch.setattr(console, "draw_sprite", lambda image, *a, **kw: drawn.append(ids.index(id(image))))

    game = DragonGame(rng=random.Random(5))
    game.tick(0.0, Command.PLAY)
    for _ in range(frame_count * 2):
        game.state.player.advance()
        draw(game.state, console, frames)

    assert drawn == [(k + 1) % frame_count for k in range(frame_count * 2)]
