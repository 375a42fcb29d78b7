# flappy_dragon/game/render.py
from __future__ import annotations
from typing import List, Optional
import pygame
from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_SCREEN_X, SPRITE_SCALE, SPRITE_TILT_DEG,
    BLACK, YELLOW, RED, CYAN, MAGENTA, LIGHTBLUE4
)
from .console import Console, BASE_LAYER, SPRITE_LAYER, OVERLAY_LAYER
from .obstacle import Obstacle
from .player import Player
from .state import GameMode, State


def draw(state: State, console: Console, sprites: Optional[List[pygame.Surface]] = None):
    """Draw the whole frame for the current mode onto the console layers."""
    console.clear_all()
    mode = state.mode
    if mode is GameMode.MENU:
        _draw_menu(console)
    elif mode is GameMode.END:
        _draw_dead(state, console)
    elif mode is GameMode.SETTINGS:
        _draw_settings(state, console)
    else:
        _draw_play(state, console, sprites or [])


def _draw_menu(console: Console):
    console.print_centered(5, "Your dragon awaits")
    console.print_centered(8, "(P) Play")
    console.print_centered(9, "(Q) Quit")
    console.print_centered(10, "(S) Settings")


def _draw_dead(state: State, console: Console):
    console.print_centered(5, "GAME OVER")
    console.print_centered(6, f"Score: {state.score}")
    console.print_centered(8, "(P) Play")
    console.print_centered(9, "(Q) Quit")
    console.print_centered(10, "(S) Settings")
    console.print_centered(15, state.death_message)


def _draw_settings(state: State, console: Console):
    s = state.settings
    console.print_centered(5, "SETTINGS")
    console.print_centered(6, f"(F) Flap Velocity: {s.flap_velocity}")
    console.print_centered(7, f"(G) Minimum Gap Size {s.min_gap_size}")
    console.print_centered(8, f"(V) Volume {s.volume}")
    console.print_centered(10, "(M) Main Menu")
    console.print_right(SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1, "Press a key in () to adjust values")


def _draw_play(state: State, console: Console, sprites: List[pygame.Surface]):
    console.cls_bg(LIGHTBLUE4)
    _draw_obstacle(console, state.obstacle, state.player.x)
    console.print(0, 0, "Press Space to flap ><")
    console.print(0, 1, f"Score {state.score}")
    if state.encouragement_frames > 0:
        console.print_centered(6, state.encouragement)
    if state.mode is GameMode.PAUSED:
        console.print_centered(5, "(P) Paused")

    _draw_player(console, state.player, sprites)

    if state.dev_overlay:
        _draw_dev_overlay(state, console)


def _draw_obstacle(console: Console, obstacle: Obstacle, player_x: int):
    screen_x = obstacle.x - player_x
    top, bottom = obstacle.gap_edges()
    for y in range(0, top):
        console.set(screen_x, y, RED, BLACK, "|")
    for y in range(bottom, SCREEN_HEIGHT):
        console.set(screen_x, y, RED, BLACK, "|")


def _draw_player(console: Console, player: Player, sprites: List[pygame.Surface]):
    if not sprites:
        console.set(PLAYER_SCREEN_X, player.y, YELLOW, BLACK, "@")
        return
    console.set_active(SPRITE_LAYER)
    frame = sprites[player.frame % len(sprites)]
    # pygame rotates counter-clockwise; falling tilts the nose down
    console.draw_sprite(frame, PLAYER_SCREEN_X, player.y,
                        angle=-player.velocity * SPRITE_TILT_DEG, scale=SPRITE_SCALE)
    console.set_active(BASE_LAYER)


def _draw_dev_overlay(state: State, console: Console):
    console.set_active(OVERLAY_LAYER)
    p, s, obs = state.player, state.settings, state.obstacle
    right = SCREEN_WIDTH - 1
    console.print_right(right, 0, f"x,y: {p.x}, {p.y}", CYAN)
    console.print_right(right, 1, f"flap_velocity: {s.flap_velocity}", CYAN)
    console.print_right(right, 2, f"min_gap_size: {s.min_gap_size}", CYAN)
    console.print_right(right, 3, f"volume: {s.volume}", CYAN)
    console.print_right(right, SCREEN_HEIGHT - 1, f"Current Obstacle Gap Size: {obs.size}", CYAN)
    console.print_centered(0, "(D) DEV VIEW", CYAN)

    # Gap edges as markers on the wall column
    screen_x = obs.x - p.x
    top, bottom = obs.gap_edges()
    console.set(screen_x, top, MAGENTA, None, "-")
    console.set(screen_x, bottom, MAGENTA, None, "-")
    console.set_active(BASE_LAYER)
