# flappy_dragon/game/controls.py
from __future__ import annotations
from typing import Dict, Iterable, Optional
import pygame
from .state import Command, GameMode

# One key per command; P means Play on title screens and Pause in game.
# Closing the window is handled by the runner, not bound here.
KEY_BINDINGS: Dict[GameMode, Dict[int, Command]] = {
    GameMode.MENU: {
        pygame.K_p: Command.PLAY,
        pygame.K_q: Command.QUIT,
        pygame.K_s: Command.OPEN_SETTINGS,
    },
    GameMode.END: {
        pygame.K_p: Command.PLAY,
        pygame.K_q: Command.QUIT,
        pygame.K_s: Command.OPEN_SETTINGS,
    },
    GameMode.PLAYING: {
        pygame.K_SPACE: Command.FLAP,
        pygame.K_d: Command.TOGGLE_DEV_OVERLAY,
        pygame.K_p: Command.PAUSE,
    },
    GameMode.PAUSED: {
        pygame.K_p: Command.PAUSE,
    },
    GameMode.SETTINGS: {
        pygame.K_m: Command.RETURN_TO_MENU,
        pygame.K_f: Command.CYCLE_FLAP_VELOCITY,
        pygame.K_g: Command.CYCLE_MIN_GAP,
        pygame.K_v: Command.CYCLE_VOLUME,
    },
}


def command_for_key(mode: GameMode, key: int) -> Optional[Command]:
    return KEY_BINDINGS[mode].get(key)


def read_command(events: Iterable[pygame.event.Event], mode: GameMode) -> Optional[Command]:
    """First bound key press of the frame wins; the rest are dropped."""
    for event in events:
        if event.type == pygame.KEYDOWN:
            cmd = command_for_key(mode, event.key)
            if cmd is not None:
                return cmd
    return None
