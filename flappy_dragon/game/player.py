# flappy_dragon/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from .config import (
    PLAYER_START_X, PLAYER_START_Y, GRAVITY_STEP, TERMINAL_VELOCITY
)

@dataclass
class Player:
    """
    The dragon. Integer grid position, float vertical velocity:
    - x grows by one cell per physics step (scroll offset and distance)
    - y grows downward, floored at 0 (the ceiling), no floor until the death check
    """
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0
    frame: int = 0            # animation counter, wrapped by the renderer

    def advance(self):
        """One physics step: gravity, integrate (truncating), scroll, clamp to ceiling."""
        if self.velocity < TERMINAL_VELOCITY:
            self.velocity = min(self.velocity + GRAVITY_STEP, TERMINAL_VELOCITY)

        self.y += int(self.velocity)
        self.x += 1
        if self.y < 0:
            self.y = 0

        self.frame += 1

    def flap(self, impulse: float):
        """Instantaneous set, not an added force."""
        self.velocity = impulse
