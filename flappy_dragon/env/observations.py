# flappy_dragon/env/observations.py
from __future__ import annotations
import numpy as np
from flappy_dragon.game.config import SCREEN_WIDTH, SCREEN_HEIGHT, TERMINAL_VELOCITY
from flappy_dragon.game.obstacle import Obstacle
from flappy_dragon.game.player import Player

OBS_SIZE = 5
OBS_LOW = np.array([0.0, -1.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)

def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)

def build_observation(player: Player, obstacle: Obstacle) -> np.ndarray:
    """
    Returns a fixed (5,) float32 vector:
      [ y_norm, vy_norm, dx_norm, gap_top_norm, gap_bottom_norm ]
    - y and the gap edges are rows divided by SCREEN_HEIGHT, clipped to [0,1]
    - vy is divided by the terminal velocity and clipped to [-1,1]
      (strong flaps saturate at -1)
    - dx is the distance to the wall in screen widths, clipped to [0,1]
    """
    top, bottom = obstacle.gap_edges()
    feats = [
        _clamp(player.y / float(SCREEN_HEIGHT), 0.0, 1.0),
        _clamp(player.velocity / TERMINAL_VELOCITY, -1.0, 1.0),
        _clamp((obstacle.x - player.x) / float(SCREEN_WIDTH), 0.0, 1.0),
        _clamp(top / float(SCREEN_HEIGHT), 0.0, 1.0),
        _clamp(bottom / float(SCREEN_HEIGHT), 0.0, 1.0),
    ]
    return np.asarray(feats, dtype=np.float32)
