# flappy_dragon/game/obstacle.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Tuple
from .config import GAP_CENTER_MIN, GAP_CENTER_MAX, GAP_BASELINE
from .player import Player

def gap_size_for(score: int, min_gap: int) -> int:
    """Gap shrinks by one cell per point until the configured floor takes over."""
    return max(min_gap, GAP_BASELINE - score)

@dataclass(frozen=True)
class Obstacle:
    """A wall at world column x with a single gap. Replaced, never mutated."""
    x: int
    gap_center_y: int
    size: int

    @classmethod
    def generate(cls, x: int, score: int, min_gap: int, rng: random.Random) -> "Obstacle":
        return cls(
            x=x,
            gap_center_y=rng.randrange(GAP_CENTER_MIN, GAP_CENTER_MAX),
            size=gap_size_for(score, min_gap),
        )

    @property
    def half_size(self) -> int:
        return self.size // 2

    def gap_edges(self) -> Tuple[int, int]:
        """(top, bottom) rows of the gap; rows strictly outside are solid."""
        return self.gap_center_y - self.half_size, self.gap_center_y + self.half_size

def collides(player: Player, obstacle: Obstacle) -> bool:
    """
    Hit test on the single frame where the player's column equals the wall's.
    Rows equal to a gap edge still count as inside the gap.
    """
    if player.x != obstacle.x:
        return False
    top, bottom = obstacle.gap_edges()
    return player.y < top or player.y > bottom
