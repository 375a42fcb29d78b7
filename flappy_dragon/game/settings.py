# flappy_dragon/game/settings.py
from __future__ import annotations
from dataclasses import dataclass
from .config import (
    FLAP_VELOCITY_DEFAULT, FLAP_VELOCITY_STEP, FLAP_VELOCITY_LIMIT, FLAP_VELOCITY_WRAP,
    MIN_GAP_DEFAULT, MIN_GAP_MAX, MIN_GAP_WRAP, VOLUME_DEFAULT, VOLUME_MAX
)

@dataclass
class Settings:
    """In-memory tuning knobs; each one cycles through a bounded range."""
    flap_velocity: float = FLAP_VELOCITY_DEFAULT
    min_gap_size: int = MIN_GAP_DEFAULT
    volume: int = VOLUME_DEFAULT

    def cycle_flap_velocity(self):
        self.flap_velocity -= FLAP_VELOCITY_STEP
        if self.flap_velocity < FLAP_VELOCITY_LIMIT:
            self.flap_velocity = FLAP_VELOCITY_WRAP

    def cycle_min_gap(self):
        self.min_gap_size += 1
        if self.min_gap_size > MIN_GAP_MAX:
            self.min_gap_size = MIN_GAP_WRAP

    def cycle_volume(self):
        self.volume += 1
        if self.volume > VOLUME_MAX:
            self.volume = 0

    @property
    def volume_scalar(self) -> float:
        """Volume as a mixer gain in [0, 1]."""
        return self.volume / float(VOLUME_MAX)
