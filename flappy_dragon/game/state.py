# flappy_dragon/game/state.py
"""
Per-frame game-state machine.

Transitions (command -> new mode):
    MENU      PLAY -> PLAYING (restart), OPEN_SETTINGS -> SETTINGS, QUIT -> exit
    PLAYING   PAUSE -> PAUSED, death -> END
    PAUSED    PAUSE -> PLAYING (anything else ignored)
    SETTINGS  RETURN_TO_MENU -> MENU, CYCLE_* mutate settings in place
    END       PLAY -> PLAYING (restart), OPEN_SETTINGS -> SETTINGS, QUIT -> exit

`DragonGame.tick` is called once per display frame with the elapsed time and
at most one command. Physics runs on its own fixed sub-frame timer.
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Sequence

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION_MS,
    ENCOURAGE_EVERY, ENCOURAGE_FRAMES, ENCOURAGEMENTS, DEATH_MESSAGES
)
from .audio import NullAudio
from .obstacle import Obstacle, collides
from .player import Player
from .settings import Settings

logger = logging.getLogger(__name__)


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    SETTINGS = "settings"
    END = "end"


class Command(Enum):
    FLAP = "flap"
    TOGGLE_DEV_OVERLAY = "toggle_dev_overlay"
    PAUSE = "pause"
    PLAY = "play"
    QUIT = "quit"
    OPEN_SETTINGS = "open_settings"
    RETURN_TO_MENU = "return_to_menu"
    CYCLE_FLAP_VELOCITY = "cycle_flap_velocity"
    CYCLE_MIN_GAP = "cycle_min_gap"
    CYCLE_VOLUME = "cycle_volume"


def pick_message(rng: random.Random, pool: Sequence[str]) -> str:
    return rng.choice(pool)


@dataclass
class State:
    """Everything the frame update reads and writes."""
    obstacle: Obstacle
    mode: GameMode = GameMode.MENU
    player: Player = field(default_factory=Player)
    settings: Settings = field(default_factory=Settings)
    frame_time: float = 0.0
    score: int = 0
    dev_overlay: bool = False
    encouragement: str = ""
    encouragement_frames: int = 0
    death_message: str = ""
    death_cause: Optional[str] = None   # "fell" | "obstacle" | None
    quitting: bool = False


class DragonGame:
    """
    Owns the State and the injected collaborators:
    - rng: seedable source for gap placement and message picks
    - audio: anything with submit(path, volume); never awaited
    - sounds: logical sound name -> clip path (missing names stay silent)
    """
    def __init__(self,
                 rng: Optional[random.Random] = None,
                 audio=None,
                 sounds: Optional[Mapping[str, Path]] = None,
                 settings: Optional[Settings] = None):
        self.rng = rng if rng is not None else random.Random()
        self.audio = audio if audio is not None else NullAudio()
        self.sounds: Dict[str, Path] = dict(sounds or {})
        settings = settings if settings is not None else Settings()
        self.state = State(
            obstacle=Obstacle.generate(SCREEN_WIDTH, 0, settings.min_gap_size, self.rng),
            settings=settings,
        )
        self._handlers: Dict[GameMode, Callable[[float, Optional[Command]], None]] = {
            GameMode.MENU: self._menu,
            GameMode.PLAYING: self._play,
            GameMode.PAUSED: self._paused,
            GameMode.SETTINGS: self._settings_menu,
            GameMode.END: self._dead,
        }

    # -------------------- Core API --------------------

    @property
    def quitting(self) -> bool:
        return self.state.quitting

    def tick(self, frame_time_ms: float, command: Optional[Command] = None):
        """Advance one display frame."""
        self._handlers[self.state.mode](frame_time_ms, command)

    def restart(self):
        s = self.state
        s.player = Player()
        s.frame_time = 0.0
        s.obstacle = Obstacle.generate(SCREEN_WIDTH, 0, s.settings.min_gap_size, self.rng)
        s.score = 0
        s.encouragement = ""
        s.encouragement_frames = 0
        s.death_message = ""
        s.death_cause = None
        self._set_mode(GameMode.PLAYING)

    # -------------------- Mode handlers --------------------

    def _menu(self, frame_time_ms: float, command: Optional[Command]):
        self._title_screen_command(command)

    def _dead(self, frame_time_ms: float, command: Optional[Command]):
        self._title_screen_command(command)

    def _title_screen_command(self, command: Optional[Command]):
        if command is Command.PLAY:
            self.restart()
        elif command is Command.QUIT:
            self.state.quitting = True
        elif command is Command.OPEN_SETTINGS:
            self._set_mode(GameMode.SETTINGS)

    def _paused(self, frame_time_ms: float, command: Optional[Command]):
        if command is Command.PAUSE:
            self._set_mode(GameMode.PLAYING)

    def _settings_menu(self, frame_time_ms: float, command: Optional[Command]):
        settings = self.state.settings
        if command is Command.RETURN_TO_MENU:
            self._set_mode(GameMode.MENU)
        elif command is Command.CYCLE_FLAP_VELOCITY:
            settings.cycle_flap_velocity()
        elif command is Command.CYCLE_MIN_GAP:
            settings.cycle_min_gap()
        elif command is Command.CYCLE_VOLUME:
            settings.cycle_volume()

    def _play(self, frame_time_ms: float, command: Optional[Command]):
        s = self.state

        # Fixed-step physics, decoupled from the display rate
        s.frame_time += frame_time_ms
        if s.frame_time > FRAME_DURATION_MS:
            s.frame_time = 0.0
            s.player.advance()

        if command is Command.FLAP:
            s.player.flap(s.settings.flap_velocity)
            self._play_sound("flap")
        elif command is Command.TOGGLE_DEV_OVERLAY:
            s.dev_overlay = not s.dev_overlay
        elif command is Command.PAUSE:
            self._set_mode(GameMode.PAUSED)

        if s.encouragement_frames > 0:
            s.encouragement_frames -= 1

        if s.player.x > s.obstacle.x:
            s.score += 1
            self._play_sound("point")
            if s.score % ENCOURAGE_EVERY == 0:
                s.encouragement = pick_message(self.rng, ENCOURAGEMENTS)
                s.encouragement_frames = ENCOURAGE_FRAMES
            s.obstacle = Obstacle.generate(
                s.player.x + SCREEN_WIDTH, s.score, s.settings.min_gap_size, self.rng
            )

        fell = s.player.y > SCREEN_HEIGHT
        if fell or collides(s.player, s.obstacle):
            s.death_cause = "fell" if fell else "obstacle"
            s.death_message = pick_message(self.rng, DEATH_MESSAGES)
            self._play_sound("crash")
            self._set_mode(GameMode.END)
            logger.info("Dragon down: score=%d cause=%s", s.score, s.death_cause)

    # -------------------- Helpers --------------------

    def _set_mode(self, mode: GameMode):
        logger.debug("mode %s -> %s", self.state.mode.value, mode.value)
        self.state.mode = mode

    def _play_sound(self, name: str):
        path = self.sounds.get(name)
        if path is not None:
            self.audio.submit(path, self.state.settings.volume_scalar)
