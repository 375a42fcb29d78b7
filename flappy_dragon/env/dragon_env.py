# flappy_dragon/env/dragon_env.py
from __future__ import annotations
import random
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from flappy_dragon.game.config import WIDTH, HEIGHT, FPS, TITLE
from flappy_dragon.game.audio import NullAudio
from flappy_dragon.game.console import Console
from flappy_dragon.game.render import draw
from flappy_dragon.game.state import Command, DragonGame, GameMode
from flappy_dragon.env.observations import build_observation, OBS_LOW, OBS_HIGH


class DragonEnv(gym.Env):
    """
    Flappy Dragon Gymnasium environment (vector observations).
    - Runs the real game core in PLAYING mode, frames of 1000/FPS ms.
    - Agent acts every `frame_skip` frames (default 4); physics steps every ~2 frames.
    - Observation: shape (5,), float32, see observations.build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.frame_ms = 1000.0 / FPS

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = FLAP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.game: Optional[DragonGame] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.console: Optional[Console] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # A given seed fixes the layout; otherwise draw one from the env RNG
        if seed is not None:
            game_seed = int(seed)
        else:
            game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.current_seed = game_seed

        self.game = DragonGame(rng=random.Random(game_seed), audio=NullAudio())
        self.game.restart()
        self.timestep = 0

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": 0, "distance": self.game.state.player.x}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.game is not None, "call reset() first"
        state = self.game.state
        score_before = state.score

        # The action is one key press, delivered on the first frame only
        command = Command.FLAP if int(action) == 1 else None
        for _ in range(self.frame_skip):
            if state.mode is not GameMode.PLAYING:
                break
            self.game.tick(self.frame_ms, command)
            command = None

        alive = state.mode is GameMode.PLAYING
        reward = (1.0 + float(state.score - score_before)) if alive else -1.0

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = {
            "seed": self.current_seed,
            "score": state.score,
            "distance": state.player.x,
            "timestep": self.timestep,
            "death_cause": state.death_cause,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.game is not None
        return build_observation(self.game.state.player, self.game.state.obstacle)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.game is None:
            return None

        if self.console is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption(f"{TITLE} - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.console = Console()

        draw(self.game.state, self.console)
        self.console.compose(self.screen)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.console is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.console = None
