"""
Tests for DragonEnv (Gymnasium environment).
"""

import os
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from flappy_dragon.env.dragon_env import DragonEnv
from flappy_dragon.game.config import WIDTH, HEIGHT


@pytest.fixture
def env():
    e = DragonEnv()
    yield e
    e.close()


def test_api_check():
    env = DragonEnv()
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_reset_starts_a_run(env):
    obs, info = env.reset(seed=123)
    assert env.observation_space.contains(obs)
    assert info["seed"] == 123
    assert info["score"] == 0


def test_noop_falls_and_terminates(env):
    env.reset(seed=7)
    for _ in range(200):
        obs, r, term, trunc, info = env.step(0)
        assert env.observation_space.contains(obs)
        if term:
            break
        assert r >= 1.0
    assert term
    assert r == -1.0
    assert info["death_cause"] == "fell"


def test_determinism():
    rng = np.random.RandomState(42)
    actions = [int(rng.randint(0, 2)) for _ in range(300)]

    def rollout():
        e = DragonEnv()
        traj = []
        try:
            obs, _ = e.reset(seed=99)
            for a in actions:
                obs, r, term, trunc, _ = e.step(a)
                traj.append((obs.copy(), r, term, trunc))
                if term or trunc:
                    break
        finally:
            e.close()
        return traj

    t1, t2 = rollout(), rollout()
    assert len(t1) == len(t2)
    for (o1, r1, te1, tr1), (o2, r2, te2, tr2) in zip(t1, t2):
        assert np.array_equal(o1, o2)
        assert (r1, te1, tr1) == (r2, te2, tr2)


def test_time_limit_truncates():
    e = DragonEnv(time_limit_seconds=0.1)   # 1 decision at 60 fps / 4 frames
    try:
        e.reset(seed=1)
        _, _, term, trunc, _ = e.step(0)
        assert trunc and not term
    finally:
        e.close()


def test_rgb_array_render():
    e = DragonEnv(render_mode="rgb_array")
    try:
        e.reset(seed=3)
        e.step(1)
        frame = e.render()
        assert frame.shape == (HEIGHT, WIDTH, 3)
        assert frame.dtype == np.uint8
    finally:
        e.close()
