"""
Tests for the agent observation vector.
"""

import numpy as np
from flappy_dragon.env.observations import build_observation, OBS_LOW, OBS_HIGH, OBS_SIZE
from flappy_dragon.game.obstacle import Obstacle
from flappy_dragon.game.player import Player


def test_shape_dtype_and_values():
    obs = build_observation(Player(x=5, y=25, velocity=1.0), Obstacle(x=45, gap_center_y=20, size=10))
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    np.testing.assert_allclose(obs, [0.5, 0.5, 0.5, 0.3, 0.5], rtol=1e-6)


def test_values_are_clipped_into_bounds():
    # below the screen, flapping hard, wall already behind
    obs = build_observation(Player(x=50, y=52, velocity=-4.0), Obstacle(x=40, gap_center_y=25, size=10))
    assert np.all(obs >= OBS_LOW) and np.all(obs <= OBS_HIGH)
    assert obs[0] == 1.0
    assert obs[1] == -1.0
    assert obs[2] == 0.0
