"""
Tests for the cyclic settings.
"""

from flappy_dragon.game.settings import Settings


def test_defaults():
    s = Settings()
    assert s.flap_velocity == -2.0
    assert s.min_gap_size == 2
    assert s.volume == 5
    assert s.volume_scalar == 0.5


def test_flap_velocity_wraps_past_limit():
    s = Settings()
    seen = []
    for _ in range(6):
        s.cycle_flap_velocity()
        seen.append(s.flap_velocity)
    assert seen == [-2.5, -3.0, -3.5, -4.0, -1.5, -2.0]


def test_min_gap_wraps_to_one():
    s = Settings()
    for _ in range(8):
        s.cycle_min_gap()
    assert s.min_gap_size == 10
    s.cycle_min_gap()
    assert s.min_gap_size == 1


def test_volume_wraps_to_zero():
    s = Settings()
    for _ in range(5):
        s.cycle_volume()
    assert s.volume == 10
    assert s.volume_scalar == 1.0
    s.cycle_volume()
    assert s.volume == 0
    assert s.volume_scalar == 0.0
