"""
Tests for the fire-and-forget audio worker.
"""

import logging
import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_dragon.game.audio import AudioWorker, NullAudio


def test_null_audio_accepts_anything():
    sink = NullAudio()
    sink.submit("whatever.wav", 1.0)
    sink.close()


def test_failed_playback_is_logged_and_dropped(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="flappy_dragon.game.audio")
    worker = AudioWorker()
    worker.submit(tmp_path / "missing.wav", 0.8)
    worker.close(timeout=5.0)

    assert not worker._thread.is_alive()
    assert any(r.levelno == logging.WARNING and r.name == "flappy_dragon.game.audio"
               for r in caplog.records)


def test_muted_requests_never_touch_the_mixer(tmp_path):
    worker = AudioWorker()
    worker.submit(tmp_path / "missing.wav", 0.0)
    worker.close(timeout=5.0)
    assert not worker._mixer_ready
    assert not worker._mixer_failed
