# flappy_dragon/game/audio.py
"""
Fire-and-forget sound effects.

The game loop only ever calls `submit(path, volume)`, which never blocks.
A daemon worker owns the mixer device and plays each clip; any device or
decode failure is logged and the request is dropped.
"""
from __future__ import annotations
import logging
import queue
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pygame

from .config import AUDIO_CHANNELS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class NullAudio:
    """Sink used when muted, headless, or without sound assets."""
    def submit(self, path: PathLike, volume: float):
        pass

    def close(self):
        pass


class AudioWorker:
    def __init__(self, channels: int = AUDIO_CHANNELS):
        self.channels = int(channels)
        self._requests: "queue.Queue[Optional[Tuple[Path, float]]]" = queue.Queue()
        self._cache: Dict[Path, pygame.mixer.Sound] = {}
        self._mixer_ready = False
        self._mixer_failed = False
        self._thread = threading.Thread(target=self._run, name="audio-worker", daemon=True)
        self._thread.start()

    def submit(self, path: PathLike, volume: float):
        self._requests.put_nowait((Path(path), float(volume)))

    def close(self, timeout: float = 0.5):
        self._requests.put_nowait(None)
        self._thread.join(timeout)

    # -------------------- Worker side --------------------

    def _run(self):
        while True:
            req = self._requests.get()
            if req is None:
                break
            self._play(*req)

    def _ensure_mixer(self) -> bool:
        if self._mixer_ready:
            return True
        if self._mixer_failed:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.channels)
        except pygame.error as exc:
            self._mixer_failed = True
            logger.warning("Audio disabled, mixer unavailable: %s", exc)
            return False
        self._mixer_ready = True
        return True

    def _play(self, path: Path, volume: float):
        if volume <= 0.0 or not self._ensure_mixer():
            return
        try:
            sound = self._cache.get(path)
            if sound is None:
                sound = pygame.mixer.Sound(str(path))
                self._cache[path] = sound
            sound.set_volume(max(0.0, min(1.0, volume)))
            sound.play()
        except (pygame.error, OSError) as exc:
            logger.warning("Dropped sound %s: %s", path, exc)
