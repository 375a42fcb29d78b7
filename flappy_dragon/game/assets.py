# flappy_dragon/game/assets.py
from __future__ import annotations
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

import pygame

from .config import FONT_FILE, SPRITE_GLOB, SOUND_FILES

logger = logging.getLogger(__name__)


class StartupError(Exception):
    """Anything that stops the game before the first frame."""


class AssetError(StartupError):
    """The asset archive could not be opened or extracted."""


@dataclass
class Assets:
    """What was found after unpacking; every field may be empty."""
    root: Optional[Path] = None
    font: Optional[Path] = None
    sprite_frames: List[Path] = field(default_factory=list)
    sounds: Dict[str, Path] = field(default_factory=dict)


def unpack_assets(archive: Union[str, Path], dest: Union[str, Path]) -> Path:
    """Extract a zip archive into dest; the caller owns and removes dest."""
    archive = Path(archive)
    target = Path(dest)
    try:
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(target)
    except (OSError, zipfile.BadZipFile) as exc:
        raise AssetError(f"cannot unpack asset archive {archive}: {exc}") from exc
    logger.info("Unpacked assets from %s into %s", archive, target)
    return target


def discover_assets(root: Union[str, Path]) -> Assets:
    root = Path(root)
    font = root / FONT_FILE
    sounds = {name: root / fname for name, fname in SOUND_FILES.items() if (root / fname).is_file()}
    return Assets(
        root=root,
        font=font if font.is_file() else None,
        sprite_frames=sorted(root.glob(SPRITE_GLOB)),
        sounds=sounds,
    )


def load_assets(archive: Optional[Union[str, Path]], scratch: Union[str, Path]) -> Assets:
    """No archive configured means plain glyph mode without sound."""
    if archive is None:
        return Assets()
    return discover_assets(unpack_assets(archive, scratch))


def load_sprite_frames(paths: List[Path]) -> List[pygame.Surface]:
    frames = []
    for p in paths:
        try:
            frames.append(pygame.image.load(str(p)))
        except pygame.error as exc:
            raise AssetError(f"cannot load sprite frame {p}: {exc}") from exc
    return frames
