# flappy_dragon/game/game.py
import sys
import logging
import tempfile
import pygame
from .config import WIDTH, HEIGHT, FPS, TITLE, ASSET_ARCHIVE, LOG_LEVEL
from .assets import StartupError, load_assets, load_sprite_frames
from .audio import AudioWorker, NullAudio
from .console import Console
from .controls import read_command
from .render import draw
from .state import DragonGame

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build(scratch: str):
    """Everything that may fail before the first frame. Raises StartupError."""
    assets = load_assets(ASSET_ARCHIVE, scratch)
    try:
        pygame.init()
        pygame.display.set_caption(TITLE)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        console = Console(font_path=str(assets.font) if assets.font else None)
    except (pygame.error, OSError) as exc:
        raise StartupError(f"cannot open game window: {exc}") from exc

    sprites = load_sprite_frames(assets.sprite_frames)
    audio = AudioWorker() if assets.sounds else NullAudio()
    game = DragonGame(audio=audio, sounds=assets.sounds)
    logger.info("Started %s (sprites=%d, sounds=%s)", TITLE, len(sprites), sorted(assets.sounds))
    return screen, console, sprites, audio, game


def run():
    setup_logging()
    # Unpacked assets live only as long as the process
    with tempfile.TemporaryDirectory(prefix="flappy_dragon_") as scratch:
        try:
            screen, console, sprites, audio, game = build(scratch)
        except StartupError as exc:
            logger.critical("%s", exc)
            pygame.quit()
            sys.exit(1)

        clock = pygame.time.Clock()
        try:
            while not game.quitting:
                frame_ms = clock.tick(FPS)

                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    break
                game.tick(float(frame_ms), read_command(events, game.state.mode))

                # --- Render ---
                draw(game.state, console, sprites)
                console.compose(screen)
                pygame.display.flip()
        finally:
            audio.close()
            pygame.quit()


if __name__ == "__main__":
    run()
