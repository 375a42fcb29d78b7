# flappy_dragon/game/console.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import pygame
from .config import SCREEN_WIDTH, SCREEN_HEIGHT, CELL_PX, BLACK, WHITE, MONO_FONTS

Color = Tuple[int, int, int]

# Layers, composited bottom to top
BASE_LAYER = 0      # text + obstacles
SPRITE_LAYER = 1    # the dragon
OVERLAY_LAYER = 2   # dev view
LAYER_COUNT = 3


class Console:
    """
    Character-grid surface on top of pygame, one SRCALPHA surface per layer.
    Coordinates are cells; anything outside the grid is silently clipped.
    """
    def __init__(self,
                 width: int = SCREEN_WIDTH,
                 height: int = SCREEN_HEIGHT,
                 cell_px: int = CELL_PX,
                 font_path: Optional[str] = None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.width = width
        self.height = height
        self.cell = cell_px
        self.size_px = (width * cell_px, height * cell_px)
        self.layers: List[pygame.Surface] = [
            pygame.Surface(self.size_px, pygame.SRCALPHA) for _ in range(LAYER_COUNT)
        ]
        self.active = BASE_LAYER
        if font_path is not None:
            self.font = pygame.font.Font(font_path, cell_px)
        else:
            self.font = pygame.font.SysFont(MONO_FONTS, cell_px)
        self._glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}

    # -------------------- Layer control --------------------

    def set_active(self, layer: int):
        self.active = layer

    @property
    def surface(self) -> pygame.Surface:
        return self.layers[self.active]

    def cls(self):
        """Clear the active layer: opaque black on the base, transparent above it."""
        if self.active == BASE_LAYER:
            self.surface.fill(BLACK + (255,))
        else:
            self.surface.fill((0, 0, 0, 0))

    def cls_bg(self, color: Color):
        self.surface.fill(tuple(color) + (255,))

    def clear_all(self):
        for layer in range(LAYER_COUNT):
            self.set_active(layer)
            self.cls()
        self.set_active(BASE_LAYER)

    # -------------------- Drawing --------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, fg: Color, bg: Optional[Color], glyph: str):
        if not self.in_bounds(x, y):
            return
        px, py = x * self.cell, y * self.cell
        if bg is not None:
            self.surface.fill(tuple(bg) + (255,), pygame.Rect(px, py, self.cell, self.cell))
        img = self._glyph(glyph, fg)
        self.surface.blit(img, (px + (self.cell - img.get_width()) // 2,
                                py + (self.cell - img.get_height()) // 2))

    def print(self, x: int, y: int, text: str, fg: Color = WHITE, bg: Optional[Color] = None):
        for i, ch in enumerate(str(text)):
            if ch != " " or bg is not None:
                self.set(x + i, y, fg, bg, ch)

    def print_centered(self, y: int, text: str, fg: Color = WHITE, bg: Optional[Color] = None):
        text = str(text)
        self.print((self.width - len(text)) // 2, y, text, fg, bg)

    def print_right(self, x: int, y: int, text: str, fg: Color = WHITE, bg: Optional[Color] = None):
        """Right-align so the last character lands on column x."""
        text = str(text)
        self.print(x - len(text) + 1, y, text, fg, bg)

    def draw_sprite(self, image: pygame.Surface, x: float, y: float,
                    angle: float = 0.0, scale: float = 1.0):
        """Blit image centred on cell (x, y), rotated (degrees, counter-clockwise) and scaled."""
        img = pygame.transform.rotozoom(image, angle, scale)
        cx = int(x * self.cell + self.cell / 2)
        cy = int(y * self.cell + self.cell / 2)
        self.surface.blit(img, img.get_rect(center=(cx, cy)))

    def compose(self, target: pygame.Surface):
        for layer in self.layers:
            target.blit(layer, (0, 0))

    # -------------------- Internals --------------------

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        key = (glyph, tuple(fg))
        img = self._glyphs.get(key)
        if img is None:
            img = self.font.render(glyph, True, fg)
            self._glyphs[key] = img
        return img
