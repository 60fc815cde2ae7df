"""Text drawing with a TrueType font, or plain boxes when no font is loaded."""

from __future__ import annotations

from pathlib import Path

import pygame

from .geometry import Rect
from .graphics import Color, Graphics

WHITE = Color(255, 255, 255)


class FontLoadError(OSError):
    """Raised when a font file cannot be opened."""


class TextRenderer:
    """Draws strings; falls back to primitive shapes without a font."""

    char_width = 12.0
    char_height = 20.0
    char_spacing = 2.0

    def __init__(self, graphics: Graphics) -> None:
        self.graphics = graphics
        self.font: pygame.font.Font | None = None
        self._cache: dict[tuple[str, Color], pygame.Surface] = {}

    def load_font(self, path: str | Path, font_size: int) -> None:
        """Open a font, replacing any previous one; on failure no font remains."""
        self.font = None
        self._cache.clear()
        try:
            pygame.font.init()
            self.font = pygame.font.Font(str(path), font_size)
        except (pygame.error, OSError) as exc:
            raise FontLoadError(f"failed to load font {path}: {exc}") from exc

    def draw_text(
        self, text: str, x: float, y: float, color: Color = WHITE, centered: bool = True
    ) -> None:
        """Draw text at (x, y), either centred on that point or from its top-left."""
        if self.font is not None:
            texture = self._render(text, color)
            if texture is not None:
                width, height = texture.get_size()
                if centered:
                    x -= width / 2.0
                    y -= height / 2.0
                self.graphics.surface.blit(texture, (round(x), round(y)))
                return
        self._draw_fallback(text, x, y, color, centered)

    def text_size(self, text: str) -> tuple[float, float]:
        """Return the (width, height) the text would take up."""
        if self.font is not None:
            width, height = self.font.size(text)
            return (float(width), float(height))
        return (len(text) * (self.char_width + self.char_spacing), self.char_height)

    def _render(self, text: str, color: Color) -> pygame.Surface | None:
        key = (text, color)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        try:
            texture = self.font.render(text, True, color.rgba)
        except pygame.error:
            return None
        self._cache[key] = texture
        return texture

    def _draw_fallback(
        self, text: str, x: float, y: float, color: Color, centered: bool
    ) -> None:
        advance = self.char_width + self.char_spacing
        start_x = x - len(text) * advance / 2 if centered else x
        char_y = y - self.char_height / 2 if centered else y
        for position, char in enumerate(text):
            self._draw_char(char, start_x + position * advance, char_y, color)

    def _draw_char(self, char: str, x: float, y: float, color: Color) -> None:
        w, h = self.char_width, self.char_height
        if "A" <= char <= "Z":
            self.graphics.draw_rect(Rect(x, y, w, h), color, False)
            self.graphics.draw_line(x, y + h / 2, x + w, y + h / 2, color)
        elif "a" <= char <= "z":
            self.graphics.draw_rect(Rect(x, y + h * 0.25, w, h * 0.75), color, False)
        elif "0" <= char <= "9":
            self.graphics.draw_rect(Rect(x, y, w, h), color, False)
        elif char == " ":
            pass
        else:
            self.graphics.draw_rect(Rect(x + w / 4, y + h / 4, w / 2, h / 2), color, True)