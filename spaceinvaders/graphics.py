"""Primitive drawing on a pygame surface, with a texture cache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from .geometry import Rect


class TextureLoadError(OSError):
    """Raised when an image file cannot be loaded as a texture."""


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0, 255)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(
        int(round(rect.x)),
        int(round(rect.y)),
        max(0, int(round(rect.w))),
        max(0, int(round(rect.h))),
    )


class Graphics:
    """Draws rectangles, lines and textures onto a target surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._textures: dict[str, pygame.Surface] = {}

    def clear(self, color: Color = BLACK) -> None:
        self.surface.fill(color.rgba)

    def present(self) -> None:
        """Show the frame when drawing to the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def draw_rect(self, rect: Rect, color: Color, filled: bool = True) -> None:
        target = _to_pygame_rect(rect)
        width = 0 if filled else 1
        if color.a == 255:
            pygame.draw.rect(self.surface, color.rgba, target, width)
            return
        overlay = pygame.Surface(target.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, color.rgba, overlay.get_rect(), width)
        self.surface.blit(overlay, target.topleft)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: Color) -> None:
        pygame.draw.line(self.surface, color.rgba, (x1, y1), (x2, y2))

    def load_texture(self, path: str | Path) -> pygame.Surface:
        """Load an image once and return the cached surface afterwards."""
        key = str(path)
        cached = self._textures.get(key)
        if cached is not None:
            return cached
        try:
            texture = pygame.image.load(key)
        except (pygame.error, OSError) as exc:
            raise TextureLoadError(f"unable to load image {key}: {exc}") from exc
        self._textures[key] = texture
        return texture

    def draw_texture(
        self,
        texture: pygame.Surface | None,
        dest: Rect,
        src: Rect | None = None,
        angle: float = 0.0,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> None:
        """Draw a texture into dest, rotated clockwise by angle degrees about its centre."""
        if texture is None:
            return
        image = texture.subsurface(_to_pygame_rect(src)) if src is not None else texture
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        target = _to_pygame_rect(dest)
        if image.get_size() != target.size:
            image = pygame.transform.scale(image, target.size)
        if angle:
            image = pygame.transform.rotate(image, -angle)
        self.surface.blit(image, image.get_rect(center=target.center))