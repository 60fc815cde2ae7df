"""Plain 2D value types shared by the game entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec2:
    """A point or a velocity in screen space."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def is_empty(self) -> bool:
        return self.w < 0.0 or self.h < 0.0

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap or touch."""
        if self.is_empty or other.is_empty:
            return False
        left = max(self.x, other.x)
        right = min(self.x + self.w, other.x + other.w)
        if right < left:
            return False
        top = max(self.y, other.y)
        bottom = min(self.y + self.h, other.y + other.h)
        return bottom >= top


def centered_rect(x: float, y: float, width: float, height: float) -> Rect:
    """Build a rectangle of the given size centred on (x, y)."""
    return Rect(x - width * 0.5, y - height * 0.5, width, height)