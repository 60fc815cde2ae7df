"""Defensive barriers made of individually destructible bricks."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect, Vec2
from .graphics import Color, Graphics

BARRIER_COLOR = Color(0, 200, 0)


@dataclass
class Brick:
    """One square piece of a barrier."""

    rect: Rect
    destroyed: bool = False


class Barrier:
    """An inverted-U wall of bricks centred on (x, y)."""

    width = 80.0
    height = 60.0
    brick_size = 10.0

    def __init__(self, graphics: Graphics, x: float, y: float) -> None:
        self.graphics = graphics
        self.position = Vec2(x, y)
        self.bricks: list[Brick] = list(self._build_bricks())

    def _build_bricks(self):
        rows = int(self.height / self.brick_size)
        cols = int(self.width / self.brick_size)
        size = self.brick_size
        left = self.position.x - self.width / 2
        top = self.position.y - self.height / 2
        for row in range(rows):
            for col in range(cols):
                if row == rows - 1 and cols // 3 < col < 2 * cols // 3:
                    continue
                yield Brick(Rect(left + col * size, top + row * size, size, size))

    def update(self, delta_time: float) -> None:
        """Barriers are static."""

    def render(self) -> None:
        for brick in self.bricks:
            if not brick.destroyed:
                self.graphics.draw_rect(brick.rect, BARRIER_COLOR, True)

    def damage_brick(self, index: int) -> None:
        """Destroy the brick at index; indices outside the list are ignored."""
        if 0 <= index < len(self.bricks):
            self.bricks[index].destroyed = True