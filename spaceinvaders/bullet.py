"""Projectiles fired by the player and by the invaders."""

from __future__ import annotations

from .geometry import Rect, Vec2, centered_rect
from .graphics import Color, Graphics

SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0

BULLET_COLOR = Color(255, 255, 0)


class Bullet:
    """A small rectangle moving at constant velocity until destroyed."""

    width = 5.0
    height = 15.0

    def __init__(self, graphics: Graphics) -> None:
        self.graphics = graphics
        self.position = Vec2(0.0, 0.0)
        self.velocity = Vec2(0.0, 0.0)
        self.destroyed = False

    @property
    def bounds(self) -> Rect:
        return centered_rect(self.position.x, self.position.y, self.width, self.height)

    def update(self, delta_time: float) -> None:
        if self.destroyed:
            return
        self.position.x += self.velocity.x * delta_time
        self.position.y += self.velocity.y * delta_time

    def render(self) -> None:
        if self.destroyed:
            return
        self.graphics.draw_rect(self.bounds, BULLET_COLOR, True)

    def destroy(self) -> None:
        self.destroyed = True

    def is_out_of_bounds(self) -> bool:
        """Return True once the bullet has fully left the screen."""
        x, y = self.position.x, self.position.y
        return (
            y < -self.height
            or y > SCREEN_HEIGHT + self.height
            or x < -self.width
            or x > SCREEN_WIDTH + self.width
        )