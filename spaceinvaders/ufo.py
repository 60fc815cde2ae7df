"""The mystery ship that crosses the top of the screen now and then."""

from __future__ import annotations

import random

from .bullet import SCREEN_WIDTH
from .geometry import Rect, Vec2, centered_rect
from .graphics import Color, Graphics

UFO_COLOR = Color(255, 0, 255)
COCKPIT_COLOR = Color(150, 150, 255)


class UFO:
    """A bonus ship that appears on a random timer and flies left to right."""

    width = 50.0
    height = 25.0
    spawn_interval = 15.0
    score_value = 100
    speed = 150.0
    altitude = 50.0

    def __init__(self, graphics: Graphics, rng: random.Random | None = None) -> None:
        self.graphics = graphics
        self.rng = rng if rng is not None else random.Random()
        self.position = Vec2(0.0, 0.0)
        self.velocity = Vec2(0.0, 0.0)
        self.destroyed = False
        self.active = False
        self.spawn_timer = self.rng.uniform(5.0, self.spawn_interval)

    @property
    def bounds(self) -> Rect:
        return centered_rect(self.position.x, self.position.y, self.width, self.height)

    def update(self, delta_time: float) -> None:
        if self.destroyed:
            return
        if not self.active:
            self.spawn_timer -= delta_time
            if self.spawn_timer <= 0.0:
                self.active = True
                self.position = Vec2(-self.width, self.altitude)
                self.velocity.x = self.speed
                self.spawn_timer = self.rng.uniform(10.0, self.spawn_interval)
        else:
            self.position.x += self.velocity.x * delta_time
            if self.position.x > SCREEN_WIDTH + self.width:
                self.active = False

    def render(self) -> None:
        if not self.active or self.destroyed:
            return
        x, y = self.position.x, self.position.y
        self.graphics.draw_rect(self.bounds, UFO_COLOR, True)
        cockpit = Rect(
            x - self.width * 0.2,
            y - self.height * 0.25,
            self.width * 0.4,
            self.height * 0.5,
        )
        self.graphics.draw_rect(cockpit, COCKPIT_COLOR, True)

    def destroy(self) -> None:
        self.destroyed = True