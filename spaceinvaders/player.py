"""The player's cannon, steered with the arrow keys (or A/D) and fired with space."""

from __future__ import annotations

import logging

from .bullet import SCREEN_WIDTH, Bullet
from .events import Key, KeyEvent
from .geometry import Rect, Vec2, centered_rect
from .graphics import Color, Graphics

logger = logging.getLogger(__name__)

PLAYER_COLOR = Color(0, 255, 0)

_LEFT_KEYS = frozenset({Key.LEFT, Key.A})
_RIGHT_KEYS = frozenset({Key.RIGHT, Key.D})


class Player:
    """The cannon at the bottom of the screen, with a stock of lives."""

    width = 40.0
    height = 30.0
    move_speed = 300.0
    start_lives = 3
    start_x = 400.0
    start_y = 550.0
    bullet_speed = 500.0
    shoot_interval = 0.2

    def __init__(self, graphics: Graphics) -> None:
        self.graphics = graphics
        self.position = Vec2(0.0, 0.0)
        self.velocity = Vec2(0.0, 0.0)
        self.shoot_cooldown = 0.0
        self.lives = self.start_lives
        self.move_left = False
        self.move_right = False
        self.is_shooting = False
        self.bullets: list[Bullet] = []

    @property
    def bounds(self) -> Rect:
        return centered_rect(self.position.x, self.position.y, self.width, self.height)

    @property
    def is_destroyed(self) -> bool:
        return self.lives <= 0

    def handle_event(self, event: KeyEvent) -> None:
        """Track which movement and fire keys are held down."""
        if event.key in _LEFT_KEYS:
            self.move_left = event.pressed
        elif event.key in _RIGHT_KEYS:
            self.move_right = event.pressed
        elif event.key is Key.SPACE:
            self.is_shooting = event.pressed
        logger.debug(
            "Key event: %s scancode: %d", "DOWN" if event.pressed else "UP", event.scancode
        )

    def update(self, delta_time: float) -> None:
        self.velocity.x = 0.0
        if self.move_left:
            self.velocity.x = -self.move_speed
        if self.move_right:
            self.velocity.x = self.move_speed

        self.position.x += self.velocity.x * delta_time
        half = self.width * 0.5
        self.position.x = max(half, min(self.position.x, SCREEN_WIDTH - half))

        if self.is_shooting and self.shoot_cooldown <= 0.0:
            self._shoot()

        if self.shoot_cooldown > 0.0:
            self.shoot_cooldown -= delta_time

        self._update_bullets(delta_time)

    def render(self) -> None:
        x, y = self.position.x, self.position.y
        self.graphics.draw_rect(self.bounds, PLAYER_COLOR, True)

        top = y - self.height * 0.5
        apex = top - self.height * 0.5
        self.graphics.draw_line(x, apex, x - self.width * 0.5, top, PLAYER_COLOR)
        self.graphics.draw_line(x, apex, x + self.width * 0.5, top, PLAYER_COLOR)

        for bullet in self.bullets:
            bullet.render()

    def reset(self) -> None:
        """Restore lives, starting position and cooldown, and drop all bullets."""
        self.lives = self.start_lives
        self.position = Vec2(self.start_x, self.start_y)
        self.velocity = Vec2(0.0, 0.0)
        self.shoot_cooldown = 0.0
        self.bullets.clear()

    def take_damage(self) -> None:
        self.lives -= 1

    def destroy(self) -> None:
        self.lives = 0

    def _shoot(self) -> None:
        # Only one bullet on screen at a time.
        if self.bullets or self.shoot_cooldown > 0.0:
            return
        bullet = Bullet(self.graphics)
        bullet.position = Vec2(
            self.position.x + self.width / 2.0 - bullet.bounds.w / 2.0,
            self.position.y - bullet.bounds.h,
        )
        bullet.velocity = Vec2(0.0, -self.bullet_speed)
        self.bullets.append(bullet)
        self.shoot_cooldown = self.shoot_interval

    def _update_bullets(self, delta_time: float) -> None:
        for bullet in self.bullets:
            bullet.update(delta_time)
        self.bullets = [b for b in self.bullets if not (b.destroyed or b.is_out_of_bounds())]