"""Invaders that sweep across the screen and fire at random."""

from __future__ import annotations

import random

from .bullet import SCREEN_WIDTH, Bullet
from .geometry import Rect, Vec2, centered_rect
from .graphics import Color, Graphics

ENEMY_COLOR = Color(255, 0, 0)
EYE_COLOR = Color(255, 255, 255)

_shared_rng = random.Random()


class Enemy:
    """One invader; it bounces between the screen edges, dropping each time."""

    width = 30.0
    height = 30.0
    move_speed = 50.0
    drop_amount = 15.0
    shoot_probability = 0.0005
    shoot_interval = 5.0
    bullet_speed = 300.0

    def __init__(self, graphics: Graphics, rng: random.Random | None = None) -> None:
        self.graphics = graphics
        self.rng = rng if rng is not None else _shared_rng
        self.position = Vec2(0.0, 0.0)
        self.velocity = Vec2(self.move_speed, 0.0)
        self.shoot_cooldown = 0.0
        self.destroyed = False
        self.bullets: list[Bullet] = []

    @property
    def bounds(self) -> Rect:
        return centered_rect(self.position.x, self.position.y, self.width, self.height)

    def update(self, delta_time: float) -> None:
        if self.destroyed:
            return
        self.position.x += self.velocity.x * delta_time

        half = self.width * 0.5
        if self.position.x <= half or self.position.x >= SCREEN_WIDTH - half:
            self.velocity.x = -self.velocity.x
            self.position.y += self.drop_amount

        if self.shoot_cooldown > 0.0:
            self.shoot_cooldown -= delta_time

        if self.shoot_cooldown <= 0.0 and self.rng.random() < self.shoot_probability:
            self._shoot()

        self._update_bullets(delta_time)

    def render(self) -> None:
        if self.destroyed:
            return
        x, y = self.position.x, self.position.y
        self.graphics.draw_rect(self.bounds, ENEMY_COLOR, True)

        eye = self.width * 0.2
        eye_y = y - self.height * 0.25 - eye * 0.5
        for offset in (-self.width * 0.25, self.width * 0.25):
            self.graphics.draw_rect(Rect(x + offset - eye * 0.5, eye_y, eye, eye), EYE_COLOR, True)

        for bullet in self.bullets:
            bullet.render()

    def destroy(self) -> None:
        self.destroyed = True

    def _shoot(self) -> None:
        bullet = Bullet(self.graphics)
        bullet.position = Vec2(self.position.x, self.position.y + self.height * 0.5)
        bullet.velocity = Vec2(0.0, self.bullet_speed)
        self.bullets.append(bullet)
        self.shoot_cooldown = self.shoot_interval

    def _update_bullets(self, delta_time: float) -> None:
        for bullet in self.bullets:
            bullet.update(delta_time)
        self.bullets = [b for b in self.bullets if not (b.destroyed or b.is_out_of_bounds())]