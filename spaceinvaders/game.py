"""The game session: spawning waves, resolving hits, scoring and drawing."""

from __future__ import annotations

import logging
import random

from .barrier import Barrier
from .bullet import SCREEN_HEIGHT, SCREEN_WIDTH, Bullet
from .enemy import Enemy
from .events import Key, KeyEvent
from .geometry import Rect
from .graphics import Color, Graphics
from .player import Player
from .text_renderer import FontLoadError, TextRenderer
from .ufo import UFO

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = Color(0, 0, 30, 255)
OVERLAY_COLOR = Color(50, 0, 0, 180)
TEXT_COLOR = Color(255, 255, 255)


class Game:
    """Owns every entity and advances, checks and draws them each frame."""

    font_path = "assets/fonts/DejaVuSans.ttf"
    font_size = 24

    enemy_columns = 8
    enemy_start_x = 100.0
    enemy_start_y = 50.0
    enemy_spacing_x = 70.0
    enemy_spacing_y = 50.0
    enemy_kill_line = 500.0
    enemy_points = 10

    barrier_count = 4
    barrier_y = 450.0
    barrier_start_x = 150.0
    barrier_spacing = 160.0

    def __init__(self, graphics: Graphics, rng: random.Random | None = None) -> None:
        self.graphics = graphics
        self.rng = rng if rng is not None else random.Random()
        self.text_renderer = TextRenderer(graphics)
        self.player: Player | None = None
        self.enemies: list[Enemy] = []
        self.barriers: list[Barrier] = []
        self.ufo: UFO | None = None
        self.game_time = 0.0
        self.game_over = False
        self.score = 0
        self.high_score = 0
        self.level = 1

    def initialize(self) -> None:
        """Create the player, barriers, UFO and the first wave."""
        try:
            self.text_renderer.load_font(self.font_path, self.font_size)
        except FontLoadError as exc:
            logger.warning("%s; using fallback text rendering", exc)

        self.player = Player(self.graphics)
        self.player.position.x = Player.start_x
        self.player.position.y = Player.start_y

        self._create_barriers()
        self.ufo = UFO(self.graphics, self.rng)
        self._spawn_enemies()

        self.game_over = False
        self.score = 0
        self.level = 1

    def handle_event(self, event: KeyEvent) -> None:
        """Restart on R after a game over; otherwise pass keys to the player."""
        if event.pressed and event.key is Key.R and self.game_over:
            self._restart()
        if not self.game_over and self.player is not None:
            self.player.handle_event(event)

    def update(self, delta_time: float) -> None:
        if self.game_over or self.player is None:
            return

        self.game_time += delta_time

        self.player.update(delta_time)
        for enemy in self.enemies:
            enemy.update(delta_time)
        for barrier in self.barriers:
            barrier.update(delta_time)
        if self.ufo is not None:
            self.ufo.update(delta_time)

        self.enemies = [enemy for enemy in self.enemies if not enemy.destroyed]

        if self.player.is_destroyed:
            self.game_over = True
            print(f"Game Over! Final Score: {self.score}")
            return

        if not self.enemies:
            self.level += 1
            self._spawn_enemies()

        self._check_collisions()

    def render(self) -> None:
        self.graphics.clear(BACKGROUND_COLOR)

        if self.player is not None and not self.player.is_destroyed:
            self.player.render()
        for enemy in self.enemies:
            enemy.render()
        for barrier in self.barriers:
            barrier.render()
        if self.ufo is not None:
            self.ufo.render()

        self._render_score()

        if self.game_over:
            self.graphics.draw_rect(
                Rect(0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT), OVERLAY_COLOR, True
            )
            centre = SCREEN_WIDTH / 2
            self.text_renderer.draw_text("GAME OVER", centre, 250.0, TEXT_COLOR, True)
            self.text_renderer.draw_text("PRESS R TO RESTART", centre, 300.0, TEXT_COLOR, True)
            self.text_renderer.draw_text(
                f"FINAL SCORE: {self.score}", centre, 350.0, TEXT_COLOR, True
            )

        self.graphics.present()

    def _restart(self) -> None:
        self.game_over = False
        self.high_score = max(self.high_score, self.score)
        self.score = 0
        self.level = 1
        self.enemies.clear()
        self._create_barriers()
        self._spawn_enemies()
        if self.player is not None:
            self.player.reset()

    def _render_score(self) -> None:
        text = f"SCORE: {self.score}   HIGH SCORE: {self.high_score}   LEVEL: {self.level}"
        self.text_renderer.draw_text(text, SCREEN_WIDTH / 2, 20.0, TEXT_COLOR, True)

    def _spawn_enemies(self) -> None:
        rows = 3 + (self.level - 1) // 2
        for row in range(rows):
            for col in range(self.enemy_columns):
                enemy = Enemy(self.graphics, self.rng)
                enemy.position.x = self.enemy_start_x + col * self.enemy_spacing_x
                enemy.position.y = self.enemy_start_y + row * self.enemy_spacing_y
                self.enemies.append(enemy)

    def _create_barriers(self) -> None:
        self.barriers = [
            Barrier(self.graphics, self.barrier_start_x + i * self.barrier_spacing, self.barrier_y)
            for i in range(self.barrier_count)
        ]

    def _hit_barriers(self, bullet: Bullet) -> None:
        for barrier in self.barriers:
            bullet_rect = bullet.bounds
            for index, brick in enumerate(barrier.bricks):
                if not brick.destroyed and bullet_rect.intersects(brick.rect):
                    barrier.damage_brick(index)
                    bullet.destroy()
                    break

    def _check_collisions(self) -> None:
        player = self.player
        if player is None or self.game_over:
            return

        for enemy in self.enemies:
            for bullet in player.bullets:
                if bullet.destroyed or enemy.destroyed:
                    continue
                if bullet.bounds.intersects(enemy.bounds):
                    enemy.destroy()
                    bullet.destroy()
                    self.score += self.enemy_points * self.level

            if not enemy.destroyed and enemy.position.y > self.enemy_kill_line:
                player.destroy()
                self.game_over = True

            for bullet in enemy.bullets:
                if not bullet.destroyed and not player.is_destroyed:
                    if bullet.bounds.intersects(player.bounds):
                        player.take_damage()
                        bullet.destroy()
                        if player.is_destroyed:
                            self.game_over = True
                if not bullet.destroyed:
                    self._hit_barriers(bullet)

        for bullet in player.bullets:
            if not bullet.destroyed:
                self._hit_barriers(bullet)

        ufo = self.ufo
        if ufo is not None and ufo.active and not ufo.destroyed:
            for bullet in player.bullets:
                if not bullet.destroyed and bullet.bounds.intersects(ufo.bounds):
                    ufo.destroy()
                    bullet.destroy()
                    self.score += ufo.score_value * self.level