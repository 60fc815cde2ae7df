"""Window setup and the main loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from .events import from_pygame
from .game import Game
from .graphics import Graphics

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
MAX_DELTA = 0.05


def clamp_delta(delta_time: float) -> float:
    """Cap a frame's time step so lag spikes do not break the physics."""
    return min(delta_time, MAX_DELTA)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="spaceinvaders", description="Play Space Invaders.")
    parser.parse_args(argv)

    try:
        pygame.display.init()
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error as exc:
        print(f"Window could not be created! Error: {exc}", file=sys.stderr)
        pygame.quit()
        return -1
    pygame.display.set_caption("Space Invaders")

    try:
        game = Game(Graphics(screen))
        game.initialize()

        running = True
        last_ticks = pygame.time.get_ticks()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                key_event = from_pygame(event)
                if key_event is not None:
                    game.handle_event(key_event)

            now = pygame.time.get_ticks()
            delta_time = clamp_delta((now - last_ticks) / 1000.0)
            last_ticks = now

            game.update(delta_time)
            game.render()
            pygame.time.delay(1)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())