"""Keyboard events in the form the game logic consumes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import pygame


class Key(enum.Enum):
    """The physical keys the game reacts to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    A = enum.auto()
    D = enum.auto()
    SPACE = enum.auto()
    R = enum.auto()
    OTHER = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key going down (pressed=True) or up (pressed=False)."""

    key: Key
    pressed: bool
    scancode: int = 0


_BY_SCANCODE = {
    pygame.KSCAN_LEFT: Key.LEFT,
    pygame.KSCAN_RIGHT: Key.RIGHT,
    pygame.KSCAN_A: Key.A,
    pygame.KSCAN_D: Key.D,
    pygame.KSCAN_SPACE: Key.SPACE,
    pygame.KSCAN_R: Key.R,
}

_BY_KEYCODE = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_r: Key.R,
}


def from_pygame(event) -> KeyEvent | None:
    """Turn a pygame key event into a KeyEvent; other events give None."""
    if event.type == pygame.KEYDOWN:
        pressed = True
    elif event.type == pygame.KEYUP:
        pressed = False
    else:
        return None

    scancode = getattr(event, "scancode", None)
    key = _BY_SCANCODE.get(scancode) if scancode is not None else None
    if key is None:
        key = _BY_KEYCODE.get(getattr(event, "key", None), Key.OTHER)
    return KeyEvent(key=key, pressed=pressed, scancode=scancode or 0)