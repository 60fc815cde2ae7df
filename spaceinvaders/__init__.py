"""A Space Invaders arcade game built on pygame, with windowless game logic."""

__version__ = "0.1.0"