"""Position, rotation and scale combined into a 2D affine matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Vec2


class Transform:
    """A 2D transform; rotation is in degrees."""

    def __init__(self) -> None:
        self.position = Vec2(0.0, 0.0)
        self.rotation = 0.0
        self.scale = Vec2(1.0, 1.0)

    @property
    def matrix(self) -> tuple[float, float, float, float, float, float]:
        """The matrix as (a, b, c, d, tx, ty) for [[a, c, tx], [b, d, ty], [0, 0, 1]]."""
        radians = math.radians(self.rotation)
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return (
            cos_a * self.scale.x,
            sin_a * self.scale.x,
            -sin_a * self.scale.y,
            cos_a * self.scale.y,
            self.position.x,
            self.position.y,
        )


@dataclass
class _Projection:
    width: float = 800.0
    height: float = 600.0


_projection = _Projection()


def update_projection_matrix(width: float, height: float) -> None:
    """Record the current screen size used for projection."""
    _projection.width = width
    _projection.height = height


def projection_size() -> tuple[float, float]:
    """Return the screen size last recorded for projection."""
    return (_projection.width, _projection.height)