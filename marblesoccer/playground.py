"""Plane vectors and the playing field."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import DECELERATION, NET_SIZE, PLAYGROUND_HEIGHT, PLAYGROUND_WIDTH


@dataclass(frozen=True)
class Vector2D:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2D:
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass
class Playground:
    """Dimensions of the field, the size of the nets and the rolling friction."""

    width: int = PLAYGROUND_WIDTH
    height: int = PLAYGROUND_HEIGHT
    net_size: int = NET_SIZE
    deceleration: float = DECELERATION


def compute_unit_vector(vector: Vector2D) -> Vector2D:
    """Return the vector scaled to length one, or the zero vector for a zero input."""
    magnitude = vector.magnitude()
    if magnitude == 0.0:
        return Vector2D(0.0, 0.0)
    return Vector2D(vector.x / magnitude, vector.y / magnitude)