"""Balls rolling on the field and the physics of their collisions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import MOVING_THRESHOLD
from .playground import Vector2D, compute_unit_vector


@dataclass
class Ball:
    """A round body with a centre location and a velocity."""

    radius: float
    mass: float
    location: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)

    def speed(self) -> float:
        """Magnitude of the velocity."""
        return self.velocity.magnitude()

    def move(self, dt: float, deceleration: float) -> None:
        """Advance the ball by dt under constant deceleration, stopping when speed runs out."""
        speed = self.speed()
        if deceleration != 0:
            max_time = speed / deceleration
            if max_time < dt:
                dt = max_time

        direction = compute_unit_vector(self.velocity)
        distance = speed * dt - 0.5 * deceleration * dt**2

        self.location = self.location + direction * distance
        self.velocity = direction * (speed - deceleration * dt)

    def adjust_small_velocity(self) -> None:
        """Zero each velocity component whose magnitude is below the moving threshold."""
        vx, vy = self.velocity.x, self.velocity.y
        self.velocity = Vector2D(
            0.0 if abs(vx) < MOVING_THRESHOLD else vx,
            0.0 if abs(vy) < MOVING_THRESHOLD else vy,
        )


def _normal(ball1: Ball, ball2: Ball, distance: float) -> Vector2D:
    if distance == 0:
        raise ValueError("balls with coincident centres have no collision normal")
    delta = ball2.location - ball1.location
    return Vector2D(delta.x / distance, delta.y / distance)


def collision_adjust_velocity(ball1: Ball, ball2: Ball, distance: float) -> None:
    """Apply an elastic collision along the line joining the two centres."""
    normal = _normal(ball1, ball2, distance)
    tangent = Vector2D(-normal.y, normal.x)

    tan_v1 = ball1.velocity.dot(tangent)
    tan_v2 = ball2.velocity.dot(tangent)
    norm_v1 = ball1.velocity.dot(normal)
    norm_v2 = ball2.velocity.dot(normal)

    m1, m2 = ball1.mass, ball2.mass
    total = m1 + m2
    new_norm_v1 = (norm_v1 * (m1 - m2) + 2.0 * m2 * norm_v2) / total
    new_norm_v2 = (norm_v2 * (m2 - m1) + 2.0 * m1 * norm_v1) / total

    ball1.velocity = tangent * tan_v1 + normal * new_norm_v1
    ball2.velocity = tangent * tan_v2 + normal * new_norm_v2


def collision_adjust_positions(ball1: Ball, ball2: Ball, distance: float) -> None:
    """Push two overlapping balls apart symmetrically so that they just touch."""
    normal = _normal(ball1, ball2, distance)
    overlap = 0.5 * (distance - ball1.radius - ball2.radius)
    shift = normal * overlap
    ball1.location = ball1.location + shift
    ball2.location = ball2.location - shift