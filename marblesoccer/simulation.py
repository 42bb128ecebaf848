"""One time step of the field: walls, collisions and motion."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import combinations

from .ball import Ball, collision_adjust_positions, collision_adjust_velocity
from .playground import Playground, Vector2D


def handle_wall_collisions(balls: Iterable[Ball], playground: Playground) -> None:
    """Put balls that crossed a wall back inside and make them bounce off it."""
    for ball in balls:
        x, y = ball.location.x, ball.location.y
        vx, vy = ball.velocity.x, ball.velocity.y
        r = ball.radius

        if x - r < 0:
            x, vx = r, abs(vx)
        elif x + r > playground.width:
            x, vx = playground.width - r, -abs(vx)

        if y - r < 0:
            y, vy = r, abs(vy)
        elif y + r > playground.height:
            y, vy = playground.height - r, -abs(vy)

        ball.location = Vector2D(x, y)
        ball.velocity = Vector2D(vx, vy)


def handle_ball_collisions(balls: Sequence[Ball]) -> None:
    """Resolve every touching or overlapping pair of balls, in order."""
    for first, second in combinations(balls, 2):
        delta = first.location - second.location
        distance = math.hypot(delta.x, delta.y)
        contact = first.radius + second.radius
        if distance <= contact:
            collision_adjust_positions(first, second, distance)
            collision_adjust_velocity(first, second, contact)


def simulate(balls: Sequence[Ball], playground: Playground, dt: float) -> None:
    """Advance all balls by one time step of length dt."""
    handle_wall_collisions(balls, playground)
    handle_ball_collisions(balls)
    for ball in balls:
        ball.move(dt, playground.deceleration)
        ball.adjust_small_velocity()


def is_simulation_idle(balls: Iterable[Ball]) -> bool:
    """True when no ball has any velocity left."""
    return all(ball.velocity.x == 0 and ball.velocity.y == 0 for ball in balls)