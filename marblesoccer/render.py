"""Drawing the field with pygame and the interactive game loop."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from .ball import Ball
from .constants import FPS

BACKGROUND = (0, 0, 0)
TEAM1_COLOR = (255, 0, 0)
TEAM2_COLOR = (0, 255, 0)
BALL_COLOR = (255, 255, 255)
WINDOW_TITLE = "Marble soccer simulation"


def circle_points(x0: int, y0: int, radius: int) -> list[tuple[int, int]]:
    """Pixels of a circle outline, computed with the midpoint algorithm."""
    diameter = radius * 2
    x, y = radius - 1, 0
    tx, ty = 1, 1
    error = tx - diameter
    points: list[tuple[int, int]] = []

    while x >= y:
        points.extend(
            [
                (x0 + x, y0 - y),
                (x0 + x, y0 + y),
                (x0 - x, y0 - y),
                (x0 - x, y0 + y),
                (x0 + y, y0 - x),
                (x0 + y, y0 + x),
                (x0 - y, y0 - x),
                (x0 - y, y0 + x),
            ]
        )
        if error <= 0:
            y += 1
            error += ty
            ty += 2
        if error > 0:
            x -= 1
            tx += 2
            error += tx - diameter
    return points


def _draw_circle(surface: pygame.Surface, ball: Ball, color: tuple[int, int, int]) -> None:
    width, height = surface.get_size()
    for px, py in circle_points(int(ball.location.x), int(ball.location.y), int(ball.radius)):
        if 0 <= px < width and 0 <= py < height:
            surface.set_at((px, py), color)


def draw_scene(
    surface: pygame.Surface, team1: Iterable[Ball], team2: Iterable[Ball], ball: Ball
) -> None:
    """Clear the surface and outline both teams and the ball in their colours."""
    surface.fill(BACKGROUND)
    for player in team1:
        _draw_circle(surface, player, TEAM1_COLOR)
    for player in team2:
        _draw_circle(surface, player, TEAM2_COLOR)
    _draw_circle(surface, ball, BALL_COLOR)


def play_rendered(game) -> None:
    """Run the game in a window until it is closed."""
    screen = pygame.display.set_mode((game.playground.width, game.playground.height))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        game.step(verbose=False)
        draw_scene(screen, game.team1, game.team2, game.ball)
        pygame.display.flip()
        clock.tick(FPS)