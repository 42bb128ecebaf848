"""Game rules: team set-up, turns, goals and the headless game loops."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from itertools import count

from .ball import Ball
from .constants import (
    BALL_MASS,
    BALL_RADIUS,
    MAX_AXIS_VELOCITY,
    MIN_AXIS_VELOCITY,
    NUM_TEAM_PLAYERS,
    PLAYER_MASS,
    PLAYER_RADIUS,
    TIME_DELTA,
)
from .playground import Playground, Vector2D, compute_unit_vector
from .simulation import is_simulation_idle, simulate


class GameState(Enum):
    """Whether a shot is due or the field is still in motion."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass
class Score:
    """Goals scored by each team."""

    team1: int = 0
    team2: int = 0


class Game:
    """Two teams of marbles, a ball and the field they play on."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.playground = Playground()
        self.team1 = [Ball(PLAYER_RADIUS, PLAYER_MASS) for _ in range(NUM_TEAM_PLAYERS)]
        self.team2 = [Ball(PLAYER_RADIUS, PLAYER_MASS) for _ in range(NUM_TEAM_PLAYERS)]
        self.ball = Ball(BALL_RADIUS, BALL_MASS)
        self.balls = [*self.team1, *self.team2, self.ball]
        self.state = GameState.IDLE
        self.score = Score()
        self.turn = self.rng.randrange(2)
        self.initial_placing()

    def initial_placing(self) -> None:
        """Put every player and the ball back on its kick-off spot, at rest."""
        width = self.playground.width
        height = self.playground.height
        mid_x, mid_y = width // 2, height // 2
        keeper_x = 3 * BALL_RADIUS // 2
        back_x = 4 * BALL_RADIUS
        back_dy = 3 * BALL_RADIUS

        left = [
            (keeper_x, mid_y),
            (back_x, mid_y - back_dy),
            (back_x, mid_y + back_dy),
            (mid_x - 100, 150),
            (mid_x - 100, height - 150),
        ]
        right = [
            (width - keeper_x, mid_y),
            (width - back_x, mid_y - back_dy),
            (width - back_x, mid_y + back_dy),
            (mid_x + 100, 150),
            (mid_x + 100, height - 150),
        ]

        for player, (x, y) in zip(self.team1, left):
            player.location = Vector2D(float(x), float(y))
            player.velocity = Vector2D()
        for player, (x, y) in zip(self.team2, right):
            player.location = Vector2D(float(x), float(y))
            player.velocity = Vector2D()

        self.ball.radius = BALL_RADIUS
        self.ball.mass = BALL_MASS
        self.ball.location = Vector2D(float(mid_x), float(mid_y))
        self.ball.velocity = Vector2D()

    def update(self, verbose: bool = False) -> None:
        """Shoot a random player when idle; otherwise look for goals and for rest."""
        if self.state is GameState.IDLE:
            team = self.team1 if self.turn else self.team2
            player = team[self.rng.randrange(NUM_TEAM_PLAYERS)]
            vx = self.rng.randint(MIN_AXIS_VELOCITY, MAX_AXIS_VELOCITY)
            vy = self.rng.randint(MIN_AXIS_VELOCITY, MAX_AXIS_VELOCITY)
            player.velocity = Vector2D(float(vx), float(vy))
            self.turn = (self.turn + 1) % 2
            self.state = GameState.RUNNING
            return

        goal = check_who_scored(self.ball, self.playground)
        if goal:
            if goal == 1:
                self.score.team1 += 1
                self.turn = 0
            else:
                self.score.team2 += 1
                self.turn = 1
            if verbose:
                print(f"Score: {self.score.team1} - {self.score.team2}")
            self.initial_placing()

        if is_simulation_idle(self.balls):
            self.state = GameState.IDLE

    def step(self, verbose: bool = False) -> None:
        """Apply the rules once and advance the physics by one time step."""
        self.update(verbose)
        simulate(self.balls, self.playground, TIME_DELTA)


def check_who_scored(ball: Ball, playground: Playground) -> int:
    """Return 1 or 2 for the team that scored, or 0 when the ball is not in a net."""
    net_top = playground.height // 2 - playground.net_size // 2
    net_bottom = playground.height // 2 + playground.net_size // 2
    y = ball.location.y
    if net_top < y < net_bottom:
        if ball.location.x - ball.radius < 0:
            return 2
        if ball.location.x + ball.radius > playground.width:
            return 1
    return 0


def baseline_choose_velocity(player: Ball, ball: Ball) -> None:
    """Aim the player straight at the ball at the maximum axis speed."""
    direction = compute_unit_vector(ball.location - player.location)
    player.velocity = direction * MAX_AXIS_VELOCITY


def play_no_render(rng: random.Random | None = None, max_steps: int | None = None) -> Game:
    """Run a game without a display, printing the score at every goal."""
    game = Game(rng)
    steps = count() if max_steps is None else range(max_steps)
    for _ in steps:
        game.step(verbose=True)
    return game


def play_baseline_agent(rng: random.Random | None = None, steps: int = 3000) -> Game:
    """Run a game in which the first player of team one always chases the ball."""
    print("[Baseline Agent] Starting simulation...")
    game = Game(rng)
    agent = game.team1[0]
    for _ in range(steps):
        baseline_choose_velocity(agent, game.ball)
        game.step(verbose=False)
    print("[Baseline Agent] Finished.")
    return game