# marblesoccer

A small physics simulation of marble soccer. Two teams of five marbles and one ball
sit on a 960 × 640 pitch. Each short side has a net 120 units wide at its centre.
Whenever everything on the field has come to rest, one marble of the team whose turn
it is gets a random push of up to 500 units per axis. The marbles then roll and slow
down through constant friction. They bounce off the walls and collide elastically
with each other. A goal is scored when the ball crosses a short side within the
net's span. After a goal the pieces go back to their kick-off spots, and the team
that conceded shoots next.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
marblesoccer                   # headless simulation; prints "Score: A - B" after each goal
marblesoccer --render          # opens a pygame window and draws the match until it is closed
marblesoccer --agent baseline  # 3000 steps with team 1's first marble always chasing the ball
```

- The headless mode runs until you interrupt it.
- `--agent baseline` takes precedence over `--render`.
- Other arguments are ignored.
- In the window, team 1 is drawn in red, team 2 in green and the ball in white, as circle outlines.
- If pygame cannot set up the display, `--render` prints an error and exits with status 1.

## Library use

```python
import random

from marblesoccer.game import Game, play_baseline_agent, play_no_render

game = Game(random.Random(42))
for _ in range(1000):
    game.step(verbose=False)
print(game.score.team1, game.score.team2)

play_no_render(random.Random(1), max_steps=10_000)
play_baseline_agent(random.Random(1), steps=3000)
```

`Game.update` applies the rules once: it takes a shot when the game is idle, and
otherwise checks for goals and for rest. `Game.step` calls `update` and then advances
the physics by one time step of 0.01. `check_who_scored` returns 1 or 2 for the
scoring team, or 0. `baseline_choose_velocity` aims a player at the ball.

The building blocks are available on their own:

- `marblesoccer.constants`: field size, radii, masses, friction, time step and frame rate
- `marblesoccer.playground`: `Vector2D`, `Playground`, `compute_unit_vector`
- `marblesoccer.ball`: `Ball` (`move`, `speed`, `adjust_small_velocity`),
  `collision_adjust_positions`, `collision_adjust_velocity`
- `marblesoccer.simulation`: `simulate`, `handle_wall_collisions`,
  `handle_ball_collisions`, `is_simulation_idle`
- `marblesoccer.game`: `Game`, `GameState`, `Score`, `check_who_scored`,
  `baseline_choose_velocity`, `play_no_render`, `play_baseline_agent`
- `marblesoccer.render`: `circle_points`, `draw_scene`, `play_rendered`
- `marblesoccer.cli`: `parse_args`, `run_render`, `run_no_render`,
  `run_baseline_agent`, `main`

## What it does not do

- There is no human control. Every shot is random, except the baseline agent's marble.
- The window has no score display; the score is printed only in headless mode.
- Matches have no time limit or end condition other than the baseline run's fixed number of steps.