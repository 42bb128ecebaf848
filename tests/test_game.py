import random

import pytest

from marblesoccer.ball import Ball
from marblesoccer.constants import MAX_AXIS_VELOCITY, NUM_TEAM_PLAYERS
from marblesoccer.game import (
    Game,
    GameState,
    baseline_choose_velocity,
    check_who_scored,
    play_baseline_agent,
    play_no_render,
)
from marblesoccer.playground import Playground, Vector2D


@pytest.fixture
def game():
    return Game(random.Random(1234))


def test_new_game_layout(game):
    assert len(game.balls) == 2 * NUM_TEAM_PLAYERS + 1
    assert game.balls[-1] is game.ball
    assert game.state is GameState.IDLE
    assert (game.score.team1, game.score.team2) == (0, 0)
    assert game.turn in (0, 1)
    assert game.ball.location == Vector2D(game.playground.width / 2, game.playground.height / 2)
    assert all(b.velocity == Vector2D() for b in game.balls)


def test_teams_are_mirrored(game):
    width = game.playground.width
    for left, right in zip(game.team1, game.team2):
        assert left.location.x == pytest.approx(width - right.location.x)
        assert left.location.y == right.location.y


def test_update_from_idle_shoots_one_player(game):
    turn = game.turn
    shooting_team = game.team1 if turn else game.team2
    game.update()
    assert game.state is GameState.RUNNING
    assert game.turn == (turn + 1) % 2
    moving = [b for b in game.balls if b.velocity != Vector2D()]
    assert len(moving) == 1
    assert moving[0] in shooting_team
    v = moving[0].velocity
    assert -MAX_AXIS_VELOCITY <= v.x <= MAX_AXIS_VELOCITY
    assert -MAX_AXIS_VELOCITY <= v.y <= MAX_AXIS_VELOCITY
    assert v.x == int(v.x) and v.y == int(v.y)


def test_check_who_scored():
    field = Playground()
    mid_y = field.height / 2
    assert check_who_scored(Ball(14, 4, Vector2D(5, mid_y)), field) == 2
    assert check_who_scored(Ball(14, 4, Vector2D(field.width - 5, mid_y)), field) == 1
    assert check_who_scored(Ball(14, 4, Vector2D(field.width / 2, mid_y)), field) == 0
    assert check_who_scored(Ball(14, 4, Vector2D(5, 30)), field) == 0


def test_goal_updates_score_and_resets(game, capsys):
    game.state = GameState.RUNNING
    game.ball.location = Vector2D(5, game.playground.height / 2)
    game.ball.velocity = Vector2D(-10, 0)
    game.update(verbose=True)
    assert game.score.team2 == 1
    assert game.score.team1 == 0
    assert game.turn == 1
    assert game.ball.location == Vector2D(game.playground.width / 2, game.playground.height / 2)
    assert game.state is GameState.IDLE
    assert capsys.readouterr().out == "Score: 0 - 1\n"


def test_goal_for_team_one(game):
    game.state = GameState.RUNNING
    game.ball.location = Vector2D(game.playground.width - 5, game.playground.height / 2)
    game.update()
    assert game.score.team1 == 1
    assert game.turn == 0


def test_baseline_choose_velocity_aims_at_ball():
    player = Ball(20, 12, Vector2D(10, 10))
    target = Ball(14, 4, Vector2D(40, 50))
    baseline_choose_velocity(player, target)
    assert player.velocity.magnitude() == pytest.approx(MAX_AXIS_VELOCITY)
    delta = target.location - player.location
    cross = player.velocity.x * delta.y - player.velocity.y * delta.x
    assert cross == pytest.approx(0.0, abs=1e-6)
    assert player.velocity.dot(delta) > 0


def test_baseline_choose_velocity_coincident_is_zero():
    player = Ball(20, 12, Vector2D(3, 3))
    baseline_choose_velocity(player, Ball(14, 4, Vector2D(3, 3)))
    assert player.velocity == Vector2D(0.0, 0.0)


def test_step_moves_shot_player(game):
    before = [b.location for b in game.balls]
    game.step()
    after = [b.location for b in game.balls]
    assert sum(1 for a, b in zip(before, after) if a != b) >= 1


def test_same_seed_is_deterministic():
    first = play_no_render(random.Random(7), max_steps=300)
    second = play_no_render(random.Random(7), max_steps=300)
    assert [b.location for b in first.balls] == [b.location for b in second.balls]
    assert first.score == second.score


def test_play_no_render_zero_steps_is_fresh():
    game = play_no_render(random.Random(3), max_steps=0)
    assert game.state is GameState.IDLE
    assert all(b.velocity == Vector2D() for b in game.balls)


def test_play_baseline_agent_messages(capsys):
    game = play_baseline_agent(random.Random(5), steps=20)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "[Baseline Agent] Starting simulation..."
    assert out[-1] == "[Baseline Agent] Finished."
    assert game.team1[0].location != Vector2D(21.0, 320.0) or game.team1[0].velocity != Vector2D()