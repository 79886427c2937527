import math

import pytest

from pong.app import Game, main
from pong.constants import BALL_SPEED, BTM_WALL, LEFT_WALL, RIGHT_WALL, TOP_WALL, WALL_THICKNESS
from pong.geometry import Vec2
from pong.movement import Key
from pong.physics import World


def test_new_game_starts_with_zero_score_and_set_up_world():
    game = Game()
    assert game.score == 0
    assert game.elapsed == 0.0
    assert len(game.world.colliders()) == 6
    assert game.world.ball().transform.translation == Vec2(0.0, 0.0)


def test_step_moves_ball_by_velocity():
    game = Game()
    ball = game.world.ball()
    velocity = ball.velocity
    events = game.step(0.1)
    assert events == []
    assert math.isclose(ball.transform.translation.x, velocity.x * 0.1)
    assert math.isclose(ball.transform.translation.y, velocity.y * 0.1)
    assert math.isclose(game.elapsed, 0.1)


def test_computer_paddles_follow_ball_after_reaction():
    game = Game()
    game.step(0.5)
    ball_y = game.world.ball().transform.translation.y
    for paddle in game.world.computers():
        state = paddle.computer_state
        assert state.last_reaction_time == pytest.approx(0.5)
        assert abs(state.target_y - ball_y) <= 0.25
        assert paddle.transform.translation.y == pytest.approx(state.target_y)


def test_paddles_idle_before_reaction_time():
    game = Game()
    game.step(0.1, [Key.ARROW_UP])
    for paddle in game.world.computers():
        assert paddle.transform.translation.y == 0.0
        assert paddle.computer_state.last_reaction_time == 0.0


def test_ball_stays_inside_arena():
    game = Game()
    limit_x = RIGHT_WALL + WALL_THICKNESS / 2.0
    limit_y = TOP_WALL + WALL_THICKNESS / 2.0
    seen_collision = False
    for _ in range(64 * 10):
        if game.step(1.0 / 64.0):
            seen_collision = True
        pos = game.world.ball().transform.translation
        assert LEFT_WALL - WALL_THICKNESS / 2.0 <= pos.x <= limit_x
        assert BTM_WALL - WALL_THICKNESS / 2.0 <= pos.y <= limit_y
        assert math.isclose(game.world.ball().velocity.length(), BALL_SPEED)
    assert seen_collision


def test_step_on_empty_world_reports_no_collisions():
    game = Game(world=World())
    assert game.step(0.25) == []
    assert game.elapsed == 0.25


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2