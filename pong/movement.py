"""Keyboard-driven paddle movement."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pong.constants import (
    BTM_WALL,
    PADDLE_PADDING,
    PADDLE_SIZE,
    PADDLE_SPEED,
    TOP_WALL,
    WALL_THICKNESS,
)
from pong.geometry import Transform
from pong.physics import World


class Key(Enum):
    """Keys the game listens to."""

    ARROW_UP = "up"
    ARROW_DOWN = "down"
    KEY_W = "w"
    KEY_S = "s"


_UP_KEYS = {Key.ARROW_UP, Key.KEY_W}
_DOWN_KEYS = {Key.ARROW_DOWN, Key.KEY_S}


def paddle_bounds() -> tuple[float, float]:
    """Lowest and highest y a paddle centre may take."""
    upper = TOP_WALL - WALL_THICKNESS / 2.0 - PADDLE_SIZE.y / 2.0 - PADDLE_PADDING
    lower = BTM_WALL + WALL_THICKNESS / 2.0 + PADDLE_SIZE.y / 2.0 + PADDLE_PADDING
    return lower, upper


def move_paddle(transform: Transform, direction: float, delta_time: float) -> None:
    """Move a paddle vertically, keeping it inside the arena."""
    new_y = transform.translation.y + direction * PADDLE_SPEED * delta_time
    lower, upper = paddle_bounds()
    transform.set_y(min(max(new_y, lower), upper))


def player_movement(world: World, delta_time: float, pressed_keys: Iterable[Key]) -> None:
    """Move every player paddle according to the keys held down."""
    pressed = set(pressed_keys)
    direction = 0.0
    if pressed & _UP_KEYS:
        direction += 1.0
    if pressed & _DOWN_KEYS:
        direction -= 1.0
    for paddle in world.players():
        move_paddle(paddle.transform, direction, delta_time)