"""Building the arena: walls, paddles and the ball."""

from __future__ import annotations

import logging
from enum import Enum

from pong.ai import ComputerState, Difficulty
from pong.constants import (
    BALL_COLOR,
    BALL_SPEED,
    BTM_WALL,
    COMPUTER_COLOR,
    INITIAL_BALL_DIRECTION,
    LEFT_WALL,
    PADDLE_PADDING,
    PADDLE_SIZE,
    PLAYER_COLOR,
    RIGHT_WALL,
    TOP_WALL,
    WALL_COLOR,
    WALL_THICKNESS,
)
from pong.geometry import Transform, Vec2
from pong.physics import Entity, World

log = logging.getLogger(__name__)


class WallLocation(Enum):
    """The four walls around the arena."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"

    def position(self) -> Vec2:
        """Centre of the wall."""
        if self is WallLocation.LEFT:
            return Vec2(LEFT_WALL, 0.0)
        if self is WallLocation.RIGHT:
            return Vec2(RIGHT_WALL, 0.0)
        if self is WallLocation.BOTTOM:
            return Vec2(0.0, BTM_WALL)
        return Vec2(0.0, TOP_WALL)

    def size(self) -> Vec2:
        """Width and height of the wall."""
        arena_height = TOP_WALL - BTM_WALL
        arena_width = RIGHT_WALL - LEFT_WALL
        if arena_height <= 0.0 or arena_width <= 0.0:
            raise ValueError("arena must have a positive width and height")

        if self in (WallLocation.LEFT, WallLocation.RIGHT):
            return Vec2(WALL_THICKNESS, arena_height + WALL_THICKNESS)
        return Vec2(arena_width + WALL_THICKNESS, WALL_THICKNESS)


def make_wall(location: WallLocation) -> Entity:
    """A collidable wall entity at the given location."""
    return Entity(
        transform=Transform(translation=location.position(), scale=location.size()),
        wall=True,
        collider=True,
        color=WALL_COLOR,
    )


def _paddle(x: float, color: tuple[float, float, float]) -> Entity:
    return Entity(
        transform=Transform(translation=Vec2(x, 0.0), scale=PADDLE_SIZE),
        paddle=True,
        collider=True,
        computer=True,
        computer_state=ComputerState(Difficulty.MEDIUM),
        color=color,
    )


def setup(world: World) -> None:
    """Spawn both paddles, the ball and the four walls into ``world``."""
    paddle_x = LEFT_WALL + WALL_THICKNESS + PADDLE_PADDING

    world.spawn(_paddle(paddle_x, PLAYER_COLOR))
    world.spawn(_paddle(-paddle_x, COMPUTER_COLOR))
    world.spawn(
        Entity(
            transform=Transform(translation=Vec2(0.0, 0.0)),
            ball=True,
            velocity=INITIAL_BALL_DIRECTION.normalize() * BALL_SPEED,
            color=BALL_COLOR,
        )
    )
    for location in (
        WallLocation.BOTTOM,
        WallLocation.TOP,
        WallLocation.LEFT,
        WallLocation.RIGHT,
    ):
        world.spawn(make_wall(location))

    log.info("Setup steps complete.")