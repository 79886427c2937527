"""Entities, the world that holds them, motion and ball collisions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pong.constants import BALL_DIAMETER
from pong.geometry import Aabb2d, BoundingCircle, Transform, Vec2

log = logging.getLogger(__name__)


class Collision(Enum):
    """Side of a collider that the ball struck."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(eq=False)
class Entity:
    """A game object: a transform plus the components it carries."""

    transform: Transform = field(default_factory=Transform)
    velocity: Vec2 | None = None
    paddle: bool = False
    player: bool = False
    computer: bool = False
    ball: bool = False
    collider: bool = False
    wall: bool = False
    computer_state: Any = None
    color: tuple[float, float, float] | None = None


@dataclass
class World:
    """All entities in the game."""

    entities: list[Entity] = field(default_factory=list)

    def spawn(self, entity: Entity) -> Entity:
        self.entities.append(entity)
        return entity

    def ball(self) -> Entity:
        """The single ball; LookupError unless there is exactly one."""
        balls = [e for e in self.entities if e.ball]
        if len(balls) != 1:
            raise LookupError(f"expected exactly one ball, found {len(balls)}")
        return balls[0]

    def colliders(self) -> list[Entity]:
        return [e for e in self.entities if e.collider]

    def computers(self) -> list[Entity]:
        return [e for e in self.entities if e.computer and e.computer_state is not None]

    def players(self) -> list[Entity]:
        return [e for e in self.entities if e.paddle and e.player]


def ball_collision(ball: BoundingCircle, bounding_box: Aabb2d) -> Collision | None:
    """Which side of the box the ball hit, or None if they do not touch."""
    if not ball.intersects(bounding_box):
        return None
    offset = ball.center - bounding_box.closest_point(ball.center)
    if abs(offset.x) > abs(offset.y):
        return Collision.LEFT if offset.x < 0.0 else Collision.RIGHT
    return Collision.TOP if offset.y > 0.0 else Collision.BOTTOM


def apply_velocity(world: World, delta: float) -> None:
    for entity in world.entities:
        if entity.velocity is not None:
            entity.transform.translation += entity.velocity * delta


def check_for_collisions(world: World) -> list[Collision]:
    """Bounce the ball off every collider it touches; return the collisions."""
    try:
        ball = world.ball()
    except LookupError:
        return []
    if ball.velocity is None:
        return []

    events: list[Collision] = []
    for collider in world.colliders():
        collision = ball_collision(
            BoundingCircle(ball.transform.translation, BALL_DIAMETER / 2.0),
            Aabb2d.from_center(collider.transform.translation, collider.transform.scale / 2.0),
        )
        if collision is None:
            continue
        events.append(collision)
        vx, vy = ball.velocity.x, ball.velocity.y
        log.info("Collision detected. Ball velocity: (%s, %s)", vx, vy)
        if (collision is Collision.LEFT and vx > 0.0) or (collision is Collision.RIGHT and vx < 0.0):
            vx = -vx
        if (collision is Collision.TOP and vy < 0.0) or (collision is Collision.BOTTOM and vy > 0.0):
            vy = -vy
        ball.velocity = Vec2(vx, vy)
    return events