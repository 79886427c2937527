"""2D vector, transform and bounding-volume primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; ValueError for zero or non-finite."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return self / length


@dataclass
class Transform:
    """Position and scale of an entity; scale doubles as its size."""

    translation: Vec2 = Vec2(0.0, 0.0)
    scale: Vec2 = Vec2(1.0, 1.0)
    z: float = 0.0

    def set_y(self, y: float) -> None:
        self.translation = Vec2(self.translation.x, y)


@dataclass(frozen=True)
class Aabb2d:
    """An axis-aligned bounding box given by its corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_center(cls, center: Vec2, half_size: Vec2) -> Aabb2d:
        return cls(center - half_size, center + half_size)

    def closest_point(self, point: Vec2) -> Vec2:
        return Vec2(
            min(max(point.x, self.min.x), self.max.x),
            min(max(point.y, self.min.y), self.max.y),
        )


@dataclass(frozen=True)
class BoundingCircle:
    """A circle used as a bounding volume."""

    center: Vec2
    radius: float

    def intersects(self, aabb: Aabb2d) -> bool:
        offset = aabb.closest_point(self.center) - self.center
        return offset.x * offset.x + offset.y * offset.y <= self.radius * self.radius