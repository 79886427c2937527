import math

import pytest

from pong.geometry import Aabb2d, BoundingCircle, Transform, Vec2


def test_vector_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(4.0, 3.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0


@pytest.mark.parametrize("vec", [Vec2(3.0, 4.0), Vec2(0.5, -0.5), Vec2(-7.0, 0.0)])
def test_normalize_has_unit_length(vec):
    unit = vec.normalize()
    assert math.isclose(unit.length(), 1.0)
    assert math.copysign(1.0, unit.x) == math.copysign(1.0, vec.x)
    assert math.copysign(1.0, unit.y) == math.copysign(1.0, vec.y)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_length_of_345_triangle():
    assert Vec2(3.0, 4.0).length() == 5.0


def test_aabb_from_center():
    box = Aabb2d.from_center(Vec2(1.0, 2.0), Vec2(3.0, 4.0))
    assert box.min == Vec2(-2.0, -2.0)
    assert box.max == Vec2(4.0, 6.0)


def test_closest_point_inside_is_identity():
    box = Aabb2d.from_center(Vec2(0.0, 0.0), Vec2(10.0, 10.0))
    point = Vec2(3.0, -4.0)
    assert box.closest_point(point) == point


def test_closest_point_outside_is_clamped():
    box = Aabb2d.from_center(Vec2(0.0, 0.0), Vec2(10.0, 10.0))
    assert box.closest_point(Vec2(20.0, 5.0)) == Vec2(10.0, 5.0)
    assert box.closest_point(Vec2(-20.0, -30.0)) == Vec2(-10.0, -10.0)


def test_circle_intersects_box():
    box = Aabb2d.from_center(Vec2(0.0, 0.0), Vec2(10.0, 10.0))
    assert BoundingCircle(Vec2(12.0, 0.0), 2.5).intersects(box)
    assert BoundingCircle(Vec2(0.0, 0.0), 1.0).intersects(box)
    assert not BoundingCircle(Vec2(13.0, 0.0), 2.5).intersects(box)
    assert not BoundingCircle(Vec2(12.0, 12.0), 2.5).intersects(box)


def test_transform_set_y_keeps_x():
    transform = Transform(translation=Vec2(5.0, 1.0))
    transform.set_y(9.0)
    assert transform.translation == Vec2(5.0, 9.0)
    assert transform.scale == Vec2(1.0, 1.0)