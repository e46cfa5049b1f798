import math

from neon.aabb import Axis, AxisAlignedBoundingBox
from neon.ray import Ray
from neon.vec3 import Interval, Vec3

UNIT_BOX = AxisAlignedBoundingBox.from_points(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
FORWARD = Interval(0.001, math.inf)


def test_from_points_orders_bounds():
    box = AxisAlignedBoundingBox.from_points(Vec3(2.0, -1.0, 5.0), Vec3(-3.0, 4.0, 1.0))
    assert box.x == Interval(-3.0, 2.0)
    assert box.y == Interval(-1.0, 4.0)
    assert box.z == Interval(1.0, 5.0)


def test_degenerate_side_is_padded():
    box = AxisAlignedBoundingBox.from_points(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 0.0))
    assert box.z.start == 0.0
    assert math.isclose(box.z.end, 0.0001)
    assert box.x == Interval(0.0, 1.0)


def test_empty_box_is_zero():
    box = AxisAlignedBoundingBox.empty()
    assert all(box.interval(a) == Interval(0.0, 0.0) for a in Axis)


def test_merge_contains_both():
    a = AxisAlignedBoundingBox.from_points(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
    b = AxisAlignedBoundingBox.from_points(Vec3(-2.0, 0.5, 3.0), Vec3(-1.0, 2.0, 4.0))
    merged = a.merge(b)
    for axis in Axis:
        iv = merged.interval(axis)
        for box in (a, b):
            assert iv.start <= box.interval(axis).start
            assert iv.end >= box.interval(axis).end
    assert merged == b.merge(a)


def test_moved_by_shifts_every_axis():
    offset = Vec3(1.0, -2.0, 3.0)
    moved = UNIT_BOX.moved_by(offset)
    for axis, delta in zip(Axis, offset):
        assert moved.interval(axis) == UNIT_BOX.interval(axis).moved_by(delta)


def test_longest_axis():
    box = AxisAlignedBoundingBox.from_points(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 5.0, 2.0))
    assert box.longest_axis() is Axis.Y
    box = AxisAlignedBoundingBox.from_points(Vec3(0.0, 0.0, 0.0), Vec3(7.0, 5.0, 2.0))
    assert box.longest_axis() is Axis.X


def test_longest_axis_tie_prefers_z():
    assert UNIT_BOX.longest_axis() is Axis.Z


def test_ray_hits_box():
    ray = Ray(Vec3(-1.0, 0.5, 0.5), Vec3(1.0, 0.0, 0.0))
    assert UNIT_BOX.intersects_ray(ray, FORWARD)


def test_diagonal_ray_hits_box():
    ray = Ray(Vec3(-1.0, -1.0, -1.0), Vec3(1.0, 1.0, 1.0))
    assert UNIT_BOX.intersects_ray(ray, FORWARD)


def test_ray_misses_box():
    ray = Ray(Vec3(-1.0, 5.0, 0.5), Vec3(1.0, 0.0, 0.0))
    assert not UNIT_BOX.intersects_ray(ray, FORWARD)


def test_ray_pointing_away_misses():
    ray = Ray(Vec3(-1.0, 0.5, 0.5), Vec3(-1.0, 0.0, 0.0))
    assert not UNIT_BOX.intersects_ray(ray, FORWARD)


def test_short_range_misses():
    ray = Ray(Vec3(-1.0, 0.5, 0.5), Vec3(1.0, 0.0, 0.0))
    assert not UNIT_BOX.intersects_ray(ray, Interval(0.001, 0.5))


def test_sort_key_uses_lower_bound():
    box = AxisAlignedBoundingBox.from_points(Vec3(3.0, -1.0, 2.0), Vec3(4.0, 1.0, 9.0))
    assert box.sort_key(Axis.X) == 3.0
    assert box.sort_key(Axis.Y) == -1.0
    assert box.sort_key(Axis.Z) == 2.0