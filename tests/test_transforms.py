import math

import pytest

from neon.ray import Ray
from neon.sphere import Sphere
from neon.transforms import RotateY, Translate
from neon.vec3 import Interval, Vec3

FORWARD = Interval(0.001, math.inf)


def test_translate_hit_matches_moved_inner_hit():
    inner = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, 2)
    offset = Vec3(10.0, 0.0, 0.0)
    moved = Translate(inner, offset)
    direction = Vec3(0.0, 0.0, -1.0)

    record = moved.hit(Ray(Vec3(10.0, 0.0, 5.0), direction), FORWARD)
    expected = inner.hit(Ray(Vec3(0.0, 0.0, 5.0), direction), FORWARD)
    assert record is not None and expected is not None
    assert tuple(record.pos) == pytest.approx(tuple(expected.pos + offset))
    assert record.t == pytest.approx(expected.t)
    assert record.material_id == 2


def test_translate_moves_bounding_box():
    inner = Sphere(Vec3(1.0, 2.0, 3.0), 1.0, 0)
    offset = Vec3(10.0, -4.0, 0.5)
    box = Translate(inner, offset).bounding_box()
    inner_box = inner.bounding_box()
    assert box.x.start == pytest.approx(inner_box.x.start + offset.x)
    assert box.y.end == pytest.approx(inner_box.y.end + offset.y)
    assert box.z.start == pytest.approx(inner_box.z.start + offset.z)


def test_translate_original_position_is_missed():
    moved = Translate(Sphere(Vec3(0.0, 0.0, 0.0), 1.0, 0), Vec3(10.0, 0.0, 0.0))
    assert moved.hit(Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0)), FORWARD) is None


def test_rotate_zero_is_identity():
    inner = Sphere(Vec3(2.0, 1.0, -3.0), 1.0, 0)
    ray = Ray(Vec3(0.0, 0.0, 5.0), Vec3(2.0, 1.0, -8.0))
    record = RotateY(inner, 0.0).hit(ray, FORWARD)
    expected = inner.hit(ray, FORWARD)
    assert record is not None and expected is not None
    assert tuple(record.pos) == pytest.approx(tuple(expected.pos))
    assert tuple(record.normal) == pytest.approx(tuple(expected.normal))


def test_rotation_and_inverse_rotation_cancel():
    inner = Sphere(Vec3(2.0, 1.0, -3.0), 1.0, 0)
    twice = RotateY(RotateY(inner, 37.0), -37.0)
    ray = Ray(Vec3(0.0, 0.0, 5.0), Vec3(2.0, 1.0, -8.0))
    record = twice.hit(ray, FORWARD)
    expected = inner.hit(ray, FORWARD)
    assert record is not None and expected is not None
    assert tuple(record.pos) == pytest.approx(tuple(expected.pos))
    assert record.t == pytest.approx(expected.t)


def test_rotate_ninety_degrees_moves_sphere_onto_negative_z():
    rotated = RotateY(Sphere(Vec3(5.0, 0.0, 0.0), 1.0, 0), 90.0)
    record = rotated.hit(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0)), FORWARD)
    assert record is not None
    assert (record.pos - Vec3(0.0, 0.0, -5.0)).length() == pytest.approx(1.0)
    assert record.normal.length() == pytest.approx(1.0)
    assert record.normal.dot(Vec3(0.0, 0.0, -1.0)) < 0.0


def test_rotate_half_turn_mirrors_box():
    inner = Sphere(Vec3(5.0, 0.0, 2.0), 1.0, 0)
    box = RotateY(inner, 180.0).bounding_box()
    inner_box = inner.bounding_box()
    assert box.x.start == pytest.approx(-inner_box.x.end)
    assert box.x.end == pytest.approx(-inner_box.x.start)
    assert box.z.start == pytest.approx(-inner_box.z.end)
    assert box.y == inner_box.y