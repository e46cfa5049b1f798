import math

import pytest

from neon.ray import Ray
from neon.vec3 import Vec3


def test_direction_is_normalised():
    ray = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 3.0, 4.0), 0.5)
    assert math.isclose(ray.direction.length(), 1.0)
    assert ray.direction.cross(Vec3(0.0, 3.0, 4.0)).length() < 1e-12


def test_at_zero_is_origin():
    origin = Vec3(1.0, 2.0, 3.0)
    assert Ray(origin, Vec3(1.0, 1.0, 1.0)).at(0.0) == origin


def test_at_distance_equals_t():
    origin = Vec3(1.0, 2.0, 3.0)
    ray = Ray(origin, Vec3(2.0, -1.0, 0.5))
    for t in (0.5, 2.0, -3.0):
        assert math.isclose((ray.at(t) - origin).length(), abs(t))


def test_time_is_kept():
    assert Ray(Vec3(), Vec3(1.0, 0.0, 0.0), 0.75).time == 0.75


def test_zero_direction_rejected():
    with pytest.raises(ValueError):
        Ray(Vec3(), Vec3(0.0, 0.0, 0.0))