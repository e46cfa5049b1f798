import math
import random
from unittest.mock import patch

import pytest

from neon.hittable import HitRecord
from neon.ray import Ray
from neon.scatter import (
    fuzzed_ray,
    random_ray_on_hemisphere,
    ray_in_random_unit_direction,
    reflected_ray,
    refracted_ray,
    schlick_reflectance,
)
from neon.vec3 import Vec3

UP = Vec3(0.0, 1.0, 0.0)
HIT_POS = Vec3(1.0, 0.0, 2.0)


def _hit(direction: Vec3, outward: Vec3 = UP, time: float = 0.3):
    ray = Ray(Vec3(0.0, 3.0, 0.0), direction, time)
    record = HitRecord.from_ray(HIT_POS, 1.0, outward, ray, 0, 0.0, 0.0)
    return ray, record


def test_reflected_ray_mirrors_direction():
    ray, record = _hit(Vec3(1.0, -1.0, 0.0))
    out = reflected_ray(ray, record)
    expected = Vec3(1.0, 1.0, 0.0).normalized()
    assert tuple(out.direction) == pytest.approx(tuple(expected), abs=1e-9)
    assert out.origin == HIT_POS
    assert out.time == ray.time


def test_hemisphere_ray_points_away_from_surface():
    random.seed(3)
    ray, record = _hit(Vec3(0.2, -1.0, 0.1))
    for _ in range(200):
        out = random_ray_on_hemisphere(ray, record)
        assert out.direction.dot(record.normal) >= -1e-12
        assert math.isclose(out.direction.length(), 1.0)
        assert out.origin == HIT_POS
        assert out.time == ray.time


def test_fuzzed_ray_without_fuzz_is_unchanged():
    ray = Ray(Vec3(), Vec3(0.0, 0.0, 1.0), 0.5)
    assert fuzzed_ray(ray, 0.0) is ray


def test_fuzzed_ray_stays_near_original():
    random.seed(11)
    ray = Ray(Vec3(1.0, 1.0, 1.0), Vec3(0.0, 0.0, 1.0), 0.5)
    for _ in range(100):
        out = fuzzed_ray(ray, 0.5)
        assert out.direction.dot(ray.direction) > 0.0
        assert out.origin == ray.origin
        assert out.time == ray.time


def test_refraction_with_matching_index_passes_straight():
    ray, record = _hit(Vec3(0.0, -1.0, 0.0))
    out = refracted_ray(ray, record, 1.0)
    assert out.origin == HIT_POS
    assert tuple(out.direction) == pytest.approx((0.0, -1.0, 0.0), abs=1e-9)


def test_total_internal_reflection_gives_none():
    ray, record = _hit(Vec3(1.0, 0.2, 0.0))
    assert record.front_face is False
    assert refracted_ray(ray, record, 1.5) is None


@patch("random.random", return_value=0.99)
def test_refraction_when_random_exceeds_reflectance(_mock):
    ray, record = _hit(Vec3(0.0, -1.0, 0.0))
    out = refracted_ray(ray, record, 1.5)
    assert out.origin == HIT_POS
    assert tuple(out.direction) == pytest.approx((0.0, -1.0, 0.0), abs=1e-9)


@patch("random.random", return_value=0.0)
def test_reflection_when_random_below_reflectance(_mock):
    ray, record = _hit(Vec3(0.0, -1.0, 0.0))
    assert refracted_ray(ray, record, 1.5) is None


def test_random_unit_direction_ray():
    random.seed(5)
    ray, record = _hit(Vec3(0.0, -1.0, 0.0))
    out = ray_in_random_unit_direction(ray, record)
    assert math.isclose(out.direction.length(), 1.0)
    assert out.origin == HIT_POS
    assert out.time == ray.time


def test_schlick_bounds():
    assert schlick_reflectance(1.0, 1.0) == 0.0
    assert schlick_reflectance(0.0, 1.5) == pytest.approx(1.0)
    for cos_theta in (0.0, 0.25, 0.5, 0.75, 1.0):
        value = schlick_reflectance(cos_theta, 1.5)
        assert 0.0 <= value <= 1.0


def test_schlick_decreases_with_cosine():
    values = [schlick_reflectance(c / 10.0, 1.5) for c in range(11)]
    assert values == sorted(values, reverse=True)