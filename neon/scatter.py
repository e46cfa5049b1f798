"""Constructors for rays leaving a surface after a hit."""

from __future__ import annotations

import math
import random

from neon.hittable import HitRecord
from neon.random_vectors import random_unit_vector3
from neon.ray import Ray

_DEGENERATE = 1e-8


def random_ray_on_hemisphere(ray: Ray, hit_record: HitRecord) -> Ray:
    """Random ray in the hemisphere around the hit normal (cosine weighted)."""
    direction = hit_record.normal + random_unit_vector3()
    if all(abs(c) < _DEGENERATE for c in direction):
        direction = hit_record.normal
    return Ray(hit_record.pos, direction, ray.time)


def reflected_ray(ray: Ray, hit_record: HitRecord) -> Ray:
    """Mirror reflection of `ray` about the hit normal."""
    return Ray(hit_record.pos, ray.direction.reflect(hit_record.normal), ray.time)


def fuzzed_ray(ray: Ray, fuzziness: float) -> Ray:
    """Perturb the direction by a random vector of length `fuzziness`."""
    if fuzziness == 0.0:
        return ray
    direction = ray.direction.normalized() + random_unit_vector3() * fuzziness
    return Ray(ray.origin, direction, ray.time)


def refracted_ray(ray: Ray, hit_record: HitRecord, refraction_index: float) -> Ray | None:
    """Refracted ray, or None when the ray must be reflected instead.

    Reflection happens on total internal reflection and, randomly, with the
    probability given by Schlick's approximation.
    """
    ratio = 1.0 / refraction_index if hit_record.front_face else refraction_index
    cos_theta = min(-ray.direction.dot(hit_record.normal), 1.0)
    sin_theta = math.sqrt(max(1.0 - cos_theta * cos_theta, 0.0))

    cannot_refract = ratio * sin_theta > 1.0
    if cannot_refract or schlick_reflectance(cos_theta, ratio) > random.random():
        return None

    direction = ray.direction.refract(hit_record.normal, ratio)
    return Ray(hit_record.pos, direction, ray.time)


def ray_in_random_unit_direction(ray: Ray, hit_record: HitRecord) -> Ray:
    """Ray from the hit point in a uniformly random direction."""
    return Ray(hit_record.pos, random_unit_vector3(), ray.time)


def schlick_reflectance(cos_theta: float, refraction_index: float) -> float:
    """Schlick's approximation of the probability that light reflects."""
    r0 = ((1.0 - refraction_index) / (1.0 + refraction_index)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos_theta) ** 5