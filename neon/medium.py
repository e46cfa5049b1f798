"""Volumes of constant density, such as smoke or fog."""

from __future__ import annotations

import math
import random
import sys

from neon.aabb import AxisAlignedBoundingBox
from neon.hittable import HitRecord, Hittable
from neon.ray import Ray
from neon.vec3 import Interval, Vec3

_MIN_DENSITY = 0.0001
_EXIT_OFFSET = 0.0001
_ARBITRARY_NORMAL = Vec3(1.0, 0.0, 0.0)


class ConstantDensityMedium(Hittable):
    """A participating medium filling a boundary with an entry and an exit.

    Rays are scattered at a random distance inside the boundary; the hit uses
    the material at `phase_function_id`.
    """

    def __init__(self, boundary: Hittable, density: float, phase_function_id: int) -> None:
        if not abs(density) > _MIN_DENSITY:
            raise ValueError("density is too close to zero")
        self.boundary = boundary
        self.phase_function_id = phase_function_id
        self._negative_inverse_density = -1.0 / density

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        far = sys.float_info.max
        entry = self.boundary.hit(ray, Interval(-far, far))
        if entry is None:
            return None
        exit_ = self.boundary.hit(ray, Interval(entry.t + _EXIT_OFFSET, far))
        if exit_ is None:
            return None

        r_min = max(entry.t, t_range.start, 0.0)
        r_max = min(exit_.t, t_range.end)
        if r_min >= r_max:
            return None

        ray_length = ray.direction.length()
        distance_inside = (r_max - r_min) * ray_length
        sample = random.random()
        log_sample = math.log(sample) if sample > 0.0 else -math.inf
        hit_distance = self._negative_inverse_density * log_sample
        if hit_distance > distance_inside:
            return None

        t = r_min + hit_distance / ray_length
        return HitRecord.from_ray(
            ray.at(t), t, _ARBITRARY_NORMAL, ray, self.phase_function_id, 0.0, 0.0
        )

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self.boundary.bounding_box()