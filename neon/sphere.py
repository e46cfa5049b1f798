"""Static and moving spheres."""

from __future__ import annotations

import math

from neon.aabb import AxisAlignedBoundingBox
from neon.hittable import HitRecord, Hittable
from neon.ray import Ray
from neon.vec3 import Interval, Vec3


def sphere_uv(normal: Vec3) -> tuple[float, float]:
    """Texture coordinates of a point on the unit sphere.

    `u` in `[0, 1]` is the angle around the Y axis starting from X=-1;
    `v` in `[0, 1]` is the angle from Y=-1 to Y=1.
    """
    theta = math.acos(min(max(-normal.y, -1.0), 1.0))
    phi = math.atan2(-normal.z, normal.x) + math.pi
    return phi / (2.0 * math.pi), theta / math.pi


def _box_around(center: Vec3, radius: float) -> AxisAlignedBoundingBox:
    offset = Vec3(radius, radius, radius)
    return AxisAlignedBoundingBox.from_points(center - offset, center + offset)


class Sphere(Hittable):
    """A sphere; only the nearer intersection with a ray is considered."""

    def __init__(self, center: Vec3, radius: float, material_id: int) -> None:
        if not radius > 0.0:
            raise ValueError("radius must be positive")
        self.center = center
        self.radius = radius
        self.material_id = material_id
        self._bbox = _box_around(center, radius)

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        root = (h - math.sqrt(discriminant)) / a
        if not t_range.surrounds(root):
            return None

        hit_point = ray.at(root)
        outward_normal = (hit_point - self.center) / self.radius
        u, v = sphere_uv(outward_normal)
        return HitRecord.from_ray(hit_point, root, outward_normal, ray, self.material_id, u, v)

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._bbox

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius!r}, material_id={self.material_id!r})"


class MovingSphere(Hittable):
    """A sphere moving linearly from `start` (time 0) to `end` (time 1)."""

    def __init__(self, start: Vec3, end: Vec3, radius: float, material_id: int) -> None:
        if not radius > 0.0:
            raise ValueError("radius must be positive")
        self.start = start
        self.direction = end - start
        self.radius = radius
        self.material_id = material_id
        self._bbox = _box_around(start, radius).merge(_box_around(end, radius))

    def center_at(self, time: float) -> Vec3:
        return self.start + self.direction * time

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        return Sphere(self.center_at(ray.time), self.radius, self.material_id).hit(ray, t_range)

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._bbox