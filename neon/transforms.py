"""Wrappers that move or rotate another hittable object."""

from __future__ import annotations

import math
from itertools import product

from neon.aabb import AxisAlignedBoundingBox
from neon.hittable import HitRecord, Hittable
from neon.ray import Ray
from neon.vec3 import Interval, Vec3


class Translate(Hittable):
    """`inner` moved by `offset`; rays are moved the opposite way instead."""

    def __init__(self, inner: Hittable, offset: Vec3) -> None:
        self.inner = inner
        self.offset = offset
        self._bbox = inner.bounding_box().moved_by(offset)

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        record = self.inner.hit(moved, t_range)
        if record is None:
            return None
        return record.with_pos(record.pos + self.offset)

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._bbox


class RotateY(Hittable):
    """`inner` rotated about the Y axis by `angle` degrees."""

    def __init__(self, inner: Hittable, angle: float) -> None:
        self.inner = inner
        radians = math.radians(angle)
        self._sin = math.sin(radians)
        self._cos = math.cos(radians)

        box = inner.bounding_box()
        xs: list[float] = []
        zs: list[float] = []
        for x, z in product((box.x.start, box.x.end), (box.z.start, box.z.end)):
            xs.append(self._cos * x + self._sin * z)
            zs.append(-self._sin * x + self._cos * z)
        self._bbox = AxisAlignedBoundingBox.from_points(
            Vec3(min(xs), box.y.start, min(zs)), Vec3(max(xs), box.y.end, max(zs))
        )

    def _to_object(self, p: Vec3) -> Vec3:
        return Vec3(self._cos * p.x - self._sin * p.z, p.y, self._sin * p.x + self._cos * p.z)

    def _to_world(self, p: Vec3) -> Vec3:
        return Vec3(self._cos * p.x + self._sin * p.z, p.y, -self._sin * p.x + self._cos * p.z)

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        record = self.inner.hit(rotated, t_range)
        if record is None:
            return None
        return record.with_pos_and_normal(
            self._to_world(record.pos), self._to_world(record.normal).normalized()
        )

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._bbox