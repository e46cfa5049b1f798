"""Flat parallelograms and boxes built from them."""

from __future__ import annotations

from neon.aabb import AxisAlignedBoundingBox
from neon.hittable import HitRecord, Hittable
from neon.hittable_list import HittableList
from neon.ray import Ray
from neon.vec3 import Interval, Vec3

_PARALLEL_EPSILON = 1e-8
_UNIT = Interval(0.0, 1.0)


class Quad(Hittable):
    """A parallelogram with corners `start`, `start + u`, `start + v` and `start + u + v`.

    It lies on the plane `n . p = d`, where `n` is the unit normal `u x v`.
    """

    def __init__(self, start: Vec3, u: Vec3, v: Vec3, material_id: int) -> None:
        n = u.cross(v)
        n_squared = n.length_squared()
        if n_squared == 0.0:
            raise ValueError("quad edges must be non-zero and not parallel")
        self.start = start
        self.u = u
        self.v = v
        self.material_id = material_id
        self.normal = n.normalized()
        self._w = n / n_squared
        self._plane_d = self.normal.dot(start)
        self._bbox = AxisAlignedBoundingBox.from_points(start, start + u + v).merge(
            AxisAlignedBoundingBox.from_points(start + u, start + v)
        )

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < _PARALLEL_EPSILON:
            return None

        t = (self._plane_d - self.normal.dot(ray.origin)) / denom
        if not t_range.contains(t):
            return None

        pos = ray.at(t)
        offset = pos - self.start
        alpha = self._w.dot(offset.cross(self.v))
        beta = self._w.dot(self.u.cross(offset))
        if not (_UNIT.contains(alpha) and _UNIT.contains(beta)):
            return None

        return HitRecord.from_ray(pos, t, self.normal, ray, self.material_id, alpha, beta)

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._bbox

    def __repr__(self) -> str:
        return (
            f"Quad(start={self.start!r}, u={self.u!r}, v={self.v!r}, "
            f"material_id={self.material_id!r})"
        )


def cuboid(start: Vec3, end: Vec3, material_id: int) -> HittableList:
    """Six quads forming the box with opposite corners `start` and `end`."""
    lo = Vec3(min(start.x, end.x), min(start.y, end.y), min(start.z, end.z))
    hi = Vec3(max(start.x, end.x), max(start.y, end.y), max(start.z, end.z))

    dx = Vec3(hi.x - lo.x, 0.0, 0.0)
    dy = Vec3(0.0, hi.y - lo.y, 0.0)
    dz = Vec3(0.0, 0.0, hi.z - lo.z)

    return HittableList(
        [
            Quad(Vec3(lo.x, lo.y, hi.z), dx, dy, material_id),  # front
            Quad(Vec3(hi.x, lo.y, hi.z), -dz, dy, material_id),  # right
            Quad(Vec3(hi.x, lo.y, lo.z), -dx, dy, material_id),  # back
            Quad(Vec3(lo.x, lo.y, lo.z), dz, dy, material_id),  # left
            Quad(Vec3(lo.x, hi.y, hi.z), dx, -dz, material_id),  # top
            Quad(Vec3(lo.x, lo.y, lo.z), dx, dz, material_id),  # bottom
        ]
    )