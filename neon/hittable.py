"""Ray hit records and the interface shared by every object that rays can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from neon.aabb import AxisAlignedBoundingBox
from neon.ray import Ray
from neon.vec3 import Interval, Vec3


@dataclass(frozen=True, slots=True)
class HitRecord:
    """Where and how a ray met a surface.

    `normal` always points against the incoming ray; `front_face` is true when
    the ray arrived from outside the object. `material_id` indexes the scene's
    materials and `(u, v)` are the surface texture coordinates.
    """

    pos: Vec3
    normal: Vec3
    t: float
    front_face: bool
    material_id: int
    u: float
    v: float

    @classmethod
    def from_ray(
        cls,
        pos: Vec3,
        t: float,
        outward_normal: Vec3,
        ray: Ray,
        material_id: int,
        u: float,
        v: float,
    ) -> HitRecord:
        """Build a record, orienting the unit `outward_normal` against `ray`."""
        front_face = ray.direction.dot(outward_normal) < 0.0
        normal = outward_normal if front_face else -outward_normal
        return cls(pos, normal, t, front_face, material_id, u, v)

    def with_pos(self, pos: Vec3) -> HitRecord:
        return replace(self, pos=pos)

    def with_pos_and_normal(self, pos: Vec3, normal: Vec3) -> HitRecord:
        return replace(self, pos=pos, normal=normal)


class Hittable(ABC):
    """Anything a ray can be intersected with."""

    @abstractmethod
    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        """Return the nearest hit with `t` inside `t_range`, or None."""

    @abstractmethod
    def bounding_box(self) -> AxisAlignedBoundingBox:
        """Return a box enclosing the whole object."""