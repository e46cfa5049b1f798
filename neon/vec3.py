"""Three-component vectors and closed numeric intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """A 3D vector, also used to represent points in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec3:
        """Return a unit vector with the same direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def reflect(self, normal: Vec3) -> Vec3:
        """Mirror this vector about the plane whose unit normal is `normal`."""
        return self - normal * (2.0 * self.dot(normal))

    def refract(self, normal: Vec3, etai_over_etat: float) -> Vec3:
        """Refract this unit vector through a surface with unit `normal`."""
        cos_theta = min(-self.dot(normal), 1.0)
        out_perpendicular = (self + normal * cos_theta) * etai_over_etat
        out_parallel = -normal * math.sqrt(abs(1.0 - out_perpendicular.length_squared()))
        return out_parallel + out_perpendicular


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed interval `[start, end]`."""

    start: float
    end: float

    def contains(self, value: float) -> bool:
        return self.start <= value <= self.end

    def surrounds(self, value: float) -> bool:
        return self.start < value < self.end

    def moved_by(self, offset: float) -> Interval:
        return Interval(self.start + offset, self.end + offset)

    def length(self) -> float:
        return self.end - self.start