"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from neon.ray import Ray
from neon.vec3 import Interval, Vec3

_MIN_EXTENT = 0.0001


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _expand_to_minimum(interval: Interval) -> Interval:
    if interval.end - interval.start - _MIN_EXTENT >= 0.0:
        return interval
    return Interval(interval.start, interval.end + _MIN_EXTENT)


def _span(u: float, v: float) -> Interval:
    return _expand_to_minimum(Interval(min(u, v), max(u, v)))


def _merge(a: Interval, b: Interval) -> Interval:
    return _expand_to_minimum(Interval(min(a.start, b.start), max(a.end, b.end)))


@dataclass(frozen=True, slots=True)
class AxisAlignedBoundingBox:
    """A box given by one interval per axis."""

    x: Interval
    y: Interval
    z: Interval

    @classmethod
    def from_points(cls, start: Vec3, end: Vec3) -> AxisAlignedBoundingBox:
        """Box spanning two opposite corners, padded so no side is degenerate."""
        return cls(_span(start.x, end.x), _span(start.y, end.y), _span(start.z, end.z))

    @classmethod
    def empty(cls) -> AxisAlignedBoundingBox:
        zero = Interval(0.0, 0.0)
        return cls(zero, zero, zero)

    def moved_by(self, offset: Vec3) -> AxisAlignedBoundingBox:
        return AxisAlignedBoundingBox(
            self.x.moved_by(offset.x), self.y.moved_by(offset.y), self.z.moved_by(offset.z)
        )

    def merge(self, other: AxisAlignedBoundingBox) -> AxisAlignedBoundingBox:
        """Smallest box containing both boxes."""
        return AxisAlignedBoundingBox(
            _merge(self.x, other.x), _merge(self.y, other.y), _merge(self.z, other.z)
        )

    def longest_axis(self) -> Axis:
        len_x, len_y, len_z = self.x.length(), self.y.length(), self.z.length()
        if len_x > len_y:
            return Axis.X if len_x > len_z else Axis.Z
        return Axis.Y if len_y > len_z else Axis.Z

    def intersects_ray(self, ray: Ray, t_range: Interval) -> bool:
        t_min, t_max = t_range.start, t_range.end
        for axis, origin, direction in zip(Axis, ray.origin, ray.direction):
            interval = self.interval(axis)
            t0 = _divide(interval.start - origin, direction)
            t1 = _divide(interval.end - origin, direction)
            t_min = _fmax(t_min, _fmin(t0, t1))
            t_max = _fmin(t_max, _fmax(t0, t1))
            if t_max <= t_min:
                return False
        return True

    def interval(self, axis: Axis) -> Interval:
        return getattr(self, axis.value)

    def sort_key(self, axis: Axis) -> float:
        """Key ordering boxes by their lower bound on `axis`."""
        return self.interval(axis).start