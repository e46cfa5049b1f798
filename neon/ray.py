"""Rays with a normalised direction and an emission time."""

from __future__ import annotations

from neon.vec3 import Vec3


class Ray:
    """A ray `origin + t * direction`; the direction is stored normalised."""

    __slots__ = ("origin", "direction", "time")

    def __init__(self, origin: Vec3, direction: Vec3, time: float = 0.0) -> None:
        self.origin = origin
        self.direction = direction.normalized()
        self.time = time

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r}, time={self.time!r})"