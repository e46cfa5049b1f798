"""Random vector sampling helpers."""

from __future__ import annotations

import math
import random

from neon.vec3 import Vec3

_MIN_LENGTH_SQUARED = 1e-160


def _uniform(low: float, high: float) -> float:
    return low + (high - low) * random.random()


def random_vector3(low: float, high: float) -> Vec3:
    """Return a vector whose components are uniform in `[low, high)`."""
    return Vec3(_uniform(low, high), _uniform(low, high), _uniform(low, high))


def random_unit_vector3() -> Vec3:
    """Return a random unit vector, drawn by rejection from the unit ball."""
    while True:
        p = random_vector3(-1.0, 1.0)
        length_squared = p.length_squared()
        if _MIN_LENGTH_SQUARED <= length_squared <= 1.0:
            return p / math.sqrt(length_squared)


def random_in_unit_disk() -> tuple[float, float]:
    """Return a random point `(x, y)` inside the unit disk."""
    while True:
        x = _uniform(-1.0, 1.0)
        y = _uniform(-1.0, 1.0)
        if _MIN_LENGTH_SQUARED <= x * x + y * y <= 1.0:
            return (x, y)