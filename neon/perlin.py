"""Gradient (Perlin) noise."""

from __future__ import annotations

import math
import random
from itertools import product

from neon.vec3 import Vec3

POINT_COUNT = 256
_CORNERS = tuple(product((0, 1), repeat=3))


def _random_unit_vector(rng: random.Random) -> Vec3:
    while True:
        p = Vec3(*(2.0 * rng.random() - 1.0 for _ in range(3)))
        length_squared = p.length_squared()
        if 1e-160 <= length_squared <= 1.0:
            return p / math.sqrt(length_squared)


def _permutation(rng: random.Random) -> list[int]:
    perm = list(range(POINT_COUNT))
    for i in range(POINT_COUNT - 1, 0, -1):
        target = rng.getrandbits(32) % i
        perm[target], perm[i] = perm[i], perm[target]
    return perm


def _hermite(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class PerlinNoise:
    """Lattice gradient noise with random unit gradients."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self._gradients = tuple(_random_unit_vector(rng) for _ in range(POINT_COUNT))
        self._perm_x = _permutation(rng)
        self._perm_y = _permutation(rng)
        self._perm_z = _permutation(rng)

    def noise(self, pos: Vec3) -> float:
        """Noise value at `pos`, in `[-1, 1]`."""
        fx, fy, fz = math.floor(pos.x), math.floor(pos.y), math.floor(pos.z)
        u, v, w = pos.x - fx, pos.y - fy, pos.z - fz
        hu, hv, hw = _hermite(u), _hermite(v), _hermite(w)

        total = 0.0
        for di, dj, dk in _CORNERS:
            index = (
                self._perm_x[(fx + di) & 255]
                ^ self._perm_y[(fy + dj) & 255]
                ^ self._perm_z[(fz + dk) & 255]
            )
            weight = (
                (hu if di else 1.0 - hu)
                * (hv if dj else 1.0 - hv)
                * (hw if dk else 1.0 - hw)
            )
            total += weight * self._gradients[index].dot(Vec3(u - di, v - dj, w - dk))
        return total

    def turbulence(self, pos: Vec3, depth: int) -> float:
        """Absolute sum of `depth` octaves of noise."""
        acc = 0.0
        weight = 1.0
        for _ in range(depth):
            acc += weight * self.noise(pos)
            weight *= 0.5
            pos = pos * 2.0
        return abs(acc)