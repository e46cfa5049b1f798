"""Textures mapping surface coordinates and positions to colours."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from os import PathLike

from PIL import Image

from neon.color import Color
from neon.perlin import PerlinNoise
from neon.vec3 import Vec3

DEFAULT_TURBULENCE_DEPTH = 7
DEFAULT_TURBULENCE_FACTOR = 10.0


class Texture(ABC):
    @abstractmethod
    def color_at(self, u: float, v: float, p: Vec3) -> Color:
        """Colour at texture coordinates `(u, v)` and world position `p`."""


class SolidColor(Texture):
    """The same colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def color_at(self, u: float, v: float, p: Vec3) -> Color:
        return self.albedo


class CheckerTexture(Texture):
    """3D checkerboard alternating two textures in cubes of side `scale`."""

    def __init__(self, scale: float, even: Texture, odd: Texture) -> None:
        self._inverse_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    def color_at(self, u: float, v: float, p: Vec3) -> Color:
        total = sum(math.floor(c * self._inverse_scale) for c in p)
        texture = self.even if total % 2 == 0 else self.odd
        return texture.color_at(u, v, p)


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return value
    return min(max(value, 0.0), 1.0)


def _to_index(value: float) -> int:
    return 0 if math.isnan(value) else int(value)


class ImageTexture(Texture):
    """Texture sampled from an RGB image; `v = 1` is the top row."""

    def __init__(self, image: Image.Image) -> None:
        rgb = image.convert("RGB")
        self.width, self.height = rgb.size
        self._data = rgb.tobytes()

    @classmethod
    def open(cls, path: str | PathLike[str]) -> ImageTexture:
        with Image.open(path) as image:
            return cls(image)

    def color_at(self, u: float, v: float, p: Vec3) -> Color:
        if self.width == 0 or self.height == 0:
            raise ValueError("invalid image in texture")
        u = _clamp_unit(u)
        v = 1.0 - _clamp_unit(v)
        x = _to_index(u * self.width)
        y = _to_index(v * self.height)
        if x >= self.width or y >= self.height:
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} image")
        offset = 3 * (y * self.width + x)
        r, g, b = self._data[offset : offset + 3]
        return Color(r / 255.0, g / 255.0, b / 255.0)


class NoiseTexture(Texture):
    """Marble-like grey texture driven by Perlin turbulence."""

    def __init__(
        self,
        scale: float,
        turbulence_depth: int = DEFAULT_TURBULENCE_DEPTH,
        turbulence_factor: float = DEFAULT_TURBULENCE_FACTOR,
        perlin: PerlinNoise | None = None,
    ) -> None:
        self.scale = scale
        self.turbulence_depth = turbulence_depth
        self.turbulence_factor = turbulence_factor
        self.perlin = perlin if perlin is not None else PerlinNoise()

    def color_at(self, u: float, v: float, p: Vec3) -> Color:
        turbulence = self.perlin.turbulence(p, self.turbulence_depth)
        factor = math.sin(self.scale * p.z + self.turbulence_factor * turbulence) + 1.0
        return Color(0.5, 0.5, 0.5) * factor