"""Image dimensions and finished RGB images."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence

from PIL import Image

_U32_MAX = 2**32 - 1


@dataclass(frozen=True, slots=True)
class Dimensions:
    width: int = 0
    height: int = 0

    @classmethod
    def from_width(cls, width: int, aspect_ratio: float) -> Dimensions:
        """Derive the height from `width / aspect_ratio`, at least 1."""
        raw = width / aspect_ratio
        height = 0 if raw != raw else int(min(max(raw, 0.0), _U32_MAX))
        return cls(width, max(height, 1))

    def ratio(self) -> float:
        return self.width / self.height

    def all_elements(self) -> int:
        return self.width * self.height


class RenderedImage:
    """An RGB8 image whose pixels are stored row by row."""

    def __init__(
        self, pixels: Iterable[Sequence[int]], dimensions: Dimensions
    ) -> None:
        pixels = tuple(tuple(p) for p in pixels)
        if len(pixels) != dimensions.all_elements():
            raise ValueError("`pixels` length doesn't match dimensions")
        self.pixels = pixels
        self.dimensions = dimensions

    def as_bytes(self) -> bytes:
        return bytes(c for pixel in self.pixels for c in pixel)

    def save(self, path: str | PathLike[str]) -> None:
        """Encode the image in the format implied by the file extension."""
        size = (self.dimensions.width, self.dimensions.height)
        Image.frombytes("RGB", size, self.as_bytes()).save(path)