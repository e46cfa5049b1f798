"""A plain collection of hittable objects."""

from __future__ import annotations

from typing import Iterable, Iterator

from neon.aabb import AxisAlignedBoundingBox
from neon.hittable import HitRecord, Hittable
from neon.ray import Ray
from neon.vec3 import Interval


def flatten_objects(objects: Iterable[Hittable]) -> list[Hittable]:
    """Return all objects, with nested lists replaced by their contents."""
    flat: list[Hittable] = []
    for item in objects:
        if isinstance(item, HittableList):
            flat.extend(item.flattened())
        else:
            flat.append(item)
    return flat


class HittableList(Hittable):
    """Objects tested one after another for the nearest hit.

    The bounding box starts from the empty box at the origin, so it always
    contains the origin.
    """

    def __init__(self, items: Iterable[Hittable] = ()) -> None:
        self._items: list[Hittable] = []
        self._bbox = AxisAlignedBoundingBox.empty()
        for item in items:
            self.add(item)

    def add(self, item: Hittable) -> None:
        self._bbox = self._bbox.merge(item.bounding_box())
        self._items.append(item)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def flattened(self) -> list[Hittable]:
        return flatten_objects(self._items)

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_t = t_range.end
        for item in self._items:
            record = item.hit(ray, Interval(t_range.start, closest_t))
            if record is not None:
                closest = record
                closest_t = record.t
        return closest

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._bbox