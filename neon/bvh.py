"""Bounding volume hierarchy for fast ray intersection."""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Union

from neon.aabb import AxisAlignedBoundingBox
from neon.hittable import HitRecord, Hittable
from neon.hittable_list import HittableList, flatten_objects
from neon.ray import Ray
from neon.vec3 import Interval


class _Leaf:
    __slots__ = ("obj",)

    def __init__(self, obj: Hittable) -> None:
        self.obj = obj

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self.obj.bounding_box()

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        return self.obj.hit(ray, t_range)


class _Node:
    # Children are never missing; a lone object appears as the same leaf twice.
    __slots__ = ("left", "right", "bbox")

    def __init__(self, left: _BvhValue, right: _BvhValue) -> None:
        self.left = left
        self.right = right
        self.bbox = left.bounding_box().merge(right.bounding_box())

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self.bbox

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        if not self.bbox.intersects_ray(ray, t_range):
            return None
        hit_left = self.left.hit(ray, t_range)
        right_end = hit_left.t if hit_left is not None else t_range.end
        hit_right = self.right.hit(ray, Interval(t_range.start, right_end))
        return hit_right if hit_right is not None else hit_left


_BvhValue = Union[_Leaf, _Node]


def _split(objects: list[Hittable]) -> tuple[_BvhValue, _BvhValue]:
    if len(objects) == 1:
        leaf = _Leaf(objects[0])
        return leaf, leaf

    bbox = reduce(
        AxisAlignedBoundingBox.merge,
        (obj.bounding_box() for obj in objects),
        AxisAlignedBoundingBox.empty(),
    )
    axis = bbox.longest_axis()
    ordered = sorted(objects, key=lambda obj: obj.bounding_box().sort_key(axis))
    mid = len(ordered) // 2
    return _Node(*_split(ordered[:mid])), _Node(*_split(ordered[mid:]))


class BvhTree(Hittable):
    """A binary tree of bounding boxes over a fixed set of objects.

    Nested `HittableList`s are flattened before the tree is built.
    """

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("a BVH needs at least one object")
        if any(isinstance(item, HittableList) for item in items):
            items = flatten_objects(items)
        self._root = _Node(*_split(items))

    def hit(self, ray: Ray, t_range: Interval) -> HitRecord | None:
        return self._root.hit(ray, t_range)

    def bounding_box(self) -> AxisAlignedBoundingBox:
        return self._root.bounding_box()