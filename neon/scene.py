"""Scenes: the objects and materials to render, the camera and render options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from neon.bvh import BvhTree
from neon.color import Color
from neon.material import Material
from neon.rendered_image import RenderedImage

if TYPE_CHECKING:
    from neon.camera import Camera


@dataclass(frozen=True, slots=True)
class SceneOptions:
    """Render-wide settings; `background` is the colour of rays that hit nothing."""

    background: Color = Color(0.7, 0.8, 1.0)


class SceneContent:
    """Scene geometry and the materials it refers to by index."""

    def __init__(self, materials: Iterable[Material], bvh: BvhTree) -> None:
        self.materials = tuple(materials)
        self.bvh = bvh

    def material_by_id(self, material_id: int) -> Material | None:
        if 0 <= material_id < len(self.materials):
            return self.materials[material_id]
        return None


class Scene:
    def __init__(
        self,
        content: SceneContent,
        camera: Camera,
        options: SceneOptions | None = None,
    ) -> None:
        self.content = content
        self.camera = camera
        self.options = options if options is not None else SceneOptions()

    def render(self) -> RenderedImage:
        return self.camera.render(self.content, self.options)