"""A pinhole or thin-lens camera that renders a scene into an image."""

from __future__ import annotations

import math
import random
import sys

from tqdm import tqdm

from neon.color import Color
from neon.random_vectors import random_in_unit_disk
from neon.ray import Ray
from neon.rendered_image import Dimensions, RenderedImage
from neon.scene import SceneContent, SceneOptions
from neon.vec3 import Interval, Vec3

_BLACK = Color(0.0, 0.0, 0.0)
# Starting slightly above zero avoids a scattered ray re-hitting its own surface.
_HIT_RANGE = Interval(0.001, sys.float_info.max)


class Camera:
    """Camera looking from `center` towards `look_at`.

    `vertical_fov` is in degrees. `defocus_angle` (degrees) is the spread of
    rays through each pixel; `focus_distance` is the distance from the camera
    to the plane of perfect focus.
    """

    def __init__(
        self,
        width: int = 400,
        center: Vec3 = Vec3(0.0, 0.0, 0.0),
        look_at: Vec3 = Vec3(0.0, 0.0, -1.0),
        relative_up: Vec3 = Vec3(0.0, 1.0, 0.0),
        samples_per_pixel: int = 100,
        max_bounce_depth: int = 10,
        vertical_fov: float = 90.0,
        aspect_ratio: float = 16.0 / 9.0,
        defocus_angle: float = 0.0,
        focus_distance: float = 10.0,
    ) -> None:
        self.width = width
        self.center = center
        self.look_at = look_at
        self.relative_up = relative_up
        self.samples_per_pixel = samples_per_pixel
        self.max_bounce_depth = max_bounce_depth
        self.vertical_fov = vertical_fov
        self.aspect_ratio = aspect_ratio
        self.defocus_angle = defocus_angle
        self.focus_distance = focus_distance

        self.dimensions = Dimensions.from_width(width, aspect_ratio)

        h = math.tan(math.radians(vertical_fov) / 2.0)
        viewport_height = 2.0 * h * focus_distance
        # The real pixel ratio may differ from the requested aspect ratio.
        viewport_width = viewport_height * self.dimensions.ratio()

        self.at = (center - look_at).normalized()
        self.right = relative_up.cross(self.at).normalized()
        self.up = self.at.cross(self.right).normalized()

        viewport_horizontal = self.right * viewport_width
        viewport_vertical = self.up * -viewport_height

        self.pixel_delta_horizontal = viewport_horizontal / self.dimensions.width
        self.pixel_delta_vertical = viewport_vertical / self.dimensions.height

        viewport_upper_left = (
            center
            - self.at * focus_distance
            - viewport_horizontal / 2.0
            - viewport_vertical / 2.0
        )
        self.upper_left_pixel = viewport_upper_left + (
            self.pixel_delta_horizontal + self.pixel_delta_vertical
        ) * 0.5

        self.pixel_samples_scale = 1.0 / samples_per_pixel if samples_per_pixel else math.inf

        defocus_radius = focus_distance * math.tan(math.radians(defocus_angle / 2.0))
        self.defocus_horizontal = self.right * defocus_radius
        self.defocus_vertical = self.up * defocus_radius

    def render(
        self,
        content: SceneContent,
        options: SceneOptions,
        show_progress: bool = True,
    ) -> RenderedImage:
        """Render every pixel, row by row, averaging `samples_per_pixel` rays."""
        width, height = self.dimensions.width, self.dimensions.height
        pixels: list[tuple[int, int, int]] = []
        with tqdm(total=self.dimensions.all_elements(), disable=not show_progress) as bar:
            for j in range(height):
                for i in range(width):
                    total = sum(
                        (
                            self.ray_color(self.ray_through_pixel(i, j), content, options, 0)
                            for _ in range(self.samples_per_pixel)
                        ),
                        Color(0.0, 0.0, 0.0),
                    )
                    pixels.append((total * self.pixel_samples_scale).linear_to_gamma().to_u8())
                    bar.update()
        return RenderedImage(pixels, self.dimensions)

    def ray_color(
        self, ray: Ray, content: SceneContent, options: SceneOptions, depth: int
    ) -> Color:
        """Colour of the light arriving along `ray` after at most the remaining bounces."""
        if depth >= self.max_bounce_depth:
            return _BLACK

        record = content.bvh.hit(ray, _HIT_RANGE)
        if record is None:
            return options.background

        material = content.material_by_id(record.material_id)
        if material is None:
            raise LookupError(f"no material with id {record.material_id}")

        emitted = material.emitted(record.u, record.v, record.pos)
        scattering = material.scatter(ray, record)
        if scattering is None:
            return emitted
        incoming = self.ray_color(scattering.scattered_ray, content, options, depth + 1)
        return incoming * scattering.attenuation + emitted

    def ray_through_pixel(self, i: int, j: int) -> Ray:
        """Random ray from the defocus disk through a random point of pixel `(i, j)`."""
        offset_x = random.random() - 0.5
        offset_y = random.random() - 0.5
        pixel = (
            self.upper_left_pixel
            + self.pixel_delta_horizontal * (i + offset_x)
            + self.pixel_delta_vertical * (j + offset_y)
        )
        origin = self.center if self.defocus_angle <= 0.0 else self._defocus_disk_sample()
        return Ray(origin, pixel - origin, random.random())

    def _defocus_disk_sample(self) -> Vec3:
        x, y = random_in_unit_disk()
        return self.center + self.defocus_horizontal * x + self.defocus_vertical * y