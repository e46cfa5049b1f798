"""Ready-made scenes built mostly from spheres."""

from __future__ import annotations

import random
from os import PathLike

from neon.bvh import BvhTree
from neon.camera import Camera
from neon.color import Color
from neon.hittable import Hittable
from neon.material import Dielectric, Lambertian, Material, Metal
from neon.random_vectors import random_vector3
from neon.scene import Scene, SceneContent, SceneOptions
from neon.sphere import MovingSphere, Sphere
from neon.texture import CheckerTexture, ImageTexture, SolidColor
from neon.vec3 import Vec3

DEFAULT_EARTHMAP_PATH = "assets/earthmap.jpg"
_ORIGIN = Vec3(0.0, 0.0, 0.0)


def random_materials(rows: int, cols: int) -> list[Material]:
    """`rows * cols` random materials: mostly diffuse, some metal, a little glass."""
    materials: list[Material] = []
    for _ in range(rows * cols):
        choice = random.random()
        if choice < 0.8:
            c = random_vector3(0.0, 1.0)
            materials.append(Lambertian(Color(c.x * c.x, c.y * c.y, c.z * c.z)))
        elif choice < 0.95:
            albedo = Color(*random_vector3(0.5, 1.0))
            materials.append(Metal(albedo, random.random()))
        else:
            materials.append(Dielectric(1.5))
    return materials


def _grid(rows: int, cols: int):
    half_rows = int(rows / 2.0)
    half_cols = int(cols / 2.0)
    for i in range(-half_rows, half_rows):
        for j in range(-half_cols, half_cols):
            start = Vec3(i + 0.9 * random.random(), 0.2, j + 0.9 * random.random())
            material_id = (i + half_rows) * rows + (j + half_rows)
            yield start, material_id


def random_spheres(rows: int, cols: int) -> list[Hittable]:
    """Small spheres scattered over a grid on the ground."""
    return [Sphere(center, 0.2, material_id) for center, material_id in _grid(rows, cols)]


def random_moving_spheres(rows: int, cols: int) -> list[Hittable]:
    """Like `random_spheres`, but each sphere bounces up by a random amount."""
    spheres: list[Hittable] = []
    for start, material_id in _grid(rows, cols):
        end = start + Vec3(0.0, random.random() / 2.0, 0.0)
        spheres.append(MovingSphere(start, end, 0.2, material_id))
    return spheres


def _camera(samples_per_pixel: int | None, default_samples: int, center: Vec3) -> Camera:
    return Camera(
        width=1200,
        aspect_ratio=16.0 / 9.0,
        samples_per_pixel=default_samples if samples_per_pixel is None else samples_per_pixel,
        max_bounce_depth=50,
        vertical_fov=20.0,
        center=center,
        look_at=_ORIGIN,
    )


def spheres_camera(samples_per_pixel: int | None = None) -> Camera:
    """Camera with a shallow depth of field used by the sphere field scenes."""
    return Camera(
        width=1200,
        aspect_ratio=16.0 / 9.0,
        samples_per_pixel=500 if samples_per_pixel is None else samples_per_pixel,
        max_bounce_depth=50,
        vertical_fov=20.0,
        center=Vec3(13.0, 2.0, 3.0),
        look_at=_ORIGIN,
        defocus_angle=0.6,
        focus_distance=10.0,
    )


def _feature_spheres(world: list[Hittable], material_count: int) -> None:
    world.append(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, material_count - 4))
    world.append(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, material_count - 3))
    world.append(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, material_count - 2))
    world.append(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, material_count - 1))


def _feature_materials(ground: Material) -> list[Material]:
    return [
        ground,
        Dielectric(1.5),
        Lambertian(Color(0.4, 0.2, 0.1)),
        Metal(Color(0.7, 0.6, 0.5), 0.0),
    ]


def _checker() -> CheckerTexture:
    return CheckerTexture(
        0.32, SolidColor(Color(0.2, 0.3, 0.1)), SolidColor(Color(0.9, 0.9, 0.9))
    )


def scene_with_spheres(
    rows: int = 24, cols: int = 24, samples_per_pixel: int | None = None
) -> Scene:
    """A field of random small spheres around three large ones."""
    materials = random_materials(rows, cols)
    materials.extend(_feature_materials(Lambertian(Color(0.5, 0.5, 0.5))))
    world = random_spheres(rows, cols)
    _feature_spheres(world, len(materials))
    content = SceneContent(materials, BvhTree(world))
    return Scene(content, spheres_camera(samples_per_pixel), SceneOptions())


def scene_with_moving_spheres(
    rows: int = 24, cols: int = 24, samples_per_pixel: int | None = None
) -> Scene:
    """Bouncing small spheres on a checkered ground around three large ones."""
    materials = random_materials(rows, cols)
    materials.extend(_feature_materials(Lambertian(_checker())))
    world = random_moving_spheres(rows, cols)
    _feature_spheres(world, len(materials))
    content = SceneContent(materials, BvhTree(world))
    return Scene(content, spheres_camera(samples_per_pixel), SceneOptions())


def scene_with_two_checker_spheres(samples_per_pixel: int | None = None) -> Scene:
    """Two large checkered spheres touching at the origin."""
    world = [
        Sphere(Vec3(0.0, -10.0, 0.0), 10.0, 0),
        Sphere(Vec3(0.0, 10.0, 0.0), 10.0, 0),
    ]
    content = SceneContent([Lambertian(_checker())], BvhTree(world))
    camera = _camera(samples_per_pixel, 100, Vec3(13.0, 2.0, 3.0))
    return Scene(content, camera, SceneOptions())


def scene_with_earthmap(
    samples_per_pixel: int | None = None,
    image_path: str | PathLike[str] = DEFAULT_EARTHMAP_PATH,
) -> Scene:
    """A unit globe textured with the image at `image_path`."""
    texture = ImageTexture.open(image_path)
    globe = Sphere(_ORIGIN, 1.0, 0)
    content = SceneContent([Lambertian(texture)], BvhTree([globe]))
    camera = _camera(samples_per_pixel, 100, Vec3(12.0, 0.3, 0.0))
    return Scene(content, camera, SceneOptions())