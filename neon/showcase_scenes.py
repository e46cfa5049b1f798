"""Ready-made scenes showing textures, lights, boxes, volumes and transforms."""

from __future__ import annotations

import random
from os import PathLike

from neon.bvh import BvhTree
from neon.camera import Camera
from neon.color import Color
from neon.hittable import Hittable
from neon.hittable_list import HittableList
from neon.material import (
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Material,
    Metal,
)
from neon.medium import ConstantDensityMedium
from neon.quad import Quad, cuboid
from neon.random_vectors import random_vector3
from neon.scene import Scene, SceneContent, SceneOptions
from neon.sphere import MovingSphere, Sphere
from neon.sphere_scenes import DEFAULT_EARTHMAP_PATH
from neon.texture import ImageTexture, NoiseTexture
from neon.transforms import RotateY, Translate
from neon.vec3 import Vec3

_ORIGIN = Vec3(0.0, 0.0, 0.0)
_BLACK = Color(0.0, 0.0, 0.0)

BOXES_PER_SIDE = 20
STACKED_SPHERES = 1000


def _camera(
    samples_per_pixel: int | None,
    default_samples: int,
    *,
    width: int,
    aspect_ratio: float,
    max_bounce_depth: int,
    vertical_fov: float,
    center: Vec3,
    look_at: Vec3,
) -> Camera:
    return Camera(
        width=width,
        aspect_ratio=aspect_ratio,
        samples_per_pixel=default_samples if samples_per_pixel is None else samples_per_pixel,
        max_bounce_depth=max_bounce_depth,
        vertical_fov=vertical_fov,
        center=center,
        look_at=look_at,
    )


def _wide_camera(samples_per_pixel: int | None, center: Vec3, look_at: Vec3) -> Camera:
    return _camera(
        samples_per_pixel,
        100,
        width=1200,
        aspect_ratio=16.0 / 9.0,
        max_bounce_depth=50,
        vertical_fov=20.0,
        center=center,
        look_at=look_at,
    )


def _cornell_camera(samples_per_pixel: int | None, default_samples: int) -> Camera:
    return _camera(
        samples_per_pixel,
        default_samples,
        width=800,
        aspect_ratio=1.0,
        max_bounce_depth=80,
        vertical_fov=40.0,
        center=Vec3(278.0, 278.0, -800.0),
        look_at=Vec3(278.0, 278.0, 0.0),
    )


def scene_with_perlin_noise(samples_per_pixel: int | None = None) -> Scene:
    """A marble sphere resting on a marble ground."""
    materials = [Lambertian(NoiseTexture(4.0))]
    world = [
        Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, 0),
        Sphere(Vec3(0.0, 2.0, 0.0), 2.0, 0),
    ]
    content = SceneContent(materials, BvhTree(world))
    camera = _wide_camera(samples_per_pixel, Vec3(13.0, 2.0, 3.0), _ORIGIN)
    return Scene(content, camera, SceneOptions())


def scene_with_quads(samples_per_pixel: int | None = None) -> Scene:
    """Five coloured quads forming an open box around the view axis."""
    materials = [
        Lambertian(Color(1.0, 0.2, 0.2)),
        Lambertian(Color(0.2, 1.0, 0.2)),
        Lambertian(Color(0.2, 0.2, 1.0)),
        Lambertian(Color(1.0, 0.5, 0.0)),
        Lambertian(Color(0.2, 0.8, 0.8)),
    ]
    world = [
        Quad(Vec3(-3.0, -2.0, 5.0), Vec3(0.0, 0.0, -4.0), Vec3(0.0, 4.0, 0.0), 0),
        Quad(Vec3(-2.0, -2.0, 0.0), Vec3(4.0, 0.0, 0.0), Vec3(0.0, 4.0, 0.0), 1),
        Quad(Vec3(3.0, -2.0, 1.0), Vec3(0.0, 0.0, 4.0), Vec3(0.0, 4.0, 0.0), 2),
        Quad(Vec3(-2.0, 3.0, 1.0), Vec3(4.0, 0.0, 0.0), Vec3(0.0, 0.0, 4.0), 3),
        Quad(Vec3(-2.0, -3.0, 5.0), Vec3(4.0, 0.0, 0.0), Vec3(0.0, 0.0, -4.0), 4),
    ]
    content = SceneContent(materials, BvhTree(world))
    camera = _camera(
        samples_per_pixel,
        100,
        width=800,
        aspect_ratio=1.0,
        max_bounce_depth=50,
        vertical_fov=80.0,
        center=Vec3(0.0, 0.0, 9.0),
        look_at=_ORIGIN,
    )
    return Scene(content, camera, SceneOptions())


def scene_with_simple_light(samples_per_pixel: int | None = None) -> Scene:
    """A marble sphere lit by a square and a spherical light in the dark."""
    # Brighter than white so that it lights the objects around it.
    materials: list[Material] = [
        Lambertian(NoiseTexture(4.0)),
        DiffuseLight(Color(4.0, 4.0, 4.0)),
    ]
    world = [
        Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, 0),
        Sphere(Vec3(0.0, 2.0, 0.0), 2.0, 0),
        Quad(Vec3(3.0, 1.0, -2.0), Vec3(2.0, 0.0, 0.0), Vec3(0.0, 2.0, 0.0), 1),
        Sphere(Vec3(0.0, 7.0, 0.0), 2.0, 1),
    ]
    content = SceneContent(materials, BvhTree(world))
    camera = _wide_camera(samples_per_pixel, Vec3(26.0, 3.0, 6.0), Vec3(0.0, 2.0, 0.0))
    return Scene(content, camera, SceneOptions(background=_BLACK))


def _cornell_materials() -> list[Material]:
    return [
        DiffuseLight(Color(15.0, 15.0, 15.0)),
        Lambertian(Color(0.65, 0.05, 0.05)),
        Lambertian(Color(0.73, 0.73, 0.73)),
        Lambertian(Color(0.12, 0.45, 0.15)),
    ]


def _cornell_walls() -> list[Hittable]:
    return [
        Quad(Vec3(555.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), Vec3(0.0, 0.0, 555.0), 3),
        Quad(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), Vec3(0.0, 0.0, 555.0), 1),
        Quad(Vec3(0.0, 0.0, 0.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 0.0, 555.0), 2),
        Quad(Vec3(555.0, 555.0, 555.0), Vec3(-555.0, 0.0, 0.0), Vec3(0.0, 0.0, -555.0), 2),
        Quad(Vec3(0.0, 0.0, 555.0), Vec3(555.0, 0.0, 0.0), Vec3(0.0, 555.0, 0.0), 2),
        Quad(Vec3(343.0, 554.0, 332.0), Vec3(-130.0, 0.0, 0.0), Vec3(0.0, 0.0, -105.0), 0),
    ]


def _cornell_boxes() -> tuple[Hittable, Hittable]:
    """The smaller and the bigger box, rotated and moved into place."""
    bigger = cuboid(_ORIGIN, Vec3(165.0, 330.0, 165.0), 2)
    bigger = Translate(RotateY(bigger, 15.0), Vec3(265.0, 0.0, 295.0))
    smaller = cuboid(_ORIGIN, Vec3(165.0, 165.0, 165.0), 2)
    smaller = Translate(RotateY(smaller, -18.0), Vec3(130.0, 0.0, 65.0))
    return smaller, bigger


def scene_with_cornell_box(samples_per_pixel: int | None = None) -> Scene:
    """The classic Cornell box with two white blocks."""
    smaller, bigger = _cornell_boxes()
    world = [*_cornell_walls(), smaller, bigger]
    content = SceneContent(_cornell_materials(), BvhTree(world))
    camera = _cornell_camera(samples_per_pixel, 1500)
    return Scene(content, camera, SceneOptions(background=_BLACK))


def scene_with_fog_cornell_box(samples_per_pixel: int | None = None) -> Scene:
    """The Cornell box with its blocks replaced by white and black smoke."""
    materials = _cornell_materials()
    materials.append(Isotropic(Color(1.0, 1.0, 1.0)))
    materials.append(Isotropic(Color(0.0, 0.0, 0.0)))

    smaller, bigger = _cornell_boxes()
    world = [
        *_cornell_walls(),
        ConstantDensityMedium(smaller, 0.005, 4),
        ConstantDensityMedium(bigger, 0.005, 5),
    ]
    content = SceneContent(materials, BvhTree(world))
    camera = _cornell_camera(samples_per_pixel, 2500)
    return Scene(content, camera, SceneOptions(background=_BLACK))


def scene_with_all_effects(
    samples_per_pixel: int | None = None,
    image_path: str | PathLike[str] = DEFAULT_EARTHMAP_PATH,
) -> Scene:
    """Every kind of object, material and texture in one scene."""
    materials: list[Material] = []
    objects: list[Hittable] = []

    materials.append(Lambertian(Color(0.48, 0.83, 0.53)))
    ground_id = len(materials) - 1
    side = 100.0
    for i in range(BOXES_PER_SIDE):
        for j in range(BOXES_PER_SIDE):
            x0 = -1000.0 + i * side
            z0 = -1000.0 + j * side
            y1 = random.uniform(1.0, 101.0)
            objects.append(
                cuboid(Vec3(x0, 0.0, z0), Vec3(x0 + side, y1, z0 + side), ground_id)
            )

    materials.append(DiffuseLight(Color(7.0, 7.0, 7.0)))
    objects.append(
        Quad(
            Vec3(123.0, 554.0, 147.0),
            Vec3(300.0, 0.0, 0.0),
            Vec3(0.0, 0.0, 265.0),
            len(materials) - 1,
        )
    )

    materials.append(Lambertian(Color(0.7, 0.3, 0.1)))
    start = Vec3(400.0, 400.0, 200.0)
    objects.append(
        MovingSphere(start, start + Vec3(30.0, 0.0, 0.0), 50.0, len(materials) - 1)
    )

    materials.append(Dielectric(1.5))
    objects.append(Sphere(Vec3(260.0, 150.0, 45.0), 50.0, len(materials) - 1))

    materials.append(Metal(Color(0.8, 0.8, 0.9), 1.0))
    objects.append(Sphere(Vec3(0.0, 150.0, 145.0), 50.0, len(materials) - 1))

    materials.append(Lambertian(ImageTexture.open(image_path)))
    objects.append(Sphere(Vec3(400.0, 200.0, 400.0), 100.0, len(materials) - 1))

    materials.append(Lambertian(NoiseTexture(0.2)))
    objects.append(Sphere(Vec3(220.0, 280.0, 300.0), 80.0, len(materials) - 1))

    materials.append(Lambertian(Color(0.73, 0.73, 0.73)))
    white_id = len(materials) - 1
    stacked = HittableList(
        Sphere(random_vector3(0.0, 166.0), 10.0, white_id) for _ in range(STACKED_SPHERES)
    )
    objects.append(Translate(RotateY(stacked, 15.0), Vec3(-100.0, 270.0, 395.0)))

    content = SceneContent(materials, BvhTree(objects))
    camera = _camera(
        samples_per_pixel,
        5000,
        width=800,
        aspect_ratio=1.0,
        max_bounce_depth=80,
        vertical_fov=40.0,
        center=Vec3(478.0, 278.0, -600.0),
        look_at=Vec3(278.0, 278.0, 0.0),
    )
    return Scene(content, camera, SceneOptions(background=_BLACK))