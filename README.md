# neon

A small path tracer that renders predefined 3D scenes to image files.
It supports diffuse, metallic, glass, emissive and fog materials; spheres
(including moving spheres for motion blur), quads and boxes; translation
and rotation about the Y axis; solid, checker, image and Perlin-noise
textures; depth of field; and a bounding volume hierarchy that speeds up
ray intersection.

## Installation

```
pip install .
```

Python 3.10 or later is required. Pillow is used to read textures and
write images, tqdm to show the progress bar.

## Rendering from the command line

```
neon OUTPUT_PATH SCENE [SAMPLES_PER_PIXEL]
```

- `OUTPUT_PATH` is the image to write. Its format follows from the file
  extension, for example `out.png`.
- `SCENE` is one of:
  - `spheres`: a field of random small spheres around three large ones
  - `moving_spheres`: the same field on a checkered ground, with the small
    spheres moving upward (motion blur)
  - `two_checker`: two spheres with a checker texture
  - `earthmap`: a globe textured with `assets/earthmap.jpg`
  - `perlin_noise`: spheres with a marble-like Perlin noise texture
  - `quads`: five coloured quads
  - `simple_light`: a noise-textured scene lit by emissive objects
  - `cornell_box`: the classic Cornell box with two rotated boxes
  - `fog_cornell_box`: the Cornell box with boxes made of smoke
  - `all_effects`: a scene combining every feature
- `SAMPLES_PER_PIXEL` is optional, a non-negative integer that overrides
  the scene's default number of rays per pixel (100 for most scenes, 500
  for the sphere fields, 1500 and 2500 for the Cornell boxes, 5000 for
  `all_effects`). Lower values render faster but look noisier.

Example:

```
neon cornell.png cornell_box 50
```

The `earthmap` and `all_effects` scenes read the texture
`assets/earthmap.jpg` relative to the current directory.

A progress bar is shown while the image renders. A wrong number of
arguments, an unknown scene name, an invalid sample count or a missing
texture file prints an error and the usage line to standard error and
exits with status 1; so does a failure to save the image.

## Using the library

Scenes are built from materials, objects and a camera:

```python
from neon.vec3 import Vec3
from neon.color import Color
from neon.material import Lambertian
from neon.sphere import Sphere
from neon.bvh import BvhTree
from neon.camera import Camera
from neon.scene import Scene, SceneContent, SceneOptions

materials = [Lambertian(Color(0.8, 0.3, 0.3))]
objects = [Sphere(Vec3(0.0, 0.0, -1.0), 0.5, 0)]

content = SceneContent(materials, BvhTree(objects))
camera = Camera(width=200, samples_per_pixel=20)
scene = Scene(content, camera, SceneOptions())

image = scene.render()
image.save("sphere.png")
```

Objects refer to materials by their index in the material list; a hit on
an object whose index has no material raises `LookupError` while
rendering.

Building blocks:

- `neon.material`: `Lambertian`, `Metal`, `Dielectric`, `DiffuseLight` and
  `Isotropic`. `Lambertian`, `DiffuseLight` and `Isotropic` take a texture
  or a plain `Color`.
- `neon.texture`: `SolidColor`, `CheckerTexture`, `ImageTexture` (built
  from a Pillow image or with `ImageTexture.open(path)`) and
  `NoiseTexture`.
- `neon.sphere`: `Sphere` and `MovingSphere`.
- `neon.quad`: `Quad` and `cuboid`, which returns the six faces of a box
  as a `HittableList`.
- `neon.transforms`: `Translate` and `RotateY` (angle in degrees).
- `neon.medium`: `ConstantDensityMedium`, a volume of fog or smoke inside
  a boundary object.
- `neon.hittable_list`: `HittableList`; `neon.bvh`: `BvhTree`.
- `neon.camera`: `Camera`, with `Camera.render(content, options,
  show_progress=True)` to render without going through a `Scene`.
- `neon.rendered_image`: `RenderedImage`, with `as_bytes()` and
  `save(path)`.

The ready-made scenes are the `scene_with_*` functions in
`neon.sphere_scenes` and `neon.showcase_scenes`. `scene_with_earthmap`
and `scene_with_all_effects` accept an `image_path` for the globe texture.

## Limitations

Rendering runs in pure Python on a single thread, one pixel after another.
Scenes at their default sizes and sample counts take a very long time;
pass a small `SAMPLES_PER_PIXEL`, or build a `Camera` with a small
`width`, for quick results. There is no interactive preview and no scene
file format: scenes are defined in Python.

## Running the tests

```
pip install .[test]
pytest
```