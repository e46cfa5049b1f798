[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neon"
version = "0.1.0"
description = "A path tracer with spheres, quads, volumes, textures and a BVH that renders scenes to image files"
requires-python = ">=3.10"
keywords = ["ray tracing", "path tracing", "rendering", "bvh", "perlin noise", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
neon = "neon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["neon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
