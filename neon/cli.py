"""Command line entry point: render a named scene into an image file."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

from neon import showcase_scenes, sphere_scenes
from neon.scene import Scene

logger = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")

USAGE = "usage: neon OUTPUT_PATH SCENE [SAMPLES_PER_PIXEL]"

_SCENES: dict[str, Callable[[int | None], Scene]] = {
    "spheres": lambda spp: sphere_scenes.scene_with_spheres(24, 24, spp),
    "moving_spheres": lambda spp: sphere_scenes.scene_with_moving_spheres(24, 24, spp),
    "two_checker": sphere_scenes.scene_with_two_checker_spheres,
    "earthmap": sphere_scenes.scene_with_earthmap,
    "perlin_noise": showcase_scenes.scene_with_perlin_noise,
    "quads": showcase_scenes.scene_with_quads,
    "simple_light": showcase_scenes.scene_with_simple_light,
    "cornell_box": showcase_scenes.scene_with_cornell_box,
    "fog_cornell_box": showcase_scenes.scene_with_fog_cornell_box,
    "all_effects": showcase_scenes.scene_with_all_effects,
}


@dataclass(frozen=True)
class Args:
    scene: Scene
    output_path: str


def _parse_samples(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > _U32_MAX:
        raise ValueError("invalid 'samples_per_pixel' value")
    return int(text)


def parse_args(argv: Sequence[str]) -> Args:
    """Build the scene from `OUTPUT_PATH SCENE [SAMPLES_PER_PIXEL]` (no program name)."""
    if len(argv) not in (2, 3):
        raise ValueError("invalid number of arguments")

    output_path = argv[0]
    samples_per_pixel = _parse_samples(argv[2]) if len(argv) == 3 else None

    factory = _SCENES.get(argv[1])
    if factory is None:
        raise ValueError("unknown scene")
    return Args(scene=factory(samples_per_pixel), output_path=output_path)


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    logger.info("Starting rendering")
    rendered = args.scene.render()
    logger.info("Finished rendering")

    try:
        rendered.save(args.output_path)
    except (OSError, ValueError) as exc:
        logger.error("Cannot save output file: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())