"""Surface materials: how light scatters from, or is emitted by, a surface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from neon.color import Color
from neon.hittable import HitRecord
from neon.ray import Ray
from neon.scatter import (
    fuzzed_ray,
    random_ray_on_hemisphere,
    ray_in_random_unit_direction,
    reflected_ray,
    refracted_ray,
)
from neon.texture import SolidColor, Texture
from neon.vec3 import Vec3

_BLACK = Color(0.0, 0.0, 0.0)
_WHITE = Color(1.0, 1.0, 1.0)


def _as_texture(texture: Texture | Color) -> Texture:
    return SolidColor(texture) if isinstance(texture, Color) else texture


@dataclass(frozen=True, slots=True)
class MaterialScattering:
    """A scattered ray and the colour by which it attenuates incoming light."""

    attenuation: Color
    scattered_ray: Ray


class Material(ABC):
    @abstractmethod
    def scatter(self, ray: Ray, hit_record: HitRecord) -> MaterialScattering | None:
        """Scatter `ray` at the hit, or return None when the light is absorbed."""

    def emitted(self, u: float, v: float, pos: Vec3) -> Color:
        """Light emitted at the point; black unless the material glows."""
        return _BLACK


class Lambertian(Material):
    """Ideal diffuse surface; accepts a texture or a plain colour."""

    def __init__(self, texture: Texture | Color) -> None:
        self.texture = _as_texture(texture)

    def scatter(self, ray: Ray, hit_record: HitRecord) -> MaterialScattering | None:
        scattered = random_ray_on_hemisphere(ray, hit_record)
        attenuation = self.texture.color_at(hit_record.u, hit_record.v, hit_record.pos)
        return MaterialScattering(attenuation, scattered)


class Metal(Material):
    """Reflective surface; `fuzziness` is the radius of random perturbation."""

    def __init__(self, albedo: Color, fuzziness: float) -> None:
        if not fuzziness >= 0.0:
            raise ValueError("fuzziness must be non-negative")
        self.albedo = albedo
        self.fuzziness = fuzziness

    def scatter(self, ray: Ray, hit_record: HitRecord) -> MaterialScattering | None:
        scattered = fuzzed_ray(reflected_ray(ray, hit_record), self.fuzziness)
        # A ray fuzzed below the surface is absorbed.
        if scattered.direction.dot(hit_record.normal) > 0.0:
            return MaterialScattering(self.albedo, scattered)
        return None


class Dielectric(Material):
    """Transparent material such as glass.

    `refraction_index` is relative to the enclosing medium (vacuum or air).
    """

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, ray: Ray, hit_record: HitRecord) -> MaterialScattering | None:
        scattered = refracted_ray(ray, hit_record, self.refraction_index)
        if scattered is None:
            scattered = reflected_ray(ray, hit_record)
        return MaterialScattering(_WHITE, scattered)


class DiffuseLight(Material):
    """Light-emitting surface that scatters nothing."""

    def __init__(self, texture: Texture | Color) -> None:
        self.texture = _as_texture(texture)

    def scatter(self, ray: Ray, hit_record: HitRecord) -> MaterialScattering | None:
        return None

    def emitted(self, u: float, v: float, pos: Vec3) -> Color:
        return self.texture.color_at(u, v, pos)


class Isotropic(Material):
    """Phase function for participating media: scatters in any direction."""

    def __init__(self, texture: Texture | Color) -> None:
        self.texture = _as_texture(texture)

    def scatter(self, ray: Ray, hit_record: HitRecord) -> MaterialScattering | None:
        scattered = ray_in_random_unit_direction(ray, hit_record)
        attenuation = self.texture.color_at(hit_record.u, hit_record.v, hit_record.pos)
        return MaterialScattering(attenuation, scattered)