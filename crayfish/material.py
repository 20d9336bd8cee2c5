"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

from crayfish.color import Color
from crayfish.ray import Ray
from crayfish.vec3 import Vec3, random_float

if TYPE_CHECKING:
    from crayfish.hittable import HitRecord

ColorLike = Union[Vec3, Sequence[float]]


def _as_color(value: ColorLike) -> Color:
    return value if isinstance(value, Vec3) else Vec3(*value)


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


def reflectance(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation of the reflectance of a dielectric."""
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


class Material(ABC):
    """Something a ray can hit and scatter off."""

    @abstractmethod
    def scatter(self, ray: Ray, rec: HitRecord) -> Optional[tuple[Ray, Color]]:
        """Return the scattered ray and its attenuation, or None if absorbed."""


@dataclass(frozen=True)
class Lambertian(Material):
    """An ideal diffuse surface."""

    albedo: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", _as_color(self.albedo))

    def scatter(self, ray: Ray, rec: HitRecord) -> Optional[tuple[Ray, Color]]:
        direction = rec.normal + Vec3.random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Ray(rec.p, direction, ray.time), self.albedo


@dataclass(frozen=True)
class Metal(Material):
    """A reflective surface; ``fuzz`` is capped at 1."""

    albedo: Color
    fuzz: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", _as_color(self.albedo))
        object.__setattr__(self, "fuzz", self.fuzz if self.fuzz <= 1.0 else 1.0)

    def scatter(self, ray: Ray, rec: HitRecord) -> Optional[tuple[Ray, Color]]:
        reflected = ray.direction.reflect(rec.normal).unit_vector()
        reflected = reflected + self.fuzz * Vec3.random_unit_vector()
        scattered = Ray(rec.p, reflected, ray.time)
        if scattered.direction.dot(rec.normal) > 0.0:
            return scattered, self.albedo
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """A clear refracting material such as glass or water."""

    refraction_index: float

    def scatter(self, ray: Ray, rec: HitRecord) -> Optional[tuple[Ray, Color]]:
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index
        unit_direction = ray.direction.unit_vector()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = _sqrt(1.0 - cos_theta * cos_theta)
        cannot_refract = ri * sin_theta > 1.0

        if cannot_refract or reflectance(cos_theta, ri) > random_float():
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = unit_direction.refract(rec.normal, ri)

        return Ray(rec.p, direction, ray.time), Vec3.ones()