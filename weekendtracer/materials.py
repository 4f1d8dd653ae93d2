"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .color import Color
from .hittable import HitRecord
from .ray import Ray
from .vec3 import dot, random_unit_vector, reflect, refract, unit_vector


class Scatter(NamedTuple):
    """A scattered ray and the colour it is attenuated by."""

    attenuation: Color
    scattered: Ray


class Material(ABC):
    """How light interacts with a surface."""

    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        """Return the scattered ray, or None if the ray is absorbed."""


@dataclass(frozen=True)
class Lambertian(Material):
    """A diffuse surface."""

    albedo: Color

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Scatter(self.albedo, Ray(rec.p, direction, ray_in.time))


class Metal(Material):
    """A reflective surface, blurred by ``fuzz`` (at most 1)."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        reflected = reflect(unit_vector(ray_in.direction), rec.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected, ray_in.time)
        if dot(scattered.direction, rec.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz!r})"


@dataclass(frozen=True)
class Dielectric(Material):
    """A clear refracting material such as glass."""

    refraction_index: float

    @staticmethod
    def reflectance(cosine: float, refraction_index: float) -> float:
        """Schlick's approximation of reflectance."""
        r0 = (1 - refraction_index) / (1 + refraction_index)
        r0 = r0 * r0
        return r0 + (1 - r0) * math.pow(1 - cosine, 5)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        attenuation = Color(1.0, 1.0, 1.0)
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        direction_in = unit_vector(ray_in.direction)
        cos_theta = min(dot(-direction_in, rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        if ri * sin_theta > 1.0:
            direction = reflect(direction_in, rec.normal)
        else:
            direction = refract(direction_in, rec.normal, ri)
        return Scatter(attenuation, Ray(rec.p, direction, ray_in.time))