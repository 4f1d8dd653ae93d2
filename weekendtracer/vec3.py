"""Three-component vectors and the geometric helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from .utils import random_double


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, t: float) -> Vec3:
        return (1 / t) * self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True if every component is below 1e-8 in magnitude."""
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    @classmethod
    def random(cls, low: float = 0.0, high: float = 0.0) -> Vec3:
        """A vector whose components are drawn uniformly from [low, high]."""
        return cls(random_double(low, high), random_double(low, high), random_double(low, high))


Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    return v / v.length()


def random_unit_vector() -> Vec3:
    """A uniformly distributed vector on the unit sphere."""
    while True:
        p = Vec3.random(-1, 1)
        lensq = p.length_squared()
        if 1e-160 < lensq <= 1:
            return p / math.sqrt(lensq)


def random_in_unit_disk() -> Vec3:
    """A random point inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(random_double(-1, 1), random_double(-1, 1), 0.0)
        if p.length_squared() < 1:
            return p


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, eta_ratio: float) -> Vec3:
    """Refract unit vector ``uv`` through a surface with normal ``n``."""
    cos_theta = min(dot(-uv, n), 1.0)
    r_out_perp = eta_ratio * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel