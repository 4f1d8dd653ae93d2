"""Spheres, optionally moving linearly over time."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from .aabb import AABB
from .hittable import HitRecord, Hittable
from .interval import Interval
from .ray import Ray
from .vec3 import Vec3, dot

if TYPE_CHECKING:
    from .materials import Material


class Sphere(Hittable):
    """A sphere at ``center``, or moving from ``center`` to ``center2`` between times 0 and 1."""

    def __init__(
        self,
        center: Vec3,
        radius: float,
        material: Optional[Material],
        center2: Optional[Vec3] = None,
    ) -> None:
        self.radius = max(0.0, radius)
        self.material = material
        rvec = Vec3(radius, radius, radius)
        if center2 is None:
            self.center = Ray(center, Vec3())
            self._bbox = AABB.from_points(center - rvec, center + rvec)
        else:
            self.center = Ray(center, center2 - center)
            start = self.center.at(0)
            end = self.center.at(1)
            self._bbox = AABB.surrounding(
                AABB.from_points(start - rvec, start + rvec),
                AABB.from_points(end - rvec, end + rvec),
            )

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        current_center = self.center.at(ray.time)
        oc = current_center - ray.origin
        a = ray.direction.length_squared()
        h = dot(ray.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not ray_t.contains(root):
            root = (h + sqrtd) / a
            if not ray_t.contains(root):
                return None

        rec = HitRecord(t=root, p=ray.at(root), material=self.material)
        outward_normal = (rec.p - current_center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox