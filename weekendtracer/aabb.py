"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .interval import Interval
from .ray import Ray
from .vec3 import Vec3


def _inverse(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(frozen=True, slots=True)
class AABB:
    """A box given by one interval per axis; empty by default."""

    x: Interval = Interval()
    y: Interval = Interval()
    z: Interval = Interval()

    @classmethod
    def from_points(cls, a: Vec3, b: Vec3) -> AABB:
        """The box with ``a`` and ``b`` as opposite corners, in any order."""
        return cls(
            *(Interval(p, q) if p < q else Interval(q, p) for p, q in zip(a, b))
        )

    @classmethod
    def surrounding(cls, box0: AABB, box1: AABB) -> AABB:
        """The smallest box enclosing both boxes."""
        return cls(
            Interval.hull(box0.x, box1.x),
            Interval.hull(box0.y, box1.y),
            Interval.hull(box0.z, box1.z),
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, ray: Ray, ray_t: Interval) -> bool:
        """Slab test: does ``ray`` cross the box within ``ray_t``?"""
        t_min, t_max = ray_t.min, ray_t.max
        for axis, (origin, direction) in enumerate(zip(ray.origin, ray.direction)):
            span = self.axis_interval(axis)
            adinv = _inverse(direction)
            t0 = (span.min - origin) * adinv
            t1 = (span.max - origin) * adinv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True