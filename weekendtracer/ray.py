"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Vec3 = Vec3()
    direction: Vec3 = Vec3()
    time: float = 0.0

    def at(self, t: float) -> Vec3:
        """The point reached after travelling ``t`` along the direction."""
        return self.origin + t * self.direction