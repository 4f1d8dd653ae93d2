"""Hit records, the hittable interface and lists of hittable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from .aabb import AABB
from .interval import Interval
from .ray import Ray
from .vec3 import Vec3, dot

if TYPE_CHECKING:
    from .materials import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Vec3 = Vec3()
    normal: Vec3 = Vec3()
    t: float = 0.0
    front_face: bool = False
    material: Optional[Material] = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store the normal facing against ``ray``; ``outward_normal`` must be unit length."""
        self.front_face = dot(ray.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the hit within ``ray_t``, or None if there is none."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """The box enclosing the object."""


class HittableList(Hittable):
    """A collection of hittable objects treated as one."""

    def __init__(self, objects: Optional[Iterable[Hittable]] = None) -> None:
        self.objects: list[Hittable] = []
        self._bbox = AABB()
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        self._bbox = AABB.surrounding(self._bbox, obj.bounding_box())

    def clear(self) -> None:
        """Remove every object; the bounding box is left as it was."""
        self.objects.clear()

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Test every object against the whole of ``ray_t``; the last hit found is returned."""
        result: Optional[HitRecord] = None
        for obj in self.objects:
            rec = obj.hit(ray, ray_t)
            if rec is not None:
                result = rec
        return result

    def bounding_box(self) -> AABB:
        return self._bbox

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)