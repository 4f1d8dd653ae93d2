"""A positionable thin-lens camera that renders a scene to PPM text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .color import Color, write_color
from .hittable import Hittable
from .interval import Interval
from .ray import Ray
from .utils import INFINITY, degrees_to_radians, random_double
from .vec3 import Point3, Vec3, cross, random_in_unit_disk, unit_vector

_SKY_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)
_BLACK = Color(0.0, 0.0, 0.0)


@dataclass(eq=False)
class Camera:
    """Camera settings plus the view geometry derived from them by ``initialize``."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10

    vfov: float = 90.0
    look_from: Point3 = Point3(0, 0, 0)
    look_at: Point3 = Point3(0, 0, -1)
    v_up: Vec3 = Vec3(0, 1, 0)

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: int = field(default=0, init=False)
    pixel_sample_scale: float = field(default=0.0, init=False, repr=False)
    center: Point3 = field(default=Point3(), init=False, repr=False)
    pixel00_loc: Point3 = field(default=Point3(), init=False, repr=False)
    pixel_delta_u: Vec3 = field(default=Vec3(), init=False, repr=False)
    pixel_delta_v: Vec3 = field(default=Vec3(), init=False, repr=False)
    u: Vec3 = field(default=Vec3(), init=False, repr=False)
    v: Vec3 = field(default=Vec3(), init=False, repr=False)
    w: Vec3 = field(default=Vec3(), init=False, repr=False)
    defocus_disk_u: Vec3 = field(default=Vec3(), init=False, repr=False)
    defocus_disk_v: Vec3 = field(default=Vec3(), init=False, repr=False)

    def initialize(self, log: Optional[TextIO] = None) -> None:
        """Derive the viewport geometry from the settings and log it."""
        log = sys.stderr if log is None else log

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_sample_scale = 1.0 / self.samples_per_pixel
        self.center = self.look_from

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        self.w = unit_vector(self.look_from - self.look_at)
        self.u = unit_vector(cross(self.v_up, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - (self.focus_dist * self.w) - viewport_u / 2 - viewport_v / 2
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle) / 2)
        self.defocus_disk_u = defocus_radius * self.u
        self.defocus_disk_v = defocus_radius * self.v

        log.write(f"viewportWidth: {viewport_width:g} viewportHeight: {viewport_height:g}\n")
        log.write(f"viewportU: {viewport_u} viewportV: {viewport_v}\n")
        log.write(f"imageWidth: {self.image_width} imageHeight: {self.image_height}\n")
        log.write(f"pixelDeltaU: {self.pixel_delta_u} pixelDeltaV: {self.pixel_delta_v}\n")
        log.write(f"viewportUpperLeft: {viewport_upper_left}\n")
        log.write(f"pixel00Loc: {self.pixel00_loc}\n")

    def render(
        self,
        world: Hittable,
        out: Optional[TextIO] = None,
        log: Optional[TextIO] = None,
    ) -> None:
        """Render ``world`` as a plain PPM image to ``out``, reporting progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log

        self.initialize(log)
        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")

        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel_color = _BLACK
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                write_color(out, self.pixel_sample_scale * pixel_color)

        log.write("\nDone.\t\n")

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Color:
        """The colour seen along ``ray``, following at most ``depth`` bounces."""
        if depth <= 0:
            return _BLACK

        rec = world.hit(ray, Interval(0.001, INFINITY))
        if rec is not None:
            result = rec.material.scatter(ray, rec) if rec.material is not None else None
            if result is None:
                return _BLACK
            return result.attenuation * self.ray_color(result.scattered, depth - 1, world)

        unit_direction = unit_vector(ray.direction)
        t = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - t) * _SKY_WHITE + t * _SKY_BLUE

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray from the defocus disk towards a random point around pixel (i, j)."""
        offset = self.sample_square()
        pixel_sample = (
            self.pixel00_loc
            + (i + offset.x) * self.pixel_delta_u
            + (j + offset.y) * self.pixel_delta_v
        )
        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.center + self.defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin, random_double())

    def sample_square(self) -> Vec3:
        """A random offset in the unit square centred on the origin."""
        return Vec3(random_double() - 0.5, random_double() - 0.5, 0.0)

    def defocus_disk_sample(self) -> Point3:
        """A random point on the camera's defocus disk."""
        p = random_in_unit_disk()
        return self.center + (p.x * self.defocus_disk_u) + (p.y * self.defocus_disk_v)