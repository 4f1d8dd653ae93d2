"""The demo scene: a field of random spheres around three large ones."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .camera import Camera
from .color import Color
from .hittable import HittableList
from .materials import Dielectric, Lambertian, Material, Metal
from .sphere import Sphere
from .utils import random_double
from .vec3 import Point3, Vec3


def build_world() -> HittableList:
    """Build the scene of a ground plane, random small spheres and three large ones."""
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Point3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())

            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            material: Material
            if choose_mat < 0.8:
                albedo = Color.random() * Color.random()
                material = Lambertian(albedo)
                center2 = center + Vec3(0, random_double(0, 0.5), 0)
                world.add(Sphere(center, 0.2, material, center2))
            elif choose_mat < 0.95:
                albedo = Color.random(0.5, 1)
                fuzz = random_double(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def build_camera() -> Camera:
    """The camera set up for the demo scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        vfov=20,
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        v_up=Vec3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the demo scene as PPM to standard output."""
    parser = argparse.ArgumentParser(
        prog="weekendtracer",
        description="Render the demo scene as a PPM image on standard output.",
    )
    parser.parse_args(argv)
    build_camera().render(build_world())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())