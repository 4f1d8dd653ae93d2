# weekendtracer

A compact path tracer in plain Python. It renders scenes made of spheres with
three kinds of material and writes the result as a plain-text PPM (`P3`)
image. No third-party libraries are needed.

## Features

- Materials in `weekendtracer.materials`: `Lambertian` (diffuse), `Metal`
  (reflective, with a `fuzz` that is capped at 1) and `Dielectric`
  (refracting, with total internal reflection and a `reflectance` helper
  giving Schlick's approximation)
- `Sphere` objects, which may move in a straight line from `center` to
  `center2` between ray times 0 and 1, for motion blur
- A `Camera` with vertical field of view, look-from / look-at orientation,
  an up vector and depth of field (`defocus_angle`, `focus_dist`)
- Antialiasing by random sampling inside each pixel
- An axis-aligned bounding box (`AABB`) for every object and every
  `HittableList`

## Installation

```
pip install .
```

## Rendering the demo scene

The `weekendtracer` command builds a ground sphere, a field of small random
spheres (moving diffuse ones, metal ones and glass ones) and three large
spheres, renders them, and writes the image to standard output. The camera's
settings and progress are reported on standard error. The command takes no
options besides `--help`.

```
weekendtracer > image.ppm
```

The same can be run as `python -m weekendtracer.scene > image.ppm`.

The demo settings (400 pixels wide, 16:9, 100 samples per pixel, ray depth
50) take a long time in pure Python. Any viewer that reads PPM can open the
result.

## Using the library

```python
import sys

from weekendtracer.camera import Camera
from weekendtracer.hittable import HittableList
from weekendtracer.materials import Dielectric, Lambertian, Metal
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3

world = HittableList()
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0, 0, -1.2), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))))
world.add(Sphere(Vec3(-1, 0, -1), 0.5, Dielectric(1.5)))
world.add(Sphere(Vec3(1, 0, -1), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 0.3)))

cam = Camera(aspect_ratio=16 / 9, image_width=200, samples_per_pixel=20, max_depth=10)

with open("small.ppm", "w") as out:
    cam.render(world, out, sys.stderr)
```

`render(world, out=None, log=None)` writes to standard output and standard
error when `out` and `log` are not given.

`weekendtracer.scene.build_world()` and `weekendtracer.scene.build_camera()`
return the demo scene and its camera, which can be changed before rendering.

The building blocks can also be used on their own:

- `weekendtracer.vec3`: the immutable `Vec3` (also used for points and
  colours) with `dot`, `cross`, `unit_vector`, `reflect`, `refract` and
  random-direction helpers
- `weekendtracer.interval`: `Interval`, with `EMPTY` and `UNIVERSE`
- `weekendtracer.ray`: `Ray`, with an origin, a direction and a time
- `weekendtracer.color`: `linear_to_gamma`, `to_bytes` and `write_color`
- `weekendtracer.aabb`: `AABB` and its slab hit test
- `weekendtracer.hittable`: `HitRecord`, the abstract `Hittable`, and
  `HittableList`

## What it does not do

- There is no bounding volume hierarchy: every ray is tested against every
  object in the list.
- `HittableList.hit` tests each object against the whole interval it is given
  and returns the last hit found in list order, not necessarily the nearest
  one.
- Images are written only as text PPM; there is no other image format and
  no on-screen display.
- Rendering is single-threaded.

## Running the tests

```
pip install ".[test]"
pytest
```