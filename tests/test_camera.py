import io
import math

import pytest

from weekendtracer.camera import Camera
from weekendtracer.hittable import HittableList
from weekendtracer.materials import Lambertian, Material, Scatter
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3


class _Absorbing(Material):
    def scatter(self, ray_in, rec):
        return None


class _BounceUp(Material):
    def scatter(self, ray_in, rec):
        return Scatter(Vec3(0.5, 0.5, 0.5), Ray(Vec3(0, 10, 0), Vec3(0, 1, 0)))


def _small_camera(**kwargs):
    settings = dict(aspect_ratio=2.0, image_width=4, samples_per_pixel=2, max_depth=3)
    settings.update(kwargs)
    return Camera(**settings)


def test_initialize_computes_height_and_logs():
    cam = _small_camera()
    log = io.StringIO()
    cam.initialize(log)
    assert cam.image_height == 2
    assert "imageWidth: 4 imageHeight: 2" in log.getvalue()
    assert math.isclose(cam.pixel_sample_scale, 0.5)


def test_image_height_is_at_least_one():
    cam = Camera(aspect_ratio=10.0, image_width=1)
    cam.initialize(io.StringIO())
    assert cam.image_height == 1


def test_basis_is_orthonormal():
    cam = Camera(look_from=Vec3(13, 2, 3), look_at=Vec3(0, 0, 0))
    cam.initialize(io.StringIO())
    for vec in (cam.u, cam.v, cam.w):
        assert math.isclose(vec.length(), 1.0, rel_tol=1e-12)
    assert abs(cam.u.x * cam.v.x + cam.u.y * cam.v.y + cam.u.z * cam.v.z) < 1e-12
    assert abs(cam.u.x * cam.w.x + cam.u.y * cam.w.y + cam.u.z * cam.w.z) < 1e-12


def test_ray_color_at_zero_depth_is_black():
    cam = _small_camera()
    cam.initialize(io.StringIO())
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 0, HittableList()) == Vec3(0, 0, 0)


def test_ray_color_sky_gradient():
    cam = _small_camera()
    cam.initialize(io.StringIO())
    world = HittableList()
    up = cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 5, world)
    down = cam.ray_color(Ray(Vec3(), Vec3(0, -1, 0)), 5, world)
    assert list(up) == pytest.approx([0.5, 0.7, 1.0], abs=1e-12)
    assert list(down) == pytest.approx([1.0, 1.0, 1.0], abs=1e-12)


def test_ray_color_absorbed_is_black():
    cam = _small_camera()
    cam.initialize(io.StringIO())
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, _Absorbing())])
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world) == Vec3(0, 0, 0)


def test_ray_color_multiplies_attenuation():
    cam = _small_camera()
    cam.initialize(io.StringIO())
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, _BounceUp())])
    result = cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world)
    assert list(result) == pytest.approx([0.25, 0.35, 0.5], abs=1e-12)


def test_get_ray_without_defocus_starts_at_camera():
    cam = _small_camera(look_from=Vec3(1, 2, 3), look_at=Vec3(1, 2, 0))
    cam.initialize(io.StringIO())
    for i in range(cam.image_width):
        ray = cam.get_ray(i, 0)
        assert ray.origin == Vec3(1, 2, 3)
        assert 0.0 <= ray.time <= 1.0
        assert math.isclose(ray.direction.z, -cam.focus_dist, abs_tol=1e-9)


def test_sample_square_bounds():
    cam = _small_camera()
    for _ in range(100):
        s = cam.sample_square()
        assert -0.5 <= s.x <= 0.5
        assert -0.5 <= s.y <= 0.5
        assert s.z == 0.0


def test_defocus_disk_sample_with_zero_angle_is_center():
    cam = _small_camera(look_from=Vec3(1, 1, 1))
    cam.initialize(io.StringIO())
    assert list(cam.defocus_disk_sample()) == pytest.approx([1.0, 1.0, 1.0], abs=1e-12)


def test_defocus_disk_sample_within_radius():
    cam = _small_camera(defocus_angle=10.0, focus_dist=2.0)
    cam.initialize(io.StringIO())
    radius = cam.defocus_disk_u.length()
    for _ in range(50):
        offset = cam.defocus_disk_sample() - cam.center
        assert offset.length() < radius + 1e-12


def test_render_writes_ppm():
    cam = _small_camera()
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.5, 0.5, 0.5)))])
    out, log = io.StringIO(), io.StringIO()
    cam.render(world, out, log)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    pixels = lines[3:]
    assert len(pixels) == 8
    for line in pixels:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)
    assert log.getvalue().endswith("\nDone.\t\n")
    assert "Scanlines remaining: 2" in log.getvalue()


@pytest.mark.parametrize("width", [1, 3])
def test_render_pixel_count_matches_size(width):
    cam = Camera(image_width=width, samples_per_pixel=1, max_depth=2)
    out = io.StringIO()
    cam.render(HittableList(), out, io.StringIO())
    lines = out.getvalue().splitlines()
    assert lines[1] == f"{width} {cam.image_height}"
    assert len(lines) - 3 == width * cam.image_height