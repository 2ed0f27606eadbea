"""Unit tests for the path-tracing integrator and scene backgrounds."""

from core.ray import Ray
from core.vector import Color, Vector3
from geometry.quad import Quad
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from renderer.integrator import ray_color
from renderer.scene import Scene, SkyGradient, SolidBackground

from conftest import assert_vec_close

BLACK = Color(0.0, 0.0, 0.0)


class TestBackgrounds:
    """Tests for the radiance of escaping rays."""

    def test_sky_gradient_endpoints(self):
        sky = SkyGradient()
        assert_vec_close(sky.value(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))), Color(0.5, 0.7, 1.0))
        assert_vec_close(sky.value(Ray(Vector3(0, 0, 0), Vector3(0, -3, 0))), Color(1.0, 1.0, 1.0))

    def test_sky_gradient_horizontal(self):
        sky = SkyGradient()
        assert_vec_close(sky.value(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))), Color(0.75, 0.85, 1.0))

    def test_scene_wraps_plain_color(self):
        scene = Scene(HittableList(), Color(0.1, 0.2, 0.3))
        assert isinstance(scene.background, SolidBackground)
        assert scene.background.value(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))) == Color(0.1, 0.2, 0.3)

    def test_scene_defaults_to_sky(self):
        assert isinstance(Scene(HittableList()).background, SkyGradient)


class TestRayColor:
    """Tests for radiance estimates along single paths."""

    def test_zero_depth_is_black(self, rng):
        world = HittableList()
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert ray_color(ray, world, SkyGradient(), 0, rng) == BLACK

    def test_miss_returns_background(self, rng):
        world = HittableList([Sphere(Vector3(0, 0, -5), 1.0, Lambertian(Color(1, 1, 1)))])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert_vec_close(ray_color(ray, world, SkyGradient(), 10, rng), Color(0.5, 0.7, 1.0))

    def test_direct_emission(self, rng):
        light = DiffuseLight(Color(4, 4, 4))
        world = HittableList([Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), light)])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert ray_color(ray, world, SolidBackground(BLACK), 5, rng) == Color(4, 4, 4)

    def test_depth_limit_truncates_path(self, rng):
        world = HittableList([Sphere(Vector3(0, 0, -5), 1.0, Lambertian(Color(1, 1, 1)))])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert ray_color(ray, world, SolidBackground(Color(1, 1, 1)), 1, rng) == BLACK

    def test_attenuation_multiplies_background(self, rng):
        # A mirror facing the camera sends the ray straight back into the sky
        mirror = Metal(Color(0.5, 0.25, 1.0))
        world = HittableList([Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), mirror)])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        background = SolidBackground(Color(0.8, 0.8, 0.8))

        result = ray_color(ray, world, background, 2, rng)

        assert_vec_close(result, Color(0.4, 0.2, 0.8))

    def test_closed_sphere_never_reaches_background(self, rng):
        # Inside a closed white diffuse sphere every bounce keeps full energy
        # and the path never escapes, so the estimate stays black.
        world = HittableList([Sphere(Vector3(0, 0, 0), 10.0, Lambertian(Color(1, 1, 1)))])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        assert ray_color(ray, world, SolidBackground(Color(1, 1, 1)), 20, rng) == BLACK

    def test_emission_seen_through_bounce(self, rng):
        mirror = Metal(Color(0.5, 0.5, 0.5))
        light = DiffuseLight(Color(2, 2, 2))
        world = HittableList([
            Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), mirror),
            Sphere(Vector3(0, 0, 5), 1.0, light),
        ])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))

        result = ray_color(ray, world, SolidBackground(BLACK), 3, rng)

        assert_vec_close(result, Color(1.0, 1.0, 1.0))
