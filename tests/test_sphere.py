"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Nearest root selection within the query interval
- Texture coordinates and moving centers
"""

import math

import pytest

from core.interval import Interval, POSITIVE
from core.movement import Linear
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere, sphere_uv

from conftest import assert_vec_close


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit_returns_nearest_root(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))

        rec = sphere.hit(ray, POSITIVE)

        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert_vec_close(rec.p, Vector3(0, 0, 1))
        assert_vec_close(rec.normal, Vector3(0, 0, 1))
        assert rec.front_face
        assert rec.material is white

    def test_miss_returns_none(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        ray = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, POSITIVE) is None

    def test_inside_hit_is_back_face(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))

        rec = sphere.hit(ray, POSITIVE)

        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        # Normal always faces against the ray
        assert_vec_close(rec.normal, Vector3(-1, 0, 0))

    def test_falls_back_to_far_root(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))

        rec = sphere.hit(ray, Interval(4.5, math.inf))

        assert rec.t == pytest.approx(6.0)
        assert not rec.front_face

    def test_both_roots_outside_interval(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, Interval(0.001, 3.9)) is None

    def test_root_on_interval_boundary_is_rejected(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, white)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = sphere.hit(ray, Interval(4.0, 10.0))
        assert rec.t == pytest.approx(6.0)

    def test_unnormalized_direction(self, white):
        sphere = Sphere(Vector3(0, 0, -3), 0.5, white)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -2))
        rec = sphere.hit(ray, POSITIVE)
        assert rec.t == pytest.approx(1.25)
        assert_vec_close(rec.p, Vector3(0, 0, -2.5))

    def test_bounding_box(self, white):
        sphere = Sphere(Vector3(1, 2, 3), 0.5, white)
        box = sphere.bounding_box()
        assert_vec_close(box.minimum, Vector3(0.5, 1.5, 2.5))
        assert_vec_close(box.maximum, Vector3(1.5, 2.5, 3.5))


class TestMovingSphere:
    """Tests for spheres whose center moves during the shutter interval."""

    def test_center_follows_ray_time(self, white):
        sphere = Sphere(Linear(Vector3(0, 0, 0), Vector3(0, 2, 0)), 0.5, white)
        ray_early = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1), time=0.0)
        ray_late = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1), time=1.0)

        assert sphere.hit(ray_early, POSITIVE) is None
        rec = sphere.hit(ray_late, POSITIVE)
        assert rec is not None
        assert rec.t == pytest.approx(4.5)

    def test_bounding_box_is_time_swept(self, white):
        sphere = Sphere(Linear(Vector3(0, 0, 0), Vector3(0, 2, 0)), 0.5, white)
        box = sphere.bounding_box()
        assert_vec_close(box.minimum, Vector3(-0.5, -0.5, -0.5))
        assert_vec_close(box.maximum, Vector3(0.5, 2.5, 0.5))


class TestSphereUV:
    """Tests for spherical texture coordinates."""

    @pytest.mark.parametrize("point,expected", [
        (Vector3(1, 0, 0), (0.5, 0.5)),
        (Vector3(0, 1, 0), (0.5, 1.0)),
        (Vector3(0, -1, 0), (0.5, 0.0)),
        (Vector3(0, 0, 1), (0.25, 0.5)),
        (Vector3(0, 0, -1), (0.75, 0.5)),
    ])
    def test_known_points(self, point, expected):
        uv = sphere_uv(point)
        assert uv.u == pytest.approx(expected[0])
        assert uv.v == pytest.approx(expected[1])

    def test_hit_record_carries_uv(self, white):
        sphere = Sphere(Vector3(0, 0, 0), 2.0, white)
        rec = sphere.hit(Ray(Vector3(5, 0, 0), Vector3(-1, 0, 0)), POSITIVE)
        assert rec.uv.u == pytest.approx(0.5)
        assert rec.uv.v == pytest.approx(0.5)
