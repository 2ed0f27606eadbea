"""Unit tests for the Translate and Rotate instance wrappers."""

import pytest

from core.interval import POSITIVE
from core.ray import Ray
from core.vector import Vector3
from geometry.instances import Rotate, Translate
from geometry.sphere import Sphere

from conftest import assert_vec_close


class TestTranslate:
    """Tests for translated instances."""

    def test_hit_point_is_in_world_space(self, white):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, white), Vector3(0, 0, -5))
        rec = moved.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), POSITIVE)

        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert_vec_close(rec.p, Vector3(0, 0, -4))
        assert_vec_close(rec.normal, Vector3(0, 0, 1))

    def test_original_position_is_empty(self, white):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, white), Vector3(10, 0, 0))
        assert moved.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), POSITIVE) is None

    def test_bounding_box_is_offset(self, white):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, white), Vector3(1, 2, 3))
        box = moved.bounding_box()
        assert_vec_close(box.minimum, Vector3(0, 1, 2))
        assert_vec_close(box.maximum, Vector3(2, 3, 4))


class TestRotate:
    """Tests for rotated instances."""

    def test_invalid_axis_raises(self, white):
        with pytest.raises(ValueError):
            Rotate(Sphere(Vector3(0, 0, 0), 1.0, white), 30, axis=3)

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_unrotate_inverts_rotate(self, white, axis):
        rotated = Rotate(Sphere(Vector3(0, 0, 0), 1.0, white), 37.5, axis=axis)
        p = Vector3(1.25, -0.5, 3.0)
        assert_vec_close(rotated.unrotate(rotated.rotate(p)), p)
        assert_vec_close(rotated.rotate(rotated.unrotate(p)), p)

    def test_rotation_about_y(self, white):
        rotated = Rotate(Sphere(Vector3(0, 0, 0), 1.0, white), 90)
        assert_vec_close(rotated.rotate(Vector3(1, 0, 0)), Vector3(0, 0, -1))
        assert_vec_close(rotated.rotate(Vector3(0, 0, 1)), Vector3(1, 0, 0))

    def test_rotation_leaves_axis_component(self, white):
        rotated = Rotate(Sphere(Vector3(0, 0, 0), 1.0, white), 90, axis=2)
        p = rotated.rotate(Vector3(1, 0, 7))
        assert_vec_close(p, Vector3(0, 1, 7))

    def test_hit_on_rotated_sphere(self, white):
        rotated = Rotate(Sphere(Vector3(2, 0, 0), 0.5, white), 90)
        rec = rotated.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), POSITIVE)

        assert rec is not None
        assert rec.t == pytest.approx(6.5)
        assert_vec_close(rec.p, Vector3(0, 0, -1.5))
        assert_vec_close(rec.normal, Vector3(0, 0, 1))
        assert rec.front_face

    def test_bounding_box_follows_rotation(self, white):
        rotated = Rotate(Sphere(Vector3(2, 0, 0), 0.5, white), 90)
        box = rotated.bounding_box()
        assert_vec_close(box.minimum, Vector3(-0.5, -0.5, -2.5))
        assert_vec_close(box.maximum, Vector3(0.5, 0.5, -1.5))

    def test_bounding_box_grows_for_partial_turn(self, white):
        rotated = Rotate(Sphere(Vector3(0, 0, 0), 1.0, white), 45)
        box = rotated.bounding_box()
        assert box.x.max == pytest.approx(2 ** 0.5)
        assert box.y.max == pytest.approx(1.0)

    def test_translated_rotation(self, white):
        inner = Rotate(Sphere(Vector3(2, 0, 0), 0.5, white), 90)
        placed = Translate(inner, Vector3(0, 0, 10))
        rec = placed.hit(Ray(Vector3(0, 0, 20), Vector3(0, 0, -1)), POSITIVE)
        assert rec is not None
        assert_vec_close(rec.p, Vector3(0, 0, 8.5))
