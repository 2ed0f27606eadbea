"""Smoke tests for the demo scene builders."""

import logging

import pytest

from camera.camera import Camera
from core.interval import POSITIVE
from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import BVHNode
from materials.textures import MISSING_TEXTURE_COLOR
from renderer.scene import Scene, SolidBackground
from scenes import SCENES, cornell_box, earth, random_spheres


@pytest.mark.parametrize("name", sorted(SCENES))
def test_builders_return_scene_and_camera(name, tmp_path, monkeypatch):
    # earth looks for its image relative to the working directory
    monkeypatch.chdir(tmp_path)
    scene, camera = SCENES[name](image_width=16, seed=1)
    assert isinstance(scene, Scene)
    assert isinstance(camera, Camera)
    assert camera.image_width == 16
    assert not scene.world.bounding_box().x.is_empty()


def test_random_spheres_is_reproducible():
    a, _ = random_spheres(image_width=16, seed=3)
    b, _ = random_spheres(image_width=16, seed=3)
    assert isinstance(a.world, BVHNode)
    assert a.world.bounding_box() == b.world.bounding_box()


def test_cornell_box_is_closed_room():
    scene, camera = cornell_box(image_width=16)
    assert isinstance(scene.background, SolidBackground)
    assert camera.image_height == 16
    # A ray fired from the middle of the room toward the back wall lands on it
    rec = scene.world.hit(Ray(Vector3(278, 400, 278), Vector3(0, 0, 1)), POSITIVE)
    assert rec is not None
    assert rec.p.z == pytest.approx(555.0)


def test_earth_without_image_uses_fallback_color(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        scene, _ = earth(image_width=16, image_path=str(tmp_path / "missing.jpg"))
    rec = scene.world.hit(Ray(Vector3(0, 0, 12), Vector3(0, 0, -1)), POSITIVE)
    assert rec.material.texture.value(rec.uv, rec.p) == MISSING_TEXTURE_COLOR
    assert "missing.jpg" in caplog.text
