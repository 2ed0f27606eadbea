"""
Demo scenes. Each builder returns the scene together with the camera that
frames it; image_width is the only camera setting callers choose.
"""
import logging
import random
from typing import Callable, Dict, Optional, Tuple

from camera.camera import Camera
from core.movement import Linear
from core.utils import random_color
from core.vector import Vector3, Color
from geometry.instances import Rotate, Translate
from geometry.quad import Quad, make_box
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.texture_loader import create_image_material
from materials.textures import CheckerTexture, NoiseTexture
from renderer.scene import Scene

logger = logging.getLogger(__name__)

SKY = Color(0.7, 0.8, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def random_spheres(image_width: int = 400, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    rng = random.Random(seed)
    world = HittableList()

    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9), 0.32)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # Diffuse spheres bounce upward during the shutter interval
                albedo = random_color(rng) * random_color(rng)
                end = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere(Linear(center, end), 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_color(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 1.0)))

    logger.info("Building BVH for %d objects", len(world))
    camera = Camera(image_width=image_width, aspect_ratio=16 / 9, vfov=20,
                    lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0),
                    defocus_angle=0.6, focus_dist=10.0)
    return Scene(world.build_bvh(), SKY), camera


def two_spheres(image_width: int = 400, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9), 0.8)
    material = Lambertian(checker)
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, material),
        Sphere(Vector3(0, 10, 0), 10, material),
    ])
    camera = Camera(image_width=image_width, aspect_ratio=16 / 9, vfov=20,
                    lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0))
    return Scene(world, SKY), camera


def earth(image_width: int = 400, seed: Optional[int] = None,
          image_path: str = "images/earthmap.jpg") -> Tuple[Scene, Camera]:
    surface = create_image_material(image_path, Lambertian)
    globe = Sphere(Vector3(0, 0, 0), 2.0, surface)
    camera = Camera(image_width=image_width, aspect_ratio=16 / 9, vfov=20,
                    lookfrom=Vector3(0, 0, 12), lookat=Vector3(0, 0, 0))
    return Scene(globe, SKY), camera


def two_perlin_spheres(image_width: int = 400, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    material = Lambertian(NoiseTexture(4.0, seed))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, material),
        Sphere(Vector3(0, 2, 0), 2, material),
    ])
    camera = Camera(image_width=image_width, aspect_ratio=16 / 9, vfov=20,
                    lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0))
    return Scene(world, SKY), camera


def quads(image_width: int = 400, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    world = HittableList([
        Quad(Vector3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), Lambertian(Color(1.0, 0.2, 0.2))),
        Quad(Vector3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), Lambertian(Color(0.2, 1.0, 0.2))),
        Quad(Vector3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), Lambertian(Color(0.2, 0.2, 1.0))),
        Quad(Vector3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), Lambertian(Color(1.0, 0.5, 0.2))),
        Quad(Vector3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), Lambertian(Color(0.2, 0.8, 0.8))),
    ])
    camera = Camera(image_width=image_width, aspect_ratio=1.0, vfov=80,
                    lookfrom=Vector3(0, 0, 9), lookat=Vector3(0, 0, 0))
    return Scene(world.build_bvh(), SKY), camera


def simple_light(image_width: int = 400, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    noise = Lambertian(NoiseTexture(4.0, seed))
    light = DiffuseLight(Color(4, 4, 4))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, noise),
        Sphere(Vector3(0, 2, 0), 2, noise),
        Sphere(Vector3(0, 7, 0), 2, light),
        Quad(Vector3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), light),
    ])
    camera = Camera(image_width=image_width, aspect_ratio=16 / 9, vfov=20,
                    lookfrom=Vector3(26, 3, 6), lookat=Vector3(0, 2, 0))
    return Scene(world, BLACK), camera


def cornell_box(image_width: int = 600, seed: Optional[int] = None) -> Tuple[Scene, Camera]:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(15, 15, 15))

    world = HittableList([
        Quad(Vector3(555, 0, 0), Vector3(0, 0, 555), Vector3(0, 555, 0), green),
        Quad(Vector3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red),
        Quad(Vector3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light),
        Quad(Vector3(0, 0, 0), Vector3(0, 0, 555), Vector3(555, 0, 0), white),
        Quad(Vector3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white),
        Quad(Vector3(0, 0, 555), Vector3(0, 555, 0), Vector3(555, 0, 0), white),
    ])

    tall_box = HittableList(make_box(Vector3(0, 0, 0), Vector3(165, 330, 165), white))
    world.add(Translate(Rotate(tall_box, 15), Vector3(265, 0, 295)))

    short_box = HittableList(make_box(Vector3(0, 0, 0), Vector3(165, 165, 165), white))
    world.add(Translate(Rotate(short_box, -18), Vector3(130, 0, 65)))

    camera = Camera(image_width=image_width, aspect_ratio=1.0, vfov=40,
                    lookfrom=Vector3(278, 278, -800), lookat=Vector3(278, 278, 0))
    return Scene(world.build_bvh(), BLACK), camera


SCENES: Dict[str, Callable[..., Tuple[Scene, Camera]]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "earth": earth,
    "two_perlin_spheres": two_perlin_spheres,
    "quads": quads,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
}
