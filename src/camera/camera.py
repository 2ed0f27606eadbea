import math
import random
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Positionable camera with defocus blur and a [0, 1) shutter interval.

    Pixel (i, j) is column i, row j counted from the top-left corner. Each
    call to get_ray jitters the sample inside the pixel square, picks an
    origin on the defocus disk and a random ray time.
    """
    def __init__(self, image_width: int = 100, aspect_ratio: float = 1.0,
                 vfov: float = 90.0,
                 lookfrom: Optional[Vector3] = None,
                 lookat: Optional[Vector3] = None,
                 vup: Optional[Vector3] = None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0):
        if image_width < 1:
            raise ValueError(f"image_width must be positive, got {image_width}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        self.image_width = image_width
        self.aspect_ratio = aspect_ratio
        self.image_height = max(1, int(image_width / aspect_ratio))
        self.vfov = vfov
        self.lookfrom = lookfrom if lookfrom is not None else Vector3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Vector3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.center = self.lookfrom

        # Viewport dimensions from the vertical field of view, at the focus plane
        h = math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * self.image_width / self.image_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * self.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def pixel_center(self, i: int, j: int) -> Vector3:
        return self.pixel00_loc + self.pixel_delta_u * i + self.pixel_delta_v * j

    def get_ray(self, i: int, j: int, rng: random.Random) -> Ray:
        """Randomly sampled ray through pixel (i, j)."""
        offset_u = rng.random() - 0.5
        offset_v = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset_u)
                        + self.pixel_delta_v * (j + offset_v))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        ray_time = rng.random()

        return Ray(ray_origin, ray_direction, ray_time)

    def defocus_disk_sample(self, rng: random.Random) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
