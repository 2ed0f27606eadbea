# geometry/instances.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.utils import degrees_to_radians
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Instance of another hittable moved by a fixed offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.box = obj.bounding_box().offset(offset)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Move the ray into object space instead of moving the object
        local_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)

        rec = self.object.hit(local_ray, ray_t)
        if rec is None:
            return None

        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.box

class Rotate(Hittable):
    """
    Instance of another hittable rotated about one coordinate axis.

    axis is 0, 1 or 2 for x, y or z and angle is in degrees, counterclockwise
    when looking down the axis toward the origin.
    """
    def __init__(self, obj: Hittable, angle: float, axis: int = 1):
        if axis not in (0, 1, 2):
            raise ValueError(f"Rotation axis must be 0, 1 or 2, got {axis}")
        self.object = obj
        self.axis = axis
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = AABB.enclosing(self.rotate(c) for c in obj.bounding_box().corners())

    def _plane_axes(self):
        return "xyz"[(self.axis + 1) % 3], "xyz"[(self.axis + 2) % 3]

    def rotate(self, point: Vector3) -> Vector3:
        """Object space to world space."""
        a1, a2 = self._plane_axes()
        p1, p2 = getattr(point, a1), getattr(point, a2)
        rotated = Vector3(point.x, point.y, point.z)
        setattr(rotated, a1, self.cos_theta * p1 - self.sin_theta * p2)
        setattr(rotated, a2, self.sin_theta * p1 + self.cos_theta * p2)
        return rotated

    def unrotate(self, point: Vector3) -> Vector3:
        """World space to object space."""
        a1, a2 = self._plane_axes()
        p1, p2 = getattr(point, a1), getattr(point, a2)
        unrotated = Vector3(point.x, point.y, point.z)
        setattr(unrotated, a1, self.cos_theta * p1 + self.sin_theta * p2)
        setattr(unrotated, a2, -self.sin_theta * p1 + self.cos_theta * p2)
        return unrotated

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        local_ray = Ray(self.unrotate(ray.origin), self.unrotate(ray.direction), ray.time)

        rec = self.object.hit(local_ray, ray_t)
        if rec is None:
            return None

        rec.p = self.rotate(rec.p)
        rec.normal = self.rotate(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.box
