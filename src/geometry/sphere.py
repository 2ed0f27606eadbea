# geometry/sphere.py
import math
from typing import Optional, Union
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.interval import Interval
from core.movement import Movement, Unchanging
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The center is either a fixed point or a Movement strategy evaluated at the
    ray's time, which gives moving spheres for motion blur.
    """
    def __init__(self, center: Union[Vector3, Movement], radius: float, material):
        self.center = center if isinstance(center, Movement) else Unchanging(center)
        self.radius = radius
        self.material = material
        # Box swept by the center, grown by the radius on every side
        self.box = self.center.bounding_box().expand(radius * 2.0)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        center = self.center.at_time(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.uv = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.box

def sphere_uv(p: Vector3) -> UV:
    """
    Texture coordinates of a point on the unit sphere.

    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1,
    both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)
