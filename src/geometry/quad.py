# geometry/quad.py
from typing import List, Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.interval import Interval
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Rays this close to parallel with the plane are treated as misses.
PARALLEL_EPSILON = 1e-8

class Quad(Hittable):
    """
    Planar parallelogram with corner q and edges u and v.

    Points are q + alpha * u + beta * v with alpha, beta in [0, 1). The upper
    bounds are open so quads sharing an edge never both report a hit there.
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        self.w = n / n.dot(n)

        self.box = AABB.from_points(q, q + u + v).combine(
            AABB.from_points(q + u, q + v)
        ).pad()

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)

        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        p = ray.at(t)
        planar_hit = p - self.q
        alpha = self.w.dot(planar_hit.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hit))

        if not (0.0 <= alpha < 1.0 and 0.0 <= beta < 1.0):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = p
        rec.material = self.material
        rec.uv = UV(alpha, beta)
        rec.set_face_normal(ray, self.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.box

def make_box(a: Vector3, b: Vector3, material) -> List[Quad]:
    """
    The six outward-facing quads of the box with opposite corners a and b.
    """
    lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))
    size = hi - lo
    edges = [
        Vector3(size.x, 0.0, 0.0),
        Vector3(0.0, size.y, 0.0),
        Vector3(0.0, 0.0, size.z),
    ]

    faces = []
    for axis in range(3):
        # Near face: v x u points toward -axis
        faces.append(Quad(lo, edges[(axis + 2) % 3], edges[(axis + 1) % 3], material))
        # Far face: u x v points toward +axis
        corner = lo.with_axis(axis, hi[axis])
        faces.append(Quad(corner, edges[(axis + 1) % 3], edges[(axis + 2) % 3], material))
    return faces
