from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.quad import Quad, make_box
from geometry.bvh import BVHNode
from geometry.world import HittableList
from geometry.instances import Translate, Rotate

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "Quad",
    "make_box",
    "BVHNode",
    "HittableList",
    "Translate",
    "Rotate",
]
