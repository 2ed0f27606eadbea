# geometry/world.py
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode
from typing import Iterable, Optional, List
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray

class HittableList(Hittable):
    """
    An unordered list of Hittable objects searched by linear scan.

    The combined bounding box is kept up to date as objects are added.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.box = AABB.EMPTY
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())

    def clear(self):
        self.objects.clear()
        self.box = AABB.EMPTY

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self) -> Hittable:
        """
        Return an acceleration tree over the current objects.

        Lists of fewer than two objects are returned unchanged since a tree
        needs at least two leaves.
        """
        if len(self.objects) < 2:
            return self
        return BVHNode(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t
        for obj in self.objects:
            rec = obj.hit(ray, closest_so_far)
            if rec is not None:
                closest_so_far = closest_so_far.with_max(rec.t)
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box
