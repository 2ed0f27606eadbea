# src/geometry/bvh.py
from typing import List, Optional
import numpy as np
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a list of at least two hittables.

    Each level splits its objects at the median of their bounding-box minimum
    along one axis, cycling x, y, z with depth. Two objects become a leaf
    pair; three become a pair nested under a node with the third object.
    """
    def __init__(self, objects: List[Hittable], axis: int = 0):
        object_span = len(objects)
        if object_span < 2:
            raise ValueError(f"Cannot construct a BVHNode with < 2 elements (got {object_span})")

        if object_span == 2:
            self.left, self.right = objects[0], objects[1]
        elif object_span == 3:
            self.left = BVHNode(objects[:2])
            self.right = objects[2]
        else:
            left, right = split_at_median(objects, axis)
            next_axis = (axis + 1) % 3
            self.left = BVHNode(left, next_axis)
            self.right = BVHNode(right, next_axis)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            ray_t = ray_t.with_max(hit_left.t)

        hit_right = self.right.hit(ray, ray_t)

        # The right side was searched in the narrowed interval, so any hit it
        # reports is closer than the left one.
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels from this node down to its deepest leaf."""
        return 1 + max(
            child.depth() if isinstance(child, BVHNode) else 0
            for child in (self.left, self.right)
        )

def split_at_median(objects: List[Hittable], axis: int):
    """
    Partition objects around the median of their box minimum on one axis.

    Uses a selection (numpy.argpartition) rather than a full sort; the first
    half holds len(objects) // 2 objects whose keys are no larger than any in
    the second half.
    """
    split = len(objects) // 2
    keys = np.array([obj.bounding_box().axis_interval(axis).min for obj in objects])
    order = np.argpartition(keys, split, kind="introselect")
    left = [objects[i] for i in order[:split]]
    right = [objects[i] for i in order[split:]]
    return left, right
