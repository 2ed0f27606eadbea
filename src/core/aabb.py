# src/core/aabb.py
import math
from typing import Iterable, List
from core.interval import Interval, EMPTY as EMPTY_INTERVAL
from core.vector import Vector3

# Minimum thickness of any axis of a box that takes part in a BVH.
PAD_DELTA = 0.001

class AABB:
    """
    Axis-aligned bounding box made of one Interval per axis.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = EMPTY_INTERVAL, y: Interval = EMPTY_INTERVAL,
                 z: Interval = EMPTY_INTERVAL):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        """Box spanned by two opposite corners given in any order."""
        return AABB(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def axis_interval(self, axis: int) -> Interval:
        return getattr(self, "xyz"[axis])

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: for each axis, find intersection intervals.
        t_min = ray_t.min
        t_max = ray_t.max
        for a in "xyz":
            d = getattr(ray.direction, a)
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            slab = getattr(self, a)
            orig = getattr(ray.origin, a)
            t0 = (slab.min - orig) * invD
            t1 = (slab.max - orig) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def combine(self, other: "AABB") -> "AABB":
        return AABB(self.x.combine(other.x), self.y.combine(other.y), self.z.combine(other.z))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return box0.combine(box1)

    def expand(self, delta: float) -> "AABB":
        return AABB(self.x.expand(delta), self.y.expand(delta), self.z.expand(delta))

    def insert(self, point: Vector3) -> "AABB":
        return AABB(self.x.insert(point.x), self.y.insert(point.y), self.z.insert(point.z))

    def pad(self) -> "AABB":
        """Thicken any axis narrower than PAD_DELTA so flat boxes stay hittable."""
        padded = [
            i if i.size() >= PAD_DELTA else i.expand(PAD_DELTA)
            for i in (self.x, self.y, self.z)
        ]
        return AABB(*padded)

    def offset(self, displacement: Vector3) -> "AABB":
        return AABB(
            self.x.offset(displacement.x),
            self.y.offset(displacement.y),
            self.z.offset(displacement.z)
        )

    def corners(self) -> List[Vector3]:
        """The eight corner points, bit i of the index choosing max on axis i."""
        return [
            Vector3(
                self.x.max if i & 1 else self.x.min,
                self.y.max if i & 2 else self.y.min,
                self.z.max if i & 4 else self.z.min
            )
            for i in range(8)
        ]

    @staticmethod
    def enclosing(points: Iterable[Vector3]) -> "AABB":
        box = EMPTY
        for p in points:
            box = box.insert(p)
        return box

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __getstate__(self):
        return (self.x, self.y, self.z)

    def __setstate__(self, state):
        self.x, self.y, self.z = state

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


EMPTY = AABB(EMPTY_INTERVAL, EMPTY_INTERVAL, EMPTY_INTERVAL)
AABB.EMPTY = EMPTY
