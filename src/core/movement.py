# core/movement.py
from core.aabb import AABB
from core.vector import Vector3

class Movement:
    """
    Strategy giving the position of an object at a ray's time in [0, 1].
    """
    def at_time(self, time: float) -> Vector3:
        raise NotImplementedError("at_time() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        """Box swept by the position over the whole shutter interval."""
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

class Unchanging(Movement):
    def __init__(self, point: Vector3):
        self.point = point

    def at_time(self, time: float) -> Vector3:
        return self.point

    def bounding_box(self) -> AABB:
        return AABB.from_points(self.point, self.point)

class Linear(Movement):
    """Straight-line motion from start (time 0) to end (time 1)."""
    def __init__(self, start: Vector3, end: Vector3):
        self.start = start
        self.end = end

    def at_time(self, time: float) -> Vector3:
        return self.start + (self.end - self.start) * time

    def bounding_box(self) -> AABB:
        return AABB.from_points(self.start, self.end)
