# core/ray.py
from core.vector import Vector3, Point3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the moment
    in the shutter interval [0, 1] at which it was cast.
    """
    __slots__ = ("origin", "direction", "time")

    def __init__(self, origin: Point3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __getstate__(self):
        return (self.origin, self.direction, self.time)

    def __setstate__(self, state):
        self.origin, self.direction, self.time = state

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
