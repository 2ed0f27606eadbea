# core/interval.py
import math

class Interval:
    """
    A closed range [min, max] of real numbers.

    An interval with min > max is empty. Instances are treated as immutable:
    every operation returns a new interval.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float = math.inf, maximum: float = -math.inf):
        self.min = minimum
        self.max = maximum

    def size(self) -> float:
        return self.max - self.min

    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        """Pad both ends by delta / 2, so the size grows by delta."""
        padding = delta / 2.0
        return Interval(self.min - padding, self.max + padding)

    def combine(self, other: "Interval") -> "Interval":
        return Interval(min(self.min, other.min), max(self.max, other.max))

    def insert(self, x: float) -> "Interval":
        return Interval(min(self.min, x), max(self.max, x))

    def offset(self, displacement: float) -> "Interval":
        return Interval(self.min + displacement, self.max + displacement)

    def with_max(self, maximum: float) -> "Interval":
        return Interval(self.min, maximum)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def __getstate__(self):
        return (self.min, self.max)

    def __setstate__(self, state):
        self.min, self.max = state

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


# Minimum hit distance used to keep scattered rays off their own surface.
SHADOW_ACNE_EPSILON = 0.001

EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)
POSITIVE = Interval(SHADOW_ACNE_EPSILON, math.inf)

Interval.EMPTY = EMPTY
Interval.UNIVERSE = UNIVERSE
Interval.POSITIVE = POSITIVE
