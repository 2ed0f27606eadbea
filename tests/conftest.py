"""Shared fixtures for the renderer tests."""

import random

import pytest

from core.vector import Color, Vector3
from materials.lambertian import Lambertian


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value.

    uniform() and the rest of the API still draw from the seeded stream, so
    only draws made through random() directly are pinned.
    """

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * super().random()


@pytest.fixture
def rng():
    """A seeded random source so every test is reproducible."""
    return random.Random(1234)


@pytest.fixture
def white():
    return Lambertian(Color(1.0, 1.0, 1.0))


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-9):
    assert abs(actual.x - expected.x) < tol, f"{actual} != {expected}"
    assert abs(actual.y - expected.y) < tol, f"{actual} != {expected}"
    assert abs(actual.z - expected.z) < tol, f"{actual} != {expected}"
