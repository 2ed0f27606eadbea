# materials/perlin.py
import math
from typing import Optional
import numpy as np
from numba import njit
from core.vector import Vector3

POINT_COUNT = 256

@njit(cache=True)
def _noise(ran_vec, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the interpolation weights
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                gx = ran_vec[idx, 0]
                gy = ran_vec[idx, 1]
                gz = ran_vec[idx, 2]
                dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                accum += (dot
                          * (di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww)))
    return accum

@njit(cache=True)
def _turbulence(ran_vec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(ran_vec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)

class Perlin:
    """
    Gradient noise over a lattice of random unit vectors.

    Tables are drawn once from a numpy Generator so a seeded instance is
    reproducible; evaluation is compiled with numba.
    """
    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)
        vectors = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ran_vec = vectors / np.maximum(lengths, 1e-12)
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        return _noise(self.ran_vec, self.perm_x, self.perm_y, self.perm_z,
                      float(p.x), float(p.y), float(p.z))

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of depth octaves of noise, each at double frequency and half weight."""
        return _turbulence(self.ran_vec, self.perm_x, self.perm_y, self.perm_z,
                           float(p.x), float(p.y), float(p.z), depth)
