# core/utils.py
import math
import random
from core.vector import Vector3, Color

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Reject points so close to the center that normalizing them underflows.
        if p.length_squared() > 1e-160:
            return p.normalize()

def random_on_hemisphere(normal: Vector3, rng: random.Random) -> Vector3:
    v = random_unit_vector(rng)
    return v if v.dot(normal) > 0.0 else -v

def random_in_unit_disk(rng: random.Random) -> Vector3:
    """Random point in the z = 0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def random_color(rng: random.Random, low: float = 0.0, high: float = 1.0) -> Color:
    return Color(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel
