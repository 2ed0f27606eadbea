# renderer/integrator.py
import random
from core.interval import POSITIVE
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable
from renderer.scene import Background

def ray_color(ray: Ray, world: Hittable, background: Background, depth: int,
              rng: random.Random) -> Color:
    """
    Monte-Carlo estimate of the radiance arriving along ray.

    Follows at most depth bounces. At each hit the material's emission is
    added and the path continues along its scattered ray with the running
    attenuation; an absorbed ray ends the path and an escaping one picks up
    the background. A path that runs out of bounces contributes nothing more.
    """
    color = Color(0.0, 0.0, 0.0)
    throughput = Color(1.0, 1.0, 1.0)

    for _ in range(depth):
        rec = world.hit(ray, POSITIVE)
        if rec is None:
            return color + throughput * background.value(ray)

        scatter, emit = rec.material.hit_info(ray, rec, rng)
        if emit is not None:
            color = color + throughput * emit
        if scatter is None:
            return color

        ray, attenuation = scatter
        throughput = throughput * attenuation

    return color
