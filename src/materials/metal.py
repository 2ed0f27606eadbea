# materials/metal.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    fuzz (clamped to 1) jitters the unit mirror direction to make a rough
    metal, so roughness does not depend on the incoming direction's length.
    Scattered rays that end up below the surface are not absorbed.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)
        attenuation = self.texture.value(rec.uv, rec.p)
        return scattered, attenuation
