# materials/lambertian.py

import random
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Lambertian(Material):
    """
    Ideal diffuse surface. The albedo is a color or any Texture.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Color]:
        """
        Cosine-weighted bounce: normal plus a random unit vector.
        Always scatters; attenuation is the albedo at the hit point.
        """
        direction = rec.normal + random_unit_vector(rng)

        # The unit vector can cancel the normal almost exactly
        if direction.near_zero():
            direction = rec.normal

        attenuation = self.texture.value(rec.uv, rec.p)
        return Ray(rec.p, direction, ray_in.time), attenuation
