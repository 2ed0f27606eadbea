# materials/diffuse_light.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.uv import UV
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class DiffuseLight(Material):
    """
    Light source: absorbs every incoming ray and emits its texture's color.

    Emission does not depend on the side that was hit, so a quad light
    shines from both faces.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        return None

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Radiance leaving the surface at p.

        Args:
            uv (UV): Texture coordinates of the hit.
            p (Vector3): The hit point.
        """
        return self.texture.value(uv, p)
