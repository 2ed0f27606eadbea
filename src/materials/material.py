# materials/material.py
import random
from typing import NamedTuple, Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.uv import UV
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

class HitInfo(NamedTuple):
    """
    What a surface does with an incoming ray.

    scatter is (scattered_ray, attenuation) or None when the ray is absorbed;
    emit is the emitted color or None for surfaces that do not glow.
    """
    scatter: Optional[Tuple[Ray, Color]]
    emit: Optional[Color]

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials can have textures for their properties.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if no scattering occurs.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Optional[Color]:
        """
        Light given off at the hit point; None for non-emissive materials.
        """
        return None

    def hit_info(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> HitInfo:
        return HitInfo(self.scatter(ray_in, rec, rng), self.emitted(rec.uv, rec.p))

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    return albedo
