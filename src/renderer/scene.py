# renderer/scene.py
from typing import Union
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable

class Background:
    """Radiance returned for rays that leave the scene."""
    def value(self, ray: Ray) -> Color:
        raise NotImplementedError("value() must be implemented by subclasses.")

class SolidBackground(Background):
    def __init__(self, color: Color):
        self.color = color

    def value(self, ray: Ray) -> Color:
        return self.color

class SkyGradient(Background):
    """
    Blend from horizon color (looking down) to zenith color (looking up) by
    the vertical component of the unit ray direction.
    """
    def __init__(self, horizon: Color = Color(1.0, 1.0, 1.0), zenith: Color = Color(0.5, 0.7, 1.0)):
        self.horizon = horizon
        self.zenith = zenith

    def value(self, ray: Ray) -> Color:
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return self.horizon * (1.0 - a) + self.zenith * a

class Scene:
    """
    A root hittable and the background seen by escaping rays.

    Built once before rendering and only read afterwards, so it can be shared
    by every worker.
    """
    def __init__(self, world: Hittable, background: Union[Color, Background] = None):
        self.world = world
        if background is None:
            background = SkyGradient()
        elif not isinstance(background, Background):
            background = SolidBackground(background)
        self.background = background
