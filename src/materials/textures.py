# materials/textures.py
import logging
import math
from typing import Optional, Union
import numpy as np
from PIL import Image
from core.vector import Vector3, Color
from core.uv import UV
from materials.perlin import Perlin

logger = logging.getLogger(__name__)

# Shown wherever an image texture has no pixel data, so missing assets stand out.
MISSING_TEXTURE_COLOR = Color(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, point: Vector3) -> Color:
        """Color of the texture at the given UV coordinates and hit point."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, uv: UV, point: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3-D checker pattern: the parity of the summed cell indices of the hit
    point picks the even or the odd texture. scale is the cell size.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture], scale: float = 1.0):
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)
        self.inv_scale = 1.0 / scale

    def value(self, uv: UV, point: Vector3) -> Color:
        cells = (math.floor(point.x * self.inv_scale)
                 + math.floor(point.y * self.inv_scale)
                 + math.floor(point.z * self.inv_scale))
        is_even = cells % 2 == 0
        return (self.even if is_even else self.odd).value(uv, point)

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: Optional[str] = None, data: Optional[np.ndarray] = None):
        self.data = data
        if data is None and image_path is not None:
            self.data = load_image_data(image_path)
        if self.data is not None:
            self.height, self.width = self.data.shape[:2]
        else:
            self.width = self.height = 0

    def value(self, uv: UV, point: Vector3) -> Color:
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        u = min(max(uv.u, 0.0), 1.0)
        v = 1.0 - min(max(uv.v, 0.0), 1.0)  # Flip V to image row order

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Color(float(color[0]), float(color[1]), float(color[2]))

def load_image_data(image_path: str) -> Optional[np.ndarray]:
    """
    RGB pixels of an image scaled to [0, 1], or None if it cannot be read.
    """
    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.asarray(img, dtype=np.float64) / 255.0
    except OSError as e:
        logger.warning("Could not load texture %s: %s", image_path, e)
        return None

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.noise = Perlin(seed)
        self.scale = scale

    def value(self, uv: UV, point: Vector3) -> Color:
        p = point * self.scale
        t = 0.5 * (1.0 + math.sin(1.0 + p.z + 10.0 * self.noise.turbulence(p, 7)))
        return Color(t, t, t)
