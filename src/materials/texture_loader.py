# materials/texture_loader.py
import logging
import os
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path: str) -> ImageTexture:
    """
    Image texture for a file on disk.

    A file that does not exist gives a texture without pixel data, which
    renders in MISSING_TEXTURE_COLOR; the scene still builds and renders.
    """
    if not os.path.exists(image_path):
        logger.warning("Texture file not found: %s", image_path)
        return ImageTexture()
    return ImageTexture(image_path)

def create_image_material(image_path: str, material_class, **material_params):
    """
    Build material_class around the image at image_path.

    Args:
        image_path: Image file to sample as the albedo
        material_class: Any material taking a texture first, e.g. Lambertian or Metal
        **material_params: Passed through to the material, e.g. fuzz=0.3

    Returns:
        The material instance
    """
    return material_class(load_texture(image_path), **material_params)
