# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit(cache=True)
def linear_to_gamma(c):
    """Gamma 2 transfer; negative and NaN channels become 0."""
    if not c > 0.0:
        return 0.0
    return math.sqrt(c)

@njit(cache=True)
def _quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for j in range(height):
        for i in range(width):
            for k in range(channels):
                c = linear_to_gamma(linear_image[j, i, k])
                if c > 1.0:
                    c = 1.0
                output_image[j, i, k] = int(math.floor(255.999 * c))

def gamma_correct_image(linear_image: np.ndarray) -> np.ndarray:
    """
    Convert an (height, width, 3) array of averaged linear radiance to 8-bit
    display values: square root per channel, clamp to [0, 1], then scale by
    255.999 and truncate.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.zeros(linear_image.shape, dtype=np.uint8)
    _quantize_kernel(linear_image, output)
    return output
