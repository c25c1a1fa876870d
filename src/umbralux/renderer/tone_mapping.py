# renderer/tone_mapping.py
import numpy as np
from numba import njit


@njit
def _quantize(pixels, output, max_value):
    width, height, channels = pixels.shape
    for x in range(width):
        for y in range(height):
            for c in range(channels):
                value = pixels[x, y, c]
                if value <= 0.0:
                    output[x, y, c] = 0
                else:
                    # Round half away from zero, then clamp
                    scaled = int(np.floor(value * max_value + 0.5))
                    output[x, y, c] = min(scaled, max_value)


def to_rgb8(pixels: np.ndarray, max_value: int = 255) -> np.ndarray:
    """
    Clamps a linear (width, height, 3) color buffer and scales it to
    integers in [0, max_value]. Negative components map to 0 and values
    above 1.0 map to max_value.
    """
    output = np.zeros(pixels.shape, dtype=np.uint8 if max_value <= 255 else np.uint16)
    _quantize(np.ascontiguousarray(pixels, dtype=np.float64), output, max_value)
    return output
