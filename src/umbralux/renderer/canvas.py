# renderer/canvas.py
from typing import Optional, Tuple

import numpy as np

from umbralux.core.color import Color


class Canvas:
    """
    A width x height grid of linear RGB colors stored in a numpy array of
    shape (width, height, 3). Colors are kept unclamped; clamping happens
    on export.
    """
    def __init__(self, width: int, height: int, background: Optional[Color] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height, 3), dtype=np.float64)
        if background is not None:
            self.pixels[:, :] = background.as_tuple()

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def set_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[x, y] = color.as_tuple()

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[x, y]
        return Color(r, g, b)
