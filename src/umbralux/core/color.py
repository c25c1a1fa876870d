# core/color.py
from typing import Tuple

from umbralux.core.utils import is_close


class Color:
    """
    An RGB color with unbounded float components. Values may leave the
    [0, 1] range while light contributions are combined; clamping happens
    only when a canvas is exported.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scalar multiplication.
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        # Hadamard product.
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (is_close(self.red, other.red) and
                is_close(self.green, other.green) and
                is_close(self.blue, other.blue))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"
