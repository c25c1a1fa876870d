# core/vector.py
import math
from typing import Tuple

from umbralux.core.utils import is_close


class _Triple:
    """
    Shared storage and comparison for the homogeneous 3D tuples.
    """
    __slots__ = ("x", "y", "z")

    w = 0.0

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_homogeneous(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (is_close(self.x, other.x) and
                is_close(self.y, other.y) and
                is_close(self.z, other.z))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"


class Vector3(_Triple):
    """
    A 3D displacement or direction (homogeneous w = 0) supporting arithmetic,
    dot and cross products, and normalization.
    """
    __slots__ = ()

    w = 0.0

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point3):
            return Point3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: "Vector3") -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, t: float) -> "Vector3":
        if isinstance(t, (int, float)):
            return Vector3(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Reflects this vector about the given normal.
        """
        return self - normal * (2 * self.dot(normal))


class Point3(_Triple):
    """
    A location in 3D space (homogeneous w = 1). Points can be moved by
    vectors; the difference of two points is a vector.
    """
    __slots__ = ()

    w = 1.0

    def __add__(self, other: Vector3) -> "Point3":
        if isinstance(other, Vector3):
            return Point3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point3):
            raise TypeError("Cannot add two points")
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3):
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, t: float) -> "Point3":
        if isinstance(t, (int, float)):
            return Point3(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __truediv__(self, t: float) -> "Point3":
        return Point3(self.x / t, self.y / t, self.z / t)


ORIGIN = Point3(0, 0, 0)
