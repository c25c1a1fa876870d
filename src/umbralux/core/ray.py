# core/ray.py
from umbralux.core.matrix import Matrix
from umbralux.core.transform import scaling, translation
from umbralux.core.vector import Point3, Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        return Ray(m * self.origin, m * self.direction)

    def translate(self, dx: float, dy: float, dz: float) -> "Ray":
        return self.transform(translation(dx, dy, dz))

    def scale(self, sx: float, sy: float, sz: float) -> "Ray":
        return self.transform(scaling(sx, sy, sz))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
