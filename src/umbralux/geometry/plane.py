# geometry/plane.py
from typing import List

from umbralux.config import EPSILON
from umbralux.core.ray import Ray
from umbralux.core.vector import Point3, Vector3
from umbralux.geometry.hittable import Hittable


class Plane(Hittable):
    """
    The x-z plane through the origin in object space, facing +y.
    """
    def local_intersect(self, local_ray: Ray) -> List[float]:
        # Parallel and coplanar rays both count as a miss
        if abs(local_ray.direction.y) < EPSILON:
            return []
        return [-local_ray.origin.y / local_ray.direction.y]

    def local_normal_at(self, local_point: Point3) -> Vector3:
        return Vector3(0, 1, 0)

    def __repr__(self) -> str:
        return "Plane()"
