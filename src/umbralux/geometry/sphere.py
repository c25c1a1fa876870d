# geometry/sphere.py
import math
from typing import List

from umbralux.core.ray import Ray
from umbralux.core.vector import ORIGIN, Point3, Vector3
from umbralux.geometry.hittable import Hittable


class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius in object space.
    The default is the unit sphere at the origin; placement and size in the
    world normally come from the transform.
    """
    def __init__(self, center: Point3 = ORIGIN, radius: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.center = center
        self.radius = radius

    def local_intersect(self, local_ray: Ray) -> List[float]:
        oc = local_ray.origin - self.center
        a = local_ray.direction.dot(local_ray.direction)
        half_b = oc.dot(local_ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return []

        # A tangent ray yields the same root twice
        sqrt_disc = math.sqrt(discriminant)
        return [(-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a]

    def local_normal_at(self, local_point: Point3) -> Vector3:
        return local_point - self.center

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
