from umbralux.geometry.hittable import Hittable, intersect, normal_at
from umbralux.geometry.intersection import (
    HitRecord,
    Intersection,
    find_hit,
    find_intersections,
    find_many_intersections,
    prepare_computations,
)
from umbralux.geometry.plane import Plane
from umbralux.geometry.sphere import Sphere
from umbralux.geometry.world import World

__all__ = [
    "Hittable", "intersect", "normal_at", "HitRecord", "Intersection",
    "find_hit", "find_intersections", "find_many_intersections",
    "prepare_computations", "Plane", "Sphere", "World",
]
