# geometry/intersection.py
from typing import Iterable, List, Optional

from umbralux.config import ACNE_EPSILON
from umbralux.core.ray import Ray
from umbralux.core.vector import Point3, Vector3
from umbralux.geometry.hittable import Hittable


class Intersection:
    """
    A root `t` of the ray/object equation, together with the ray and the
    object it belongs to. Negative roots are valid but never visible.
    """
    __slots__ = ("t", "ray", "obj")

    def __init__(self, t: float, ray: Ray, obj: Hittable):
        self.t = t
        self.ray = ray
        self.obj = obj

    def position(self) -> Point3:
        return self.ray.position(self.t)

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, obj={self.obj!r})"


class HitRecord:
    """
    Records the shading geometry of a ray-object intersection.
    """
    def __init__(self, t: float, obj: Hittable, ray: Ray, point: Point3,
                 eye_dir: Vector3, normal: Vector3):
        self.t = t                  # Ray parameter at intersection
        self.obj = obj
        self.ray = ray
        self.point = point          # Intersection point
        self.eye_dir = eye_dir      # Unit vector toward the eye
        self.inside = False         # Whether the ray started inside the object
        self.normal = normal
        self.set_face_normal(normal)
        # Shadow rays start here to avoid self-shadowing from rounding error
        self.over_point = self.point + self.normal * ACNE_EPSILON

    def set_face_normal(self, outward_normal: Vector3):
        """
        Ensures that the normal always points toward the eye.
        """
        self.inside = self.eye_dir.dot(outward_normal) < 0
        self.normal = -outward_normal if self.inside else outward_normal


def find_intersections(ray: Ray, obj: Hittable) -> List[Intersection]:
    return [Intersection(t, ray, obj) for t in obj.intersect(ray)]


def find_many_intersections(ray: Ray, objects: Iterable[Hittable]) -> List[Intersection]:
    intersections = []
    for obj in objects:
        intersections.extend(find_intersections(ray, obj))
    return intersections


def find_hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the visible intersection: the smallest non-negative t, or None.
    The first of several equal candidates wins.
    """
    hit = None
    for intersection in intersections:
        if intersection.t < 0:
            continue
        if hit is None or intersection.t < hit.t:
            hit = intersection
    return hit


def prepare_computations(intersection: Intersection) -> HitRecord:
    ray = intersection.ray
    point = ray.position(intersection.t)
    eye_dir = (-ray.direction).normalize()
    normal = intersection.obj.normal_at(point)
    return HitRecord(intersection.t, intersection.obj, ray, point, eye_dir, normal)
