# geometry/hittable.py
from typing import List

from umbralux.core.matrix import Matrix
from umbralux.core.ray import Ray
from umbralux.core.vector import Point3, Vector3
from umbralux.materials.material import Material


def intersect(shape: "Hittable", ray: Ray) -> List[float]:
    """
    Intersects a world-space ray with a shape. The ray is moved into the
    shape's object space before the shape-specific test runs.
    """
    local_ray = ray.transform(shape.transform.inverse())
    return shape.local_intersect(local_ray)


def normal_at(shape: "Hittable", world_point: Point3) -> Vector3:
    """
    Surface normal at a world-space point. The local normal is carried back
    to world space by the transpose of the inverse transform, which keeps it
    perpendicular to the surface under non-uniform scaling.
    """
    inverse = shape.transform.inverse()
    local_point = inverse * world_point
    local_normal = shape.local_normal_at(local_point)
    world_normal = inverse.transpose() * local_normal
    return world_normal.normalize()


class Hittable:
    """
    Abstract class for objects that can be hit by a ray. Each object owns a
    transform (object space to world space) and a material; both may be
    replaced in place between renders.
    """
    def __init__(self, transform: Matrix = None, material: Material = None):
        self._transform = transform if transform is not None else Matrix.identity(4)
        self._material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        self.change_transformation(transform)

    def change_transformation(self, transform: Matrix):
        self._transform = transform

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material):
        self.change_material(material)

    def change_material(self, material: Material):
        self._material = material

    def intersect(self, ray: Ray) -> List[float]:
        return intersect(self, ray)

    def normal_at(self, world_point: Point3) -> Vector3:
        return normal_at(self, world_point)

    def local_intersect(self, local_ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, local_point: Point3) -> Vector3:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")
