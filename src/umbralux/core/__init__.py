from umbralux.core.color import Color
from umbralux.core.matrix import Matrix, MatrixError, MatrixInversionError
from umbralux.core.ray import Ray
from umbralux.core.transform import (
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from umbralux.core.vector import ORIGIN, Point3, Vector3

__all__ = [
    "Color", "Matrix", "MatrixError", "MatrixInversionError", "Ray",
    "chain", "rotation_x", "rotation_y", "rotation_z", "scaling", "shearing",
    "translation", "view_transform", "ORIGIN", "Point3", "Vector3",
]
