# core/transform.py
import math
from functools import reduce

from umbralux.core.matrix import Matrix
from umbralux.core.vector import Point3, Vector3


def translation(dx: float, dy: float, dz: float) -> Matrix:
    return Matrix([
        [1.0, 0.0, 0.0, dx],
        [0.0, 1.0, 0.0, dy],
        [0.0, 0.0, 1.0, dz],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scaling(sx: float, sy: float, sz: float) -> Matrix:
    return Matrix([
        [sx, 0.0, 0.0, 0.0],
        [0.0, sy, 0.0, 0.0],
        [0.0, 0.0, sz, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(phi: float) -> Matrix:
    """
    Rotation about the x axis by phi radians (right-handed).
    """
    c, s = math.cos(phi), math.sin(phi)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(phi: float) -> Matrix:
    c, s = math.cos(phi), math.sin(phi)
    return Matrix([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(phi: float) -> Matrix:
    c, s = math.cos(phi), math.sin(phi)
    return Matrix([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Shear where each coordinate moves in proportion to the other two,
    e.g. xy moves x in proportion to y.
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def view_transform(from_point: Point3, to: Point3, up: Vector3) -> Matrix:
    """
    Builds the matrix that orients the world relative to an eye placed at
    from_point looking at `to`, with `up` giving the approximate up direction.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)


def chain(*transforms: Matrix) -> Matrix:
    """
    Composes transforms given in the order they should be applied, so
    chain(A, B, C) == C * B * A.
    """
    return reduce(lambda acc, m: m * acc, transforms, Matrix.identity(4))
