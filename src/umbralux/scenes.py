"""
Demo scenes. Each builder returns a World and the camera view transform
that frames it.
"""
import math
from typing import Callable, Dict, Tuple

from umbralux.core.color import Color
from umbralux.core.matrix import Matrix
from umbralux.core.transform import (
    chain,
    rotation_x,
    rotation_y,
    scaling,
    translation,
    view_transform,
)
from umbralux.core.vector import Point3, Vector3
from umbralux.geometry.plane import Plane
from umbralux.geometry.sphere import Sphere
from umbralux.geometry.world import World
from umbralux.materials.light import PointLight
from umbralux.materials.material import Material
from umbralux.materials.presets import ColorPresets, MaterialPresets, PatternPresets

Scene = Tuple[World, Matrix]


def standard_light() -> PointLight:
    return PointLight(Point3(-10, 10, -10), Color(1, 1, 1))


def default_world() -> World:
    """
    The canonical test scene: a unit sphere and a concentric sphere scaled
    to half size, lit from (-10, 10, -10).
    """
    world = World()
    world.set_light(standard_light())

    outer = Sphere()
    outer.change_material(Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    world.add(outer)

    inner = Sphere()
    inner.change_transformation(scaling(0.5, 0.5, 0.5))
    world.add(inner)

    return world


def default_scene() -> Scene:
    return default_world(), view_transform(Point3(0, 0, -5), Point3(0, 0, 0), Vector3(0, 1, 0))


def _demo_camera_view() -> Matrix:
    return view_transform(Point3(0, 1.5, -5), Point3(0, 1, 0), Vector3(0, 1, 0))


def _three_spheres(world: World):
    middle = Sphere()
    middle.change_transformation(translation(-0.5, 1, 0.5))
    middle.change_material(MaterialPresets.satin(ColorPresets.GREEN))
    world.add(middle)

    right = Sphere()
    right.change_transformation(chain(scaling(0.5, 0.5, 0.5), translation(1.5, 0.5, -0.5)))
    right.change_material(MaterialPresets.satin(ColorPresets.LIME))
    world.add(right)

    left = Sphere()
    left.change_transformation(chain(scaling(0.33, 0.33, 0.33), translation(-1.5, 0.33, -0.75)))
    left.change_material(MaterialPresets.satin(ColorPresets.ORANGE))
    world.add(left)


def spheres_world() -> Scene:
    """
    Three spheres in a room whose floor and walls are flattened spheres.
    """
    world = World()
    world.set_light(standard_light())

    wall_material = MaterialPresets.matte(ColorPresets.OFF_WHITE)

    floor = Sphere(material=wall_material)
    floor.change_transformation(scaling(10, 0.01, 10))
    world.add(floor)

    left_wall = Sphere(material=wall_material)
    left_wall.change_transformation(chain(
        scaling(10, 0.01, 10),
        rotation_x(math.pi / 2),
        rotation_y(-math.pi / 4),
        translation(0, 0, 5),
    ))
    world.add(left_wall)

    right_wall = Sphere(material=wall_material)
    right_wall.change_transformation(chain(
        scaling(10, 0.01, 10),
        rotation_x(math.pi / 2),
        rotation_y(math.pi / 4),
        translation(0, 0, 5),
    ))
    world.add(right_wall)

    _three_spheres(world)
    return world, _demo_camera_view()


def spheres_and_planes() -> Scene:
    """
    Three spheres resting above an infinite floor plane.
    """
    world = World()
    world.set_light(standard_light())

    floor = Plane(material=MaterialPresets.matte(ColorPresets.OFF_WHITE))
    world.add(floor)

    _three_spheres(world)
    return world, view_transform(Point3(0, 1.5, -5.8), Point3(0, 1, 0), Vector3(0, 1, 0))


def pattern_demo() -> Scene:
    """
    A floor plane with 3D checkers whose cells hold two stripe patterns.
    """
    world = World()
    world.set_light(standard_light())

    stripes_a = PatternPresets.stripes(ColorPresets.RED, ColorPresets.WHITE,
                                       transform=scaling(0.5, 0.5, 0.5))
    stripes_b = PatternPresets.stripes(Color(0, 0, 1), Color(0, 1, 0),
                                       transform=scaling(0.5, 0.5, 0.5))
    pattern = PatternPresets.striped_checkers(stripes_a, stripes_b)

    floor = Plane(material=MaterialPresets.patterned(pattern))
    world.add(floor)

    ball = Sphere(material=MaterialPresets.patterned(PatternPresets.checkerboard(
        transform=scaling(0.25, 0.25, 0.25)), specular=0.3))
    ball.change_transformation(translation(0, 1, 0.5))
    world.add(ball)

    return world, view_transform(Point3(0, 1.5, -5.8), Point3(0, 1, 0), Vector3(0, 1, 0))


SCENES: Dict[str, Callable[[], Scene]] = {
    "default": default_scene,
    "spheres": spheres_world,
    "spheres-and-planes": spheres_and_planes,
    "patterns": pattern_demo,
}
