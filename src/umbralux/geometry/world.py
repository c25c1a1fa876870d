# geometry/world.py
import logging
from typing import List, Optional, Tuple

from umbralux.core.color import Color
from umbralux.core.ray import Ray
from umbralux.core.vector import Point3
from umbralux.geometry.hittable import Hittable
from umbralux.geometry.intersection import (
    HitRecord,
    Intersection,
    find_hit,
    find_many_intersections,
    prepare_computations,
)
from umbralux.materials.light import PointLight, lighting

logger = logging.getLogger(__name__)


class World:
    """
    The scene: an ordered list of Hittable objects and at most one point
    light. Objects are kept in insertion order and compared by identity.
    """
    def __init__(self):
        self._objects: List[Hittable] = []
        self._light: Optional[PointLight] = None

    @property
    def objects(self) -> Tuple[Hittable, ...]:
        return tuple(self._objects)

    @property
    def light(self) -> Optional[PointLight]:
        return self._light

    def add(self, obj: Hittable):
        self._objects.append(obj)
        logger.debug("Added %r (%d objects)", obj, len(self._objects))

    add_object = add

    def set_light(self, light: PointLight):
        self._light = light

    def contains_object(self, obj: Hittable) -> bool:
        return any(o is obj for o in self._objects)

    def contains_light(self, light: PointLight) -> bool:
        return self._light is not None and self._light == light

    def __len__(self) -> int:
        return len(self._objects)

    def find_intersections(self, ray: Ray) -> List[Intersection]:
        """
        All intersections of the ray with the scene, sorted by t. The sort
        is stable, so equal roots keep object order.
        """
        return sorted(find_many_intersections(ray, self._objects), key=lambda i: i.t)

    def is_shadowed(self, point: Point3) -> bool:
        """
        True when an object lies between the light and the point. The shadow
        ray runs from the light to the point, so t == 1 is the point itself.
        """
        if self._light is None:
            return False
        origin = self._light.position
        ray = Ray(origin, point - origin)
        hit = find_hit(self.find_intersections(ray))
        return hit is not None and hit.t < 1.0

    def shade_hit(self, comps: HitRecord) -> Color:
        if self._light is None:
            return Color.black()
        in_shadow = self.is_shadowed(comps.over_point)
        return lighting(comps.obj.material, comps.obj, self._light,
                        comps.over_point, comps.eye_dir, comps.normal, in_shadow)

    def color_at(self, ray: Ray) -> Color:
        """
        Color seen along a ray: black when nothing is hit.
        """
        hit = find_hit(self.find_intersections(ray))
        if hit is None:
            return Color.black()
        return self.shade_hit(prepare_computations(hit))

    color_at_ray_hit = color_at
