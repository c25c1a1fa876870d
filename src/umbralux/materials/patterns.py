# materials/patterns.py
import math
from enum import Enum

from umbralux.core.color import Color
from umbralux.core.matrix import Matrix
from umbralux.core.vector import Point3


def color_at_object(pattern: "Pattern", obj, world_point: Point3) -> Color:
    """
    Evaluates a pattern on an object: the world-space point is moved into
    object space with the object's inverse transform, then into pattern
    space with the pattern's inverse transform.
    """
    object_point = obj.transform.inverse() * world_point
    pattern_point = pattern.transform.inverse() * object_point
    return pattern.color_at(pattern_point)


class Pattern:
    """Base class for all procedural color patterns."""
    def __init__(self):
        self._transform = Matrix.identity(4)

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        self.change_transformation(transform)

    def change_transformation(self, transform: Matrix):
        self._transform = transform

    def color_at(self, point: Point3) -> Color:
        """Evaluate the pattern at a point given in pattern space."""
        raise NotImplementedError("color_at() must be implemented by pattern subclasses.")

    def color_at_object(self, obj, world_point: Point3) -> Color:
        return color_at_object(self, obj, world_point)


class SolidPattern(Pattern):
    """A single constant color. Its transform is always the identity."""
    def __init__(self, color: Color):
        super().__init__()
        self.color = color

    def change_transformation(self, transform: Matrix):
        pass

    def color_at(self, point: Point3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidPattern({self.color!r})"


class PatternKind(Enum):
    STRIPES = "stripes"
    GRADIENT = "gradient"
    RING = "ring"
    CHECKERS3D = "checkers3d"


class NestedPattern(Pattern):
    """
    Combines two child patterns with a repetition rule selected by `kind`.
    Children are evaluated at the same pattern-space point, so they may be
    nested patterns themselves.
    """
    def __init__(self, kind: PatternKind, pattern_a: Pattern, pattern_b: Pattern):
        super().__init__()
        self.kind = kind
        self.pattern_a = pattern_a
        self.pattern_b = pattern_b

    @classmethod
    def stripes(cls, pattern_a: Pattern, pattern_b: Pattern) -> "NestedPattern":
        return cls(PatternKind.STRIPES, pattern_a, pattern_b)

    @classmethod
    def gradient(cls, pattern_a: Pattern, pattern_b: Pattern) -> "NestedPattern":
        return cls(PatternKind.GRADIENT, pattern_a, pattern_b)

    @classmethod
    def ring(cls, pattern_a: Pattern, pattern_b: Pattern) -> "NestedPattern":
        return cls(PatternKind.RING, pattern_a, pattern_b)

    @classmethod
    def checkers3d(cls, pattern_a: Pattern, pattern_b: Pattern) -> "NestedPattern":
        return cls(PatternKind.CHECKERS3D, pattern_a, pattern_b)

    def color_at(self, point: Point3) -> Color:
        if self.kind is PatternKind.STRIPES:
            return self._stripes_color_at(point)
        if self.kind is PatternKind.GRADIENT:
            return self._gradient_color_at(point)
        if self.kind is PatternKind.RING:
            return self._ring_color_at(point)
        if self.kind is PatternKind.CHECKERS3D:
            return self._checkers3d_color_at(point)
        raise ValueError(f"Unknown pattern kind: {self.kind}")

    def _pick(self, selector: int, point: Point3) -> Color:
        if selector % 2 == 0:
            return self.pattern_a.color_at(point)
        return self.pattern_b.color_at(point)

    def _stripes_color_at(self, point: Point3) -> Color:
        return self._pick(math.floor(point.x), point)

    def _gradient_color_at(self, point: Point3) -> Color:
        color_a = self.pattern_a.color_at(point)
        color_b = self.pattern_b.color_at(point)
        fraction = point.x - math.floor(point.x)
        return color_a + (color_b - color_a) * fraction

    def _ring_color_at(self, point: Point3) -> Color:
        radius = math.floor(math.sqrt(point.x ** 2 + point.z ** 2))
        return self._pick(radius, point)

    def _checkers3d_color_at(self, point: Point3) -> Color:
        # Sum of the floors, not the floor of the sum
        value = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return self._pick(value, point)

    def __repr__(self) -> str:
        return f"NestedPattern({self.kind.value}, {self.pattern_a!r}, {self.pattern_b!r})"


class TwoColorPattern(NestedPattern):
    """
    A nested pattern over two solid colors.
    """
    def __init__(self, kind: PatternKind, color_a: Color, color_b: Color):
        super().__init__(kind, SolidPattern(color_a), SolidPattern(color_b))

    @classmethod
    def stripes(cls, color_a: Color, color_b: Color) -> "TwoColorPattern":
        return cls(PatternKind.STRIPES, color_a, color_b)

    @classmethod
    def gradient(cls, color_a: Color, color_b: Color) -> "TwoColorPattern":
        return cls(PatternKind.GRADIENT, color_a, color_b)

    @classmethod
    def ring(cls, color_a: Color, color_b: Color) -> "TwoColorPattern":
        return cls(PatternKind.RING, color_a, color_b)

    @classmethod
    def checkers3d(cls, color_a: Color, color_b: Color) -> "TwoColorPattern":
        return cls(PatternKind.CHECKERS3D, color_a, color_b)
