# materials/presets.py
from typing import Optional

from umbralux.core.color import Color
from umbralux.core.matrix import Matrix
from umbralux.materials.material import Material
from umbralux.materials.patterns import NestedPattern, Pattern, TwoColorPattern


class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(1.0, 0.8, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.1, 1.0, 0.5)
    LIME = Color(0.5, 1.0, 0.1)

    # Neutral colors
    WHITE = Color(1.0, 1.0, 1.0)
    OFF_WHITE = Color(1.0, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.0, 0.0, 0.0)


class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: Color) -> Material:
        """A surface without highlights."""
        return Material(color=color, specular=0.0)

    @staticmethod
    def satin(color: Color) -> Material:
        """Soft highlights, as used for the spheres of the demo scenes."""
        return Material(color=color, diffuse=0.7, specular=0.3)

    @staticmethod
    def glossy(color: Color) -> Material:
        return Material(color=color, diffuse=0.6, specular=0.9, shininess=300.0)

    @staticmethod
    def patterned(pattern: Pattern, specular: float = 0.0) -> Material:
        return Material(pattern=pattern, specular=specular)


class PatternPresets:
    """Predefined pattern presets."""

    @staticmethod
    def checkerboard(color1: Optional[Color] = None, color2: Optional[Color] = None,
                     transform: Optional[Matrix] = None) -> TwoColorPattern:
        """Create a 3D checker pattern with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.GRAY
        pattern = TwoColorPattern.checkers3d(color1, color2)
        if transform is not None:
            pattern.change_transformation(transform)
        return pattern

    @staticmethod
    def stripes(color1: Color, color2: Color,
                transform: Optional[Matrix] = None) -> TwoColorPattern:
        pattern = TwoColorPattern.stripes(color1, color2)
        if transform is not None:
            pattern.change_transformation(transform)
        return pattern

    @staticmethod
    def striped_checkers(stripes_a: Pattern, stripes_b: Pattern) -> NestedPattern:
        """Checkers whose cells are filled by two other patterns."""
        return NestedPattern.checkers3d(stripes_a, stripes_b)
