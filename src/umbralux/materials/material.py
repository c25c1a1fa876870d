# materials/material.py
from typing import Optional

from umbralux.core.color import Color
from umbralux.core.utils import is_close
from umbralux.materials.patterns import Pattern


class Material:
    """
    Surface reflectance for the Phong model: a flat color or an optional
    pattern, plus ambient, diffuse and specular coefficients and the
    specular shininess exponent.
    """
    def __init__(self, color: Optional[Color] = None, pattern: Optional[Pattern] = None,
                 ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0):
        self.color = color if color is not None else Color.white()
        self.pattern = pattern
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess

    def replace(self, **changes) -> "Material":
        """
        Returns a copy of this material with the given fields changed.
        """
        fields = dict(color=self.color, pattern=self.pattern, ambient=self.ambient,
                      diffuse=self.diffuse, specular=self.specular,
                      shininess=self.shininess)
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown material fields: {', '.join(sorted(unknown))}")
        fields.update(changes)
        return Material(**fields)

    def base_color(self, obj, point) -> Color:
        """
        The surface color at a world-space point: the pattern evaluated on
        the object when one is set, the flat color otherwise.
        """
        if self.pattern is None:
            return self.color
        return self.pattern.color_at_object(obj, point)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        # Patterns compare by identity
        return (self.pattern is other.pattern and
                self.color == other.color and
                is_close(self.ambient, other.ambient) and
                is_close(self.diffuse, other.diffuse) and
                is_close(self.specular, other.specular) and
                is_close(self.shininess, other.shininess))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, pattern={self.pattern!r}, "
                f"ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")
