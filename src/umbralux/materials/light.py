# materials/light.py
from umbralux.core.color import Color
from umbralux.core.vector import Point3, Vector3
from umbralux.materials.material import Material


class PointLight:
    """
    A light source with no size, emitting `intensity` from `position`.
    """
    def __init__(self, position: Point3, intensity: Color):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"


def lighting(material: Material, obj, light: PointLight, point: Point3,
             eye_dir: Vector3, normal: Vector3, in_shadow: bool = False) -> Color:
    """
    Phong shading of a single surface point.

    Args:
        material: Material of the surface.
        obj: The object hit, used to evaluate the material's pattern.
        light: The point light illuminating the scene.
        point: World-space surface point.
        eye_dir: Unit vector from the point toward the eye.
        normal: Unit surface normal at the point.
        in_shadow: When True only the ambient term contributes.

    Returns:
        Color: ambient + diffuse + specular.
    """
    black = Color.black()

    # Combine the surface color with the light's color
    effective_color = material.base_color(obj, point) * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    diffuse = black
    specular = black

    light_dir = (light.position - point).normalize()
    # Cosine of the angle between light and normal; negative means the
    # light is on the other side of the surface.
    light_dot_normal = light_dir.dot(normal)

    if light_dot_normal >= 0:
        diffuse = effective_color * material.diffuse * light_dot_normal

        # Cosine of the angle between reflection and eye; negative means
        # the light reflects away from the eye.
        reflect_dir = (-light_dir).reflect(normal)
        reflect_dot_eye = reflect_dir.dot(eye_dir)

        if reflect_dot_eye > 0:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
