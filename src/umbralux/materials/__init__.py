from umbralux.materials.light import PointLight, lighting
from umbralux.materials.material import Material
from umbralux.materials.patterns import (
    NestedPattern,
    Pattern,
    PatternKind,
    SolidPattern,
    TwoColorPattern,
    color_at_object,
)

__all__ = [
    "PointLight", "lighting", "Material", "NestedPattern", "Pattern",
    "PatternKind", "SolidPattern", "TwoColorPattern", "color_at_object",
]
