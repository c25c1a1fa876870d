"""
Configuration settings for the renderer
"""
import logging
import math
import os

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """
    Reads an integer from the environment, falling back to the default
    when the variable is unset or not a number.
    """
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, value, default)
        return default


# Numeric tolerances
EPSILON = 1e-5          # float comparisons, singular matrices, parallel rays
ACNE_EPSILON = 1e-5     # offset of the shadow-ray origin along the normal

# Rendering settings
RENDER_SETTINGS = {
    'width': env_int("UMBRALUX_WIDTH", 400),
    'height': env_int("UMBRALUX_HEIGHT", 200),
    'field_of_view': math.pi / 3,
    'workers': env_int("UMBRALUX_WORKERS", 1),
    'output': os.getenv("UMBRALUX_OUTPUT", "render.png"),
}

# Export settings
EXPORT_SETTINGS = {
    'max_color_value': 255,
    'ppm_line_width': 70,
}

# Logging settings
LOG_SETTINGS = {
    'level': os.getenv("UMBRALUX_LOG_LEVEL", "INFO"),
    'format': os.getenv("UMBRALUX_LOG_FORMAT",
                        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
}
