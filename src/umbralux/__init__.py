"""umbralux - a small Phong ray tracer."""

__version__ = "0.1.0"
