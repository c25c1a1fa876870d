from umbralux.renderer.canvas import Canvas
from umbralux.renderer.image_io import canvas_to_ppm, export_image, export_png, export_ppm
from umbralux.renderer.tone_mapping import to_rgb8

__all__ = ["Canvas", "canvas_to_ppm", "export_image", "export_png", "export_ppm", "to_rgb8"]
