# renderer/image_io.py
import logging
from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from umbralux.config import EXPORT_SETTINGS
from umbralux.renderer.canvas import Canvas
from umbralux.renderer.tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

PILLOW_FORMATS = {".png": "PNG", ".jpg": "JPEG", ".jpeg": "JPEG"}


def ppm_header(canvas: Canvas, max_color_value: int = 255) -> str:
    return f"P3\n{canvas.width} {canvas.height}\n{max_color_value}\n"


def ppm_body(canvas: Canvas, max_color_value: int = 255,
             line_width: int = EXPORT_SETTINGS['ppm_line_width']) -> str:
    """
    Pixel data of a plain PPM file: one block of lines per pixel row, with
    no line longer than line_width characters.
    """
    values = to_rgb8(canvas.pixels, max_color_value)
    lines: List[str] = []
    for y in range(canvas.height):
        line = ""
        for x in range(canvas.width):
            for component in values[x, y]:
                token = str(int(component))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) <= line_width:
                    line = f"{line} {token}"
                else:
                    lines.append(line)
                    line = token
        if line:
            lines.append(line)
    return "".join(f"{line}\n" for line in lines)


def canvas_to_ppm(canvas: Canvas, max_color_value: int = EXPORT_SETTINGS['max_color_value']) -> str:
    return ppm_header(canvas, max_color_value) + ppm_body(canvas, max_color_value)


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """
    Converts the canvas to an 8-bit RGB Pillow image.
    """
    # The canvas is indexed [x, y]; Pillow expects rows first
    rgb = np.ascontiguousarray(to_rgb8(canvas.pixels).transpose(1, 0, 2))
    return Image.fromarray(rgb)


def export_ppm(canvas: Canvas, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(canvas_to_ppm(canvas), encoding="ascii")
    logger.info("Wrote %s", path)
    return path


def export_png(canvas: Canvas, path: Union[str, Path]) -> Path:
    path = Path(path)
    canvas_to_image(canvas).save(path, format="PNG")
    logger.info("Wrote %s", path)
    return path


def export_image(canvas: Canvas, path: Union[str, Path]) -> Path:
    """
    Writes the canvas in the format given by the file suffix
    (.ppm, .png, .jpg or .jpeg).

    Raises:
        ValueError: If the suffix is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        return export_ppm(canvas, path)
    if suffix not in PILLOW_FORMATS:
        raise ValueError(f"Unsupported image format: {path.suffix or path.name}")
    canvas_to_image(canvas).save(path, format=PILLOW_FORMATS[suffix])
    logger.info("Wrote %s", path)
    return path
