# camera/camera.py
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from umbralux.core.matrix import Matrix
from umbralux.core.ray import Ray
from umbralux.core.vector import ORIGIN, Point3
from umbralux.renderer.canvas import Canvas

logger = logging.getLogger(__name__)


class Camera:
    """
    A pinhole camera looking down -z in its own space, one unit in front of
    a canvas of hsize x vsize pixels. The transform orients the world
    relative to the camera (see view_transform).
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Matrix] = None):
        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self._transform = transform if transform is not None else Matrix.identity(4)
        self.update_camera()

    def update_camera(self):
        """Recomputes the pixel size and the half extents of the canvas."""
        half_view = math.tan(self._field_of_view / 2)
        aspect = self._hsize / self._vsize

        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view

        self.pixel_size = self.half_width * 2 / self._hsize

    @property
    def hsize(self) -> int:
        return self._hsize

    @hsize.setter
    def hsize(self, value: int):
        self._hsize = value
        self.update_camera()

    @property
    def vsize(self) -> int:
        return self._vsize

    @vsize.setter
    def vsize(self, value: int):
        self._vsize = value
        self.update_camera()

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, value: float):
        self._field_of_view = value
        self.update_camera()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        self.change_transformation(transform)

    def change_transformation(self, transform: Matrix):
        self._transform = transform

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """
        Generates the world-space ray through the center of pixel (x, y).
        """
        # Offset from the edge of the canvas to the pixel's center
        xoffset = (x + 0.5) * self.pixel_size
        yoffset = (y + 0.5) * self.pixel_size

        # Untransformed coordinates of the pixel; the camera looks toward -z
        camera_x = self.half_width - xoffset
        camera_y = self.half_height - yoffset

        inverse = self._transform.inverse()
        pixel = inverse * Point3(camera_x, camera_y, -1)
        origin = inverse * ORIGIN
        direction = (pixel - origin).normalize()

        return Ray(origin, direction)

    def render_row(self, world, canvas: Canvas, y: int):
        for x in range(self._hsize):
            canvas.set_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))

    def render(self, world, canvas: Optional[Canvas] = None, workers: int = 1) -> Canvas:
        """
        Renders the world one pixel at a time, in row-major order.

        Args:
            world: Scene providing color_at(ray).
            canvas: Pixel sink exposing set_pixel(x, y, color); a new
                Canvas of the camera's size is created when omitted.
            workers: Number of threads the rows are distributed over.

        Returns:
            The canvas that received the pixels.
        """
        if canvas is None:
            canvas = Canvas(self._hsize, self._vsize)

        # Fails early on a singular camera transform
        self._transform.inverse()

        logger.info("Rendering %dx%d pixels with %d worker(s)",
                    self._hsize, self._vsize, workers)
        start = time.perf_counter()

        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self.render_row, world, canvas, y)
                           for y in range(self._vsize)]
                for future in futures:
                    # Re-raises the first error of a row
                    future.result()
        else:
            for y in range(self._vsize):
                self.render_row(world, canvas, y)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas
