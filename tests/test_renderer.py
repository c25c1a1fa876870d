"""Tests for the canvas, quantisation and image export."""

import numpy as np
import pytest
from PIL import Image

from umbralux.core.color import Color
from umbralux.renderer.canvas import Canvas
from umbralux.renderer.image_io import (
    canvas_to_image,
    canvas_to_ppm,
    export_image,
    export_png,
    export_ppm,
    ppm_body,
    ppm_header,
)
from umbralux.renderer.tone_mapping import to_rgb8


class TestCanvas:

    def test_new_canvas_is_black(self):
        c = Canvas(10, 20)
        assert c.dimensions == (10, 20)
        assert c.get_pixel(9, 19) == Color(0, 0, 0)
        assert not c.pixels.any()

    def test_background(self):
        c = Canvas(3, 2, background=Color(0.2, 0.4, 0.6))
        assert c.get_pixel(2, 1) == Color(0.2, 0.4, 0.6)

    def test_write_and_read_pixel(self):
        c = Canvas(10, 20)
        c.set_pixel(2, 3, Color(1, 0, 0))
        assert c.get_pixel(2, 3) == Color(1, 0, 0)
        assert c.get_pixel(3, 2) == Color(0, 0, 0)

    def test_colors_are_stored_unclamped(self):
        c = Canvas(1, 1)
        c.set_pixel(0, 0, Color(1.5, -0.5, 0))
        assert c.get_pixel(0, 0) == Color(1.5, -0.5, 0)

    @pytest.mark.parametrize("x, y", [(-1, 0), (10, 0), (0, 20), (0, -1)])
    def test_out_of_bounds(self, x, y):
        c = Canvas(10, 20)
        with pytest.raises(IndexError):
            c.set_pixel(x, y, Color(1, 1, 1))
        with pytest.raises(IndexError):
            c.get_pixel(x, y)

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 1)])
    def test_non_positive_size(self, width, height):
        with pytest.raises(ValueError):
            Canvas(width, height)


class TestToRgb8:

    def test_clamps_and_rounds(self):
        pixels = np.array([[[1.5, -0.5, 0.5]], [[0.0, 1.0, 0.8]]])
        out = to_rgb8(pixels)
        assert out.dtype == np.uint8
        assert out[0, 0].tolist() == [255, 0, 128]
        assert out[1, 0].tolist() == [0, 255, 204]


class TestPpm:

    def test_header(self):
        assert ppm_header(Canvas(5, 3)) == "P3\n5 3\n255\n"

    def test_pixel_data(self):
        c = Canvas(5, 3)
        c.set_pixel(0, 0, Color(1.5, 0, 0))
        c.set_pixel(2, 1, Color(0, 0.5, 0))
        c.set_pixel(4, 2, Color(-0.5, 0, 1))
        assert ppm_body(c).splitlines() == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        c = Canvas(10, 2, background=Color(1, 0.8, 0.6))
        lines = ppm_body(c).splitlines()
        assert lines == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ] * 2
        assert all(len(line) <= 70 for line in lines)

    def test_ends_with_newline(self):
        ppm = canvas_to_ppm(Canvas(5, 3))
        assert ppm.startswith("P3\n5 3\n255\n")
        assert ppm.endswith("\n")

    def test_export_ppm(self, tmp_path):
        c = Canvas(2, 1)
        c.set_pixel(1, 0, Color(1, 1, 1))
        path = export_ppm(c, tmp_path / "out.ppm")
        assert path.read_text(encoding="ascii") == "P3\n2 1\n255\n0 0 0 255 255 255\n"


class TestPillowExport:

    def test_canvas_to_image_orientation(self):
        c = Canvas(3, 2)
        c.set_pixel(2, 0, Color(1, 0, 0))
        image = canvas_to_image(c)
        assert image.size == (3, 2)
        assert image.mode == "RGB"
        assert image.getpixel((2, 0)) == (255, 0, 0)
        assert image.getpixel((0, 1)) == (0, 0, 0)

    def test_export_png(self, tmp_path):
        c = Canvas(4, 3)
        c.set_pixel(1, 2, Color(0, 1, 0))
        path = export_png(c, tmp_path / "out.png")
        with Image.open(path) as image:
            assert image.size == (4, 3)
            assert image.convert("RGB").getpixel((1, 2)) == (0, 255, 0)

    def test_export_image_by_suffix(self, tmp_path):
        c = Canvas(4, 3)
        assert export_image(c, tmp_path / "a.ppm").read_text().startswith("P3")
        with Image.open(export_image(c, tmp_path / "a.jpg")) as image:
            assert image.format == "JPEG"

    def test_export_image_rejects_unknown_suffix(self, tmp_path):
        with pytest.raises(ValueError):
            export_image(Canvas(1, 1), tmp_path / "out.bmpx")


class TestPreview:

    def test_canvas_to_surface(self):
        pygame = pytest.importorskip("pygame")
        from umbralux.renderer.preview import canvas_to_surface

        c = Canvas(4, 3)
        c.set_pixel(1, 2, Color(1, 0, 0))
        surface = canvas_to_surface(c)
        assert surface.get_size() == (4, 3)
        assert tuple(surface.get_at((1, 2)))[:3] == (255, 0, 0)
        assert canvas_to_surface(c, scale=2).get_size() == (8, 6)
        assert isinstance(surface, pygame.Surface)
