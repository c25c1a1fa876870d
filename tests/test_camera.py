"""Tests for the pinhole camera and rendering."""

import math

import pytest

from umbralux.camera.camera import Camera
from umbralux.core.color import Color
from umbralux.core.matrix import Matrix, MatrixInversionError
from umbralux.core.transform import rotation_y, scaling, translation, view_transform
from umbralux.core.vector import Point3, Vector3
from umbralux.renderer.canvas import Canvas
from conftest import assert_tuple_close

ROOT2_2 = math.sqrt(2) / 2


@pytest.fixture
def camera():
    return Camera(201, 101, math.pi / 2)


@pytest.fixture
def default_view():
    return view_transform(Point3(0, 0, -5), Point3(0, 0, 0), Vector3(0, 1, 0))


class TestCameraGeometry:

    def test_construction(self):
        c = Camera(160, 120, math.pi / 2)
        assert (c.hsize, c.vsize) == (160, 120)
        assert c.field_of_view == math.pi / 2
        assert c.transform == Matrix.identity(4)

    def test_pixel_size_horizontal_canvas(self):
        assert math.isclose(Camera(200, 125, math.pi / 2).pixel_size, 0.01)

    def test_pixel_size_vertical_canvas(self):
        assert math.isclose(Camera(125, 200, math.pi / 2).pixel_size, 0.01)

    def test_setters_recompute_sizes(self):
        c = Camera(100, 100, math.pi / 2)
        c.hsize = 200
        c.vsize = 125
        assert math.isclose(c.pixel_size, 0.01)
        c.field_of_view = math.pi / 3
        assert math.isclose(c.half_width, math.tan(math.pi / 6))


class TestRayForPixel:

    def test_center_of_canvas(self, camera):
        r = camera.ray_for_pixel(100, 50)
        assert_tuple_close(r.origin, Point3(0, 0, 0))
        assert_tuple_close(r.direction, Vector3(0, 0, -1))

    def test_corner_of_canvas(self, camera):
        r = camera.ray_for_pixel(0, 0)
        assert_tuple_close(r.origin, Point3(0, 0, 0))
        assert_tuple_close(r.direction, Vector3(0.66519, 0.33259, -0.66851))

    def test_transformed_camera(self, camera):
        camera.change_transformation(rotation_y(math.pi / 4) * translation(0, -2, 5))
        r = camera.ray_for_pixel(100, 50)
        assert_tuple_close(r.origin, Point3(0, 2, -5))
        assert_tuple_close(r.direction, Vector3(ROOT2_2, 0, -ROOT2_2))


class TestRender:

    def test_render_default_world(self, default_world, default_view):
        c = Camera(11, 11, math.pi / 2, default_view)
        image = c.render(default_world)
        assert image.dimensions == (11, 11)
        assert_tuple_close(image.get_pixel(5, 5), Color(0.38066, 0.47583, 0.2855))

    def test_render_with_threads_matches_serial(self, default_world, default_view):
        c = Camera(11, 11, math.pi / 2, default_view)
        serial = c.render(default_world)
        threaded = c.render(default_world, workers=4)
        assert_tuple_close(threaded.get_pixel(5, 5), Color(0.38066, 0.47583, 0.2855))
        assert (serial.pixels == threaded.pixels).all()

    def test_render_into_given_canvas(self, default_world, default_view):
        c = Camera(11, 11, math.pi / 2, default_view)
        canvas = Canvas(11, 11)
        assert c.render(default_world, canvas) is canvas

    def test_empty_world_renders_black(self, default_view):
        from umbralux.geometry.world import World
        image = Camera(4, 3, math.pi / 2, default_view).render(World())
        assert not image.pixels.any()

    def test_singular_transform_raises(self, default_world):
        c = Camera(4, 4, math.pi / 2, scaling(0, 0, 0))
        with pytest.raises(MatrixInversionError):
            c.render(default_world)
