"""Tests for the demo scenes and the command line entry point."""

import logging

import pytest

from umbralux.config import RENDER_SETTINGS, env_int
from umbralux.core.matrix import Matrix
from umbralux.geometry.world import World
from umbralux.logging_config import setup_logging
from umbralux.main import build_parser, main
from umbralux.scenes import SCENES


@pytest.mark.parametrize("name", sorted(SCENES))
def test_scenes_build(name):
    world, view = SCENES[name]()
    assert isinstance(world, World)
    assert isinstance(view, Matrix)
    assert world.light is not None
    assert len(world) > 0
    assert view.is_invertible()


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.scene == "spheres-and-planes"
        assert args.width is None
        assert args.height is None
        assert not args.preview

    def test_unknown_scene(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["teapot"])


class TestMain:

    def test_renders_ppm(self, tmp_path):
        out = tmp_path / "default.ppm"
        assert main(["default", "--width", "8", "--height", "6", "-o", str(out)]) == 0
        assert out.read_text().startswith("P3\n8 6\n255\n")

    def test_renders_png_with_threads(self, tmp_path):
        out = tmp_path / "patterns.png"
        assert main(["patterns", "--width", "6", "--height", "4",
                     "--workers", "2", "--output", str(out)]) == 0
        assert out.stat().st_size > 0

    def test_height_follows_width(self, tmp_path):
        out = tmp_path / "square.ppm"
        assert main(["default", "--width", "5", "-o", str(out)]) == 0
        assert out.read_text().startswith("P3\n5 5\n")

    def test_configured_width_still_gives_square_image(self, tmp_path, monkeypatch):
        monkeypatch.setitem(RENDER_SETTINGS, 'width', 6)
        out = tmp_path / "square.ppm"
        assert main(["default", "--width", "6", "-o", str(out)]) == 0
        assert out.read_text().startswith("P3\n6 6\n")

    def test_configured_size_without_arguments(self, tmp_path, monkeypatch):
        monkeypatch.setitem(RENDER_SETTINGS, 'width', 5)
        monkeypatch.setitem(RENDER_SETTINGS, 'height', 3)
        out = tmp_path / "configured.ppm"
        assert main(["default", "-o", str(out)]) == 0
        assert out.read_text().startswith("P3\n5 3\n")

    def test_bad_size(self, tmp_path):
        assert main(["default", "--width", "0", "-o", str(tmp_path / "x.ppm")]) == 2

    def test_unsupported_format(self, tmp_path):
        assert main(["default", "--width", "2", "--height", "2",
                     "-o", str(tmp_path / "x.tiffy")]) == 1


class TestLogging:

    def test_setup_logging_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        logger = setup_logging("DEBUG", log_file=log_file, name="umbralux.test")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logger = setup_logging("warning", name="umbralux.test")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert log_file.exists()


class TestConfig:

    def test_env_int_reads_integer(self, monkeypatch):
        monkeypatch.setenv("UMBRALUX_WORKERS", "4")
        assert env_int("UMBRALUX_WORKERS", 1) == 4

    def test_env_int_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("UMBRALUX_WORKERS", raising=False)
        assert env_int("UMBRALUX_WORKERS", 3) == 3

    def test_env_int_rejects_non_numeric(self, monkeypatch, caplog):
        monkeypatch.setenv("UMBRALUX_WIDTH", "wide")
        with caplog.at_level(logging.WARNING, logger="umbralux.config"):
            assert env_int("UMBRALUX_WIDTH", 400) == 400
        assert "UMBRALUX_WIDTH" in caplog.text
