"""Pytest configuration and shared fixtures."""

import math
import os

import pytest

# pygame must not try to open a real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from umbralux.core.color import Color
from umbralux.core.matrix import Matrix
from umbralux.scenes import default_world as build_default_world

EPS = 1e-5


def assert_tuple_close(actual, expected, eps=EPS):
    """Component-wise comparison for points, vectors and colors."""
    assert type(actual) is type(expected), f"{actual!r} is not a {type(expected).__name__}"
    for a, e in zip(actual, expected):
        assert math.isclose(a, e, abs_tol=eps), f"{actual!r} != {expected!r}"


def assert_matrix_close(actual: Matrix, expected: Matrix, eps=EPS):
    assert actual.shape == expected.shape
    for r in range(actual.num_rows):
        for c in range(actual.num_cols):
            assert math.isclose(actual.get(r, c), expected.get(r, c), abs_tol=eps), \
                f"entry ({r}, {c}): {actual.get(r, c)} != {expected.get(r, c)}"


@pytest.fixture
def white():
    return Color(1, 1, 1)


@pytest.fixture
def black():
    return Color(0, 0, 0)


@pytest.fixture
def default_world():
    """The two-sphere world lit from (-10, 10, -10)."""
    return build_default_world()
