"""Tests for the per-pixel rasterizer on small images."""

import numpy as np
import pytest
from mandelbrot_hsl.baseline import escape_time, render_baseline
from mandelbrot_hsl.computation import render
from mandelbrot_hsl.geometry import Bounds, Complex
from mandelbrot_hsl.palette import color_map

DEFAULT_BOUNDS = Bounds(Complex(-2.0, -2.0), 4.0)


@pytest.mark.parametrize("x", range(4))
@pytest.mark.parametrize("y", range(4))
def test_four_by_four_grid_points(x, y):
    c = DEFAULT_BOUNDS.value(x / 4, y / 4)
    assert c == Complex(-2.0 + x, -2.0 + y)


@pytest.mark.parametrize("engine", ["baseline", "numba"])
def test_four_by_four_colors(engine):
    image, grid = render(DEFAULT_BOUNDS, 4, engine=engine)
    assert image.shape == (4, 4, 3)
    assert image.dtype == np.uint8
    for y in range(4):
        for x in range(4):
            t = escape_time(Complex(-2.0 + x, -2.0 + y))
            assert tuple(image[y, x]) == color_map(t)
            assert grid[y, x] == (-1 if t is None else t)


def test_four_by_four_known_pixels():
    image, grid = render_baseline(DEFAULT_BOUNDS, 4)
    # (0, 0) -> -2-2i escapes immediately
    assert grid[0, 0] == 0
    # (2, 2) -> 0+0i is in the set
    assert grid[2, 2] == -1
    assert tuple(image[2, 2]) == (0, 0, 0)
    # (1, 2) -> -1+0i is periodic
    assert grid[2, 1] == -1


def test_render_is_deterministic():
    first, _ = render_baseline(DEFAULT_BOUNDS, 8)
    second, _ = render_baseline(DEFAULT_BOUNDS, 8)
    np.testing.assert_array_equal(first, second)
