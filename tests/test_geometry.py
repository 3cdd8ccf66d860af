"""Tests for the complex value type and the viewport mapping."""

import pytest
from mandelbrot_hsl.geometry import Bounds, Complex


def test_complex_operations():
    z = Complex(1.5, -2.0)
    assert z.add(Complex(0.5, 3.0)) == Complex(2.0, 1.0)
    assert z.sq() == Complex(1.5 * 1.5 - 4.0, 2.0 * 1.5 * -2.0)
    assert z.abs_sq() == 6.25


def test_complex_is_immutable():
    z = Complex(1.0, 2.0)
    with pytest.raises(AttributeError):
        z.re = 3.0


def test_value_at_corners():
    bounds = Bounds(Complex(-2.0, -2.0), 4.0)
    assert bounds.value(0.0, 0.0) == Complex(-2.0, -2.0)
    assert bounds.value(1.0, 1.0) == Complex(2.0, 2.0)


def test_value_is_linear_in_each_axis():
    bounds = Bounds(Complex(-0.5, 0.25), 2.0)
    assert bounds.value(0.25, 0.0) == Complex(0.0, 0.25)
    assert bounds.value(0.0, 0.5) == Complex(-0.5, 1.25)


def test_value_extrapolates_outside_unit_square():
    bounds = Bounds(Complex(0.0, 0.0), 1.0)
    assert bounds.value(-1.0, 2.0) == Complex(-1.0, 2.0)


@pytest.mark.parametrize("size", [0.0, -1.0])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        Bounds(Complex(0.0, 0.0), size)


def test_extent():
    assert Bounds(Complex(-2.0, -1.0), 3.0).extent == (-2.0, 1.0, -1.0, 2.0)
