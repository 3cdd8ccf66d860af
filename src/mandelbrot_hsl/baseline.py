"""Pure-Python escape-time evaluation and reference rasterizer."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional, Tuple

import numpy as np

from .geometry import ESCAPE_RADIUS_SQUARED, MAX_ITERATIONS, Bounds, Complex
from .palette import color_map

__all__ = [
    "MAX_ITERATIONS",
    "ESCAPE_RADIUS_SQUARED",
    "orbit",
    "escape_time",
    "render_baseline",
]


def orbit(c: Complex) -> Iterator[Complex]:
    """Yield the Mandelbrot orbit ``c, c^2 + c, ...`` without end."""
    z = c
    while True:
        yield z
        z = z.sq().add(c)


def escape_time(c: Complex, max_iterations: int = MAX_ITERATIONS) -> Optional[int]:
    """Index of the first orbit term outside the escape radius, if any."""
    for i, z in enumerate(islice(orbit(c), max_iterations)):
        if z.abs_sq() > ESCAPE_RADIUS_SQUARED:
            return i
    return None


def render_baseline(
    bounds: Bounds,
    resolution: int,
    max_iterations: int = MAX_ITERATIONS,
) -> Tuple[np.ndarray, np.ndarray]:
    """Rasterize ``bounds`` pixel by pixel.

    Returns the ``(resolution, resolution, 3)`` RGB image and the int32
    escape-time grid, both indexed ``[y, x]``; ``-1`` marks points that
    never escaped.
    """
    if resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")

    image = np.zeros((resolution, resolution, 3), dtype=np.uint8)
    escape_times = np.full((resolution, resolution), -1, dtype=np.int32)

    for y in range(resolution):
        frac_y = float(y) / float(resolution)
        for x in range(resolution):
            c = bounds.value(float(x) / float(resolution), frac_y)
            t = escape_time(c, max_iterations)
            if t is not None:
                escape_times[y, x] = t
            image[y, x] = color_map(t, max_iterations)

    return image, escape_times
