from __future__ import annotations

from typing import Tuple

import numpy as np
from numba import njit, prange

from .baseline import render_baseline
from .config import ENGINES
from .geometry import ESCAPE_RADIUS_SQUARED, MAX_ITERATIONS, Bounds
from .palette import colorize

__all__ = ["ENGINES", "escape_times", "render"]


@njit(parallel=True)
def _escape_times(
    re_min: float,
    im_min: float,
    size: float,
    resolution: int,
    max_iterations: int,
    escape_radius_sq: float,
) -> np.ndarray:
    grid = np.full((resolution, resolution), -1, dtype=np.int32)

    # rows are independent, so prange over y
    for y in prange(resolution):
        cimag = im_min + (y / resolution) * size
        for x in range(resolution):
            creal = re_min + (x / resolution) * size
            zreal = creal
            zimag = cimag
            for i in range(max_iterations):
                if zreal * zreal + zimag * zimag > escape_radius_sq:
                    grid[y, x] = i
                    break
                zimag, zreal = (
                    2.0 * zreal * zimag + cimag,
                    zreal * zreal - zimag * zimag + creal,
                )

    return grid


def escape_times(bounds: Bounds, resolution: int, max_iterations: int = MAX_ITERATIONS) -> np.ndarray:
    """Escape-time grid indexed ``[y, x]``, with ``-1`` for no escape."""
    if resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")
    return _escape_times(
        float(bounds.bottom_left.re),
        float(bounds.bottom_left.im),
        float(bounds.size),
        int(resolution),
        int(max_iterations),
        ESCAPE_RADIUS_SQUARED,
    )


def render(
    bounds: Bounds,
    resolution: int,
    max_iterations: int = MAX_ITERATIONS,
    engine: str = "numba",
) -> Tuple[np.ndarray, np.ndarray]:
    """Render ``bounds`` to an RGB image, returning ``(image, escape_times)``."""
    if engine == "baseline":
        return render_baseline(bounds, resolution, max_iterations)
    if engine != "numba":
        raise ValueError(f"Unknown engine {engine!r}, expected one of {ENGINES}")

    grid = escape_times(bounds, resolution, max_iterations)
    return colorize(grid, max_iterations), grid
