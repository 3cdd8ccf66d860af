"""HSL palette mapping escape times to RGB colors."""

from __future__ import annotations

import colorsys
import math
from typing import Optional, Tuple

import numpy as np

from .geometry import MAX_ITERATIONS

__all__ = [
    "SATURATION",
    "LIGHTNESS",
    "INSIDE_COLOR",
    "hsl_to_rgb",
    "color_map",
    "palette_table",
    "colorize",
]

SATURATION = 0.3
LIGHTNESS = 0.6
INSIDE_COLOR = (0, 0, 0)

RGB = Tuple[int, int, int]


def _to_byte(fraction: float) -> int:
    # round half away from zero; fractions are never negative here
    return int(math.floor(fraction * 255.0 + 0.5))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """Convert an HSL color (hue in degrees) to 8-bit RGB."""
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
    return _to_byte(r), _to_byte(g), _to_byte(b)


def color_map(escape_time: Optional[int], max_iterations: int = MAX_ITERATIONS) -> RGB:
    """Color for an escape time; points that never escaped are black."""
    if escape_time is None:
        return INSIDE_COLOR
    angle = escape_time / max_iterations * 360.0
    return hsl_to_rgb(angle, SATURATION, LIGHTNESS)


def palette_table(max_iterations: int = MAX_ITERATIONS) -> np.ndarray:
    """Lookup table with row ``t`` holding ``color_map(t)``.

    The extra last row is the inside color, so an escape-time grid that uses
    ``-1`` for "no escape" can index the table directly.
    """
    table = np.empty((max_iterations + 1, 3), dtype=np.uint8)
    for t in range(max_iterations):
        table[t] = color_map(t, max_iterations)
    table[max_iterations] = INSIDE_COLOR
    return table


def colorize(escape_times: np.ndarray, max_iterations: int = MAX_ITERATIONS) -> np.ndarray:
    """Map an int32 escape-time grid to an RGB image of the same shape."""
    return palette_table(max_iterations)[escape_times]
