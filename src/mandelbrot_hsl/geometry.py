"""Complex values and the square viewport they are sampled from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

__all__ = ["MAX_ITERATIONS", "ESCAPE_RADIUS_SQUARED", "Complex", "Bounds"]

MAX_ITERATIONS = 100
ESCAPE_RADIUS_SQUARED = 4.0


@dataclass(frozen=True)
class Complex:
    """Immutable complex number with float components."""

    re: float
    im: float

    def add(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def sq(self) -> Complex:
        return Complex(self.re * self.re - self.im * self.im, 2.0 * self.re * self.im)

    def abs_sq(self) -> float:
        """Squared magnitude, avoiding the square root."""
        return self.re * self.re + self.im * self.im


@dataclass(frozen=True)
class Bounds:
    """Square region of the plane anchored at its bottom-left corner."""

    bottom_left: Complex
    size: float

    def __post_init__(self) -> None:
        if not self.size > 0:
            raise ValueError(f"Bounds size must be positive, got {self.size!r}")

    def value(self, frac_x: float, frac_y: float) -> Complex:
        """Map fractional image coordinates onto the plane.

        Fractions outside ``[0, 1]`` are not rejected; they extrapolate
        linearly past the viewport edges.
        """
        return Complex(
            self.bottom_left.re + frac_x * self.size,
            self.bottom_left.im + frac_y * self.size,
        )

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        re_min, im_min = self.bottom_left.re, self.bottom_left.im
        return re_min, re_min + self.size, im_min, im_min + self.size
