"""Structured results returned from a render."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np


@dataclass(frozen=True)
class RenderReport:
    """Container for outputs produced by ``render_config``."""

    image: np.ndarray
    escape_times: np.ndarray
    timing: Dict[str, Any]

    @property
    def inside_fraction(self) -> float:
        """Fraction of pixels whose orbit never escaped."""
        if self.escape_times.size == 0:
            return 0.0
        return float(np.count_nonzero(self.escape_times < 0)) / self.escape_times.size

    def histogram_records(self) -> List[Dict[str, int]]:
        """Pixel counts per escape time; ``-1`` collects the inside points."""
        values, counts = np.unique(self.escape_times, return_counts=True)
        return [
            {"escape_time": int(value), "pixels": int(count)}
            for value, count in zip(values, counts)
        ]
