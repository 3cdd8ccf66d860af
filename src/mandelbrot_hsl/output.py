"""Encoding of rendered image buffers to disk."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

__all__ = ["save_image"]


def save_image(image: np.ndarray, path: str | Path) -> Path:
    """Write an ``(H, W, 3)`` uint8 buffer as an RGB image.

    The format follows the file extension. The parent directory is expected
    to exist; any ``OSError`` from the encoder propagates to the caller.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) RGB buffer, got shape {image.shape}")
    path = Path(path)
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    return path
