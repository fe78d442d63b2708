"""Side-by-side composition of equally tall images for comparison."""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def side_by_side(*images: Array, gap: int = 0, fill: int = 0) -> Array:
    """Concatenate RGB images left to right, separated by ``gap`` columns.

    All images must share height and dtype; the gap is filled with ``fill``.
    """
    if not images:
        raise ValueError("at least one image is required")
    for im in images:
        if not isinstance(im, np.ndarray) or im.ndim != 3 or im.shape[2] != 3:
            raise ValueError("images must be RGB arrays with shape (H, W, 3)")
    h = images[0].shape[0]
    if any(im.shape[0] != h for im in images):
        raise ValueError("images must share the same height")
    if gap < 0:
        raise ValueError("gap must be >= 0")

    spacer = np.full((h, gap, 3), fill, dtype=images[0].dtype)
    parts = []
    for i, im in enumerate(images):
        if i and gap:
            parts.append(spacer)
        parts.append(im)
    return np.concatenate(parts, axis=1)
