"""Palette sources for the command-line tool.

The dithering engine only consumes a palette; these helpers produce one,
either from an explicit list of colours or by clustering the source image
with Pillow's median-cut quantizer. Both return float64 ``(N, 3)`` arrays with
channels in [0, 1].
"""
from __future__ import annotations

import numpy as np
from PIL import Image

from .loader import to_unit

Array = np.ndarray


def parse_palette(text: str) -> Array:
    """Parse ``"r,g,b;r,g,b;..."`` with integer 0-255 components.

    Example: ``"0,0,0;255,255,255"`` is black and white.
    """
    if not text or not text.strip():
        raise ValueError("empty palette")
    colors = []
    entries = [e.strip() for e in text.split(";") if e.strip()]
    for idx, entry in enumerate(entries):
        parts = [p.strip() for p in entry.split(",")]
        if len(parts) != 3:
            raise ValueError(f"palette entry {idx} must have exactly 3 components, got: {entry}")
        try:
            rgb = tuple(int(p) for p in parts)
        except ValueError:
            raise ValueError(f"palette entry {idx} must be integers 0-255, got: {entry}") from None
        if any(c < 0 or c > 255 for c in rgb):
            raise ValueError(f"palette entry {idx} contains out-of-range value (0-255): {entry}")
        colors.append(rgb)
    if not colors:
        raise ValueError("palette must contain at least one color")
    return to_unit(np.array(colors, dtype=np.uint8))


def extract_palette(arr: Array, num_colors: int) -> Array:
    """Pick up to ``num_colors`` representative colours from an image.

    Parameters
    ----------
    arr : np.ndarray
        RGB image of shape (H, W, 3), dtype=uint8.
    num_colors : int
        Maximum palette size, 1..256.

    Returns
    -------
    np.ndarray
        The colours the quantizer actually assigned, in palette-index order.
        May hold fewer than ``num_colors`` entries for images with few
        distinct colours.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if not 1 <= num_colors <= 256:
        raise ValueError("num_colors must be between 1 and 256")

    im = Image.fromarray(arr)
    q = im.quantize(colors=num_colors, method=Image.Quantize.MEDIANCUT, dither=Image.Dither.NONE)
    used = sorted(idx for _count, idx in q.getcolors(maxcolors=256))
    table = np.array(q.getpalette(), dtype=np.uint8).reshape(-1, 3)
    return to_unit(table[used])
