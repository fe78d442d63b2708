"""Ordered dithering against a fixed palette.

Exported API
------------
- render(image, palette, depth, strength_divisor, workers=1)
- bayer_matrix(depth), normalize_matrix(matrix), tile_matrix(matrix, h, w)
- dither_map(depth, h, w)
- nearest(query, palette), quantize(pixels, palette)

Implementation notes
--------------------
All grids are NumPy float64 arrays with RGB channels in [0, 1]. Colour
matching uses Euclidean RGB distance; equidistant palette entries resolve to
the lowest index.
"""
from __future__ import annotations

from .bayer import bayer_matrix, dither_map, normalize_matrix, tile_matrix
from .pipeline import DitherResult, default_strength, render
from .quantize import (
    as_palette,
    distance,
    nearest,
    nearest_index,
    quantize,
    quantize_indices,
)

__all__ = [
    "DitherResult",
    "as_palette",
    "bayer_matrix",
    "default_strength",
    "distance",
    "dither_map",
    "nearest",
    "nearest_index",
    "normalize_matrix",
    "quantize",
    "quantize_indices",
    "render",
    "tile_matrix",
]
