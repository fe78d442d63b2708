"""palforge: ordered (Bayer) dithering against a fixed colour palette."""
from __future__ import annotations

from .dithers import (  # noqa: F401
    DitherResult,
    bayer_matrix,
    dither_map,
    nearest,
    quantize,
    render,
    tile_matrix,
)
from .errors import InvalidArgument  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "DitherResult",
    "InvalidArgument",
    "bayer_matrix",
    "dither_map",
    "nearest",
    "quantize",
    "render",
    "tile_matrix",
]
