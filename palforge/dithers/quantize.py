"""Nearest-colour matching against a fixed palette.

Distances are plain Euclidean distances in RGB space. When several palette
entries are exactly equidistant from a colour the one with the lowest index
wins, so results are reproducible for any palette order.
"""
from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ..errors import InvalidArgument

Array = np.ndarray
PaletteLike = Union[Array, Sequence[Sequence[float]]]


def as_palette(colors: PaletteLike) -> Array:
    """Convert a sequence of RGB triples to a float64 ``(N, 3)`` palette.

    Duplicate colours are allowed. Raises InvalidArgument if the palette is
    empty, not shaped ``(N, 3)`` or holds non-finite values.
    """
    pal = np.asarray(colors, dtype=np.float64)
    if pal.size == 0:
        raise InvalidArgument("quantizer", "palette must contain at least one color")
    if pal.ndim != 2 or pal.shape[1] != 3:
        raise InvalidArgument("quantizer", f"palette must have shape (N, 3), got {pal.shape}")
    if not np.all(np.isfinite(pal)):
        raise InvalidArgument("quantizer", "palette values must be finite")
    return pal


def _as_pixels(pixels: Array) -> Array:
    arr = np.asarray(pixels, dtype=np.float64)
    if arr.ndim < 1 or arr.shape[-1] != 3:
        raise InvalidArgument("quantizer", f"pixels must have a trailing RGB axis of size 3, got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument("quantizer", "pixel values must be finite")
    return arr


def distance(a: Array, b: Array) -> float:
    """Euclidean distance between two RGB colours."""
    d = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum(d * d)))


def quantize_indices(pixels: Array, palette: PaletteLike) -> Array:
    """Index of the nearest palette entry for every pixel.

    Parameters
    ----------
    pixels : np.ndarray
        Array of shape (..., 3). Values may lie outside [0, 1].
    palette : array-like
        ``N >= 1`` RGB triples.

    Returns
    -------
    np.ndarray
        Integer array with the leading shape of ``pixels``.
    """
    pal = as_palette(palette)
    arr = _as_pixels(pixels)
    diff = arr[..., None, :] - pal
    dist = np.sqrt(np.sum(diff * diff, axis=-1))
    # argmin returns the first occurrence, which is the lowest-index tie-break
    return np.argmin(dist, axis=-1)


def quantize(pixels: Array, palette: PaletteLike) -> Array:
    """Replace every pixel by its nearest palette colour.

    The output has the same shape as ``pixels`` and every pixel is a literal
    copy of a palette row.
    """
    pal = as_palette(palette)
    return pal[quantize_indices(pixels, pal)]


def nearest_index(query: Array, palette: PaletteLike) -> int:
    """Index of the palette entry closest to a single colour."""
    q = _as_pixels(query)
    if q.shape != (3,):
        raise InvalidArgument("quantizer", f"query must be a single RGB triple, got shape {q.shape}")
    return int(quantize_indices(q, palette))


def nearest(query: Array, palette: PaletteLike) -> Array:
    """Palette colour closest to ``query``; lowest index wins ties."""
    pal = as_palette(palette)
    return pal[nearest_index(query, pal)].copy()


__all__ = [
    "as_palette",
    "distance",
    "nearest",
    "nearest_index",
    "quantize",
    "quantize_indices",
]
