"""Image loading and saving utilities using Pillow, with NumPy arrays.

Files are read and written as ``uint8`` RGB arrays. The dithering engine works
on floats in [0, 1]; :func:`to_unit` and :func:`to_uint8` convert between the
two representations.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image


Array = np.ndarray


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an RGB NumPy array (uint8).

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 3), dtype=uint8, in RGB order.
    """
    p = Path(path)
    with Image.open(p) as im:
        im = im.convert("RGB")
        arr = np.array(im, dtype=np.uint8)
    return arr


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGB NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 3), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")

    p = Path(path)
    Image.fromarray(arr).save(p)


def to_unit(arr: Array) -> Array:
    """Convert a uint8 array to float64 with channels in [0, 1]."""
    return np.asarray(arr, dtype=np.float64) / 255.0


def to_uint8(arr: Array) -> Array:
    """Convert a [0, 1] float array to rounded, clipped uint8."""
    return np.clip(np.rint(np.asarray(arr, dtype=np.float64) * 255.0), 0, 255).astype(np.uint8)
