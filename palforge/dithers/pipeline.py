"""Ordered-dither rendering against a fixed palette.

The pipeline builds a centered Bayer threshold map for the image size, adds
``threshold / strength_divisor`` to all three channels of every pixel and
snaps the result to the nearest palette colour. The undithered nearest-colour
quantization is produced alongside for comparison.

Every stage allocates new arrays; the caller's image is never modified and the
returned grids are read-only.
"""
from __future__ import annotations

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from ..errors import InvalidArgument
from .bayer import dither_map
from .quantize import PaletteLike, as_palette, quantize

Array = np.ndarray

logger = logging.getLogger(__name__)

# Upper bound on pixel*palette distance cells evaluated per band.
_BAND_CELLS = 1 << 22


@dataclass(frozen=True)
class DitherResult:
    """Output of :func:`render`.

    Attributes
    ----------
    plain : np.ndarray
        Nearest-colour quantization without dithering, shape (H, W, 3).
    dithered : np.ndarray
        Ordered-dither quantization, shape (H, W, 3).
    dither_map : np.ndarray
        Centered threshold map used for the dithered image, shape (H, W).
    """

    plain: Array
    dithered: Array
    dither_map: Array


def default_strength(palette: PaletteLike) -> float:
    """Conventional strength divisor: the number of palette entries."""
    return float(len(as_palette(palette)))


def _validate_image(image: Array) -> Array:
    if not isinstance(image, np.ndarray) or image.ndim != 3 or image.shape[2] != 3:
        shape = getattr(image, "shape", None)
        raise InvalidArgument("pipeline", f"image must be an RGB array with shape (H, W, 3), got {shape}")
    if image.shape[0] < 1 or image.shape[1] < 1:
        raise InvalidArgument("pipeline", f"image must be at least 1x1, got {image.shape[0]}x{image.shape[1]}")
    arr = image.astype(np.float64)
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument("pipeline", "image values must be finite")
    return arr


def _validate_strength(strength_divisor: float) -> float:
    if isinstance(strength_divisor, (bool, np.bool_)):
        raise InvalidArgument("pipeline", "strength_divisor must be a real number")
    try:
        s = float(strength_divisor)
    except (TypeError, ValueError):
        raise InvalidArgument("pipeline", f"strength_divisor must be a real number, got {strength_divisor!r}") from None
    if not math.isfinite(s) or s <= 0:
        raise InvalidArgument("pipeline", f"strength_divisor must be a positive finite number, got {strength_divisor!r}")
    return s


def _row_bands(height: int, width: int, n_colors: int) -> list[tuple[int, int]]:
    rows = max(1, _BAND_CELLS // max(1, width * n_colors))
    return [(y, min(height, y + rows)) for y in range(0, height, rows)]


def _quantize_bands(arr: Array, pal: Array, workers: int) -> Array:
    """Quantize ``arr`` in horizontal bands, optionally on a thread pool.

    Each band of the output is written by exactly one task; ``arr`` and
    ``pal`` are only read.
    """
    H, W, _ = arr.shape
    out = np.empty_like(arr)
    bands = _row_bands(H, W, len(pal))

    def fill(band: tuple[int, int]) -> None:
        y0, y1 = band
        out[y0:y1] = quantize(arr[y0:y1], pal)

    if workers == 1 or len(bands) == 1:
        for band in bands:
            fill(band)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # list() re-raises the first worker exception here
            list(pool.map(fill, bands))

    out.setflags(write=False)
    return out


def render(
    image: Array,
    palette: PaletteLike,
    depth: int,
    strength_divisor: float,
    workers: int = 1,
) -> DitherResult:
    """Render plain and ordered-dithered quantizations of an image.

    Parameters
    ----------
    image : np.ndarray
        RGB image of shape (H, W, 3) with channel values in [0, 1].
    palette : array-like
        Non-empty sequence of RGB triples in [0, 1].
    depth : int
        Bayer matrix depth (>=0); the matrix side is ``2**depth``.
    strength_divisor : float
        Positive divisor applied to the threshold, conventionally the palette
        size. Larger values give weaker dithering.
    workers : int
        Number of threads used for quantization (>=1).

    Returns
    -------
    DitherResult
        The plain and dithered images plus the threshold map.
    """
    img = _validate_image(image)
    pal = as_palette(palette)
    strength = _validate_strength(strength_divisor)
    if isinstance(workers, bool) or not isinstance(workers, (int, np.integer)) or workers < 1:
        raise InvalidArgument("pipeline", f"workers must be an integer >= 1, got {workers!r}")

    H, W, _ = img.shape
    t0 = time.perf_counter()
    thresh = dither_map(depth, H, W)
    logger.debug(
        "render %dx%d, %d colors, depth=%d, strength=1/%g, workers=%d",
        W, H, len(pal), depth, strength, workers,
    )

    plain = _quantize_bands(img, pal, int(workers))

    # The same scalar threshold offsets all three channels; no clamping.
    offset = img + thresh[:, :, None] * (1.0 / strength)
    dithered = _quantize_bands(offset, pal, int(workers))

    logger.debug("render finished in %.3fs", time.perf_counter() - t0)
    return DitherResult(plain=plain, dithered=dithered, dither_map=thresh)


__all__ = ["DitherResult", "default_strength", "render"]
