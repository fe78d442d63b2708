"""Bayer threshold matrices and their periodic tiling over an image."""
from __future__ import annotations

import numpy as np

from ..errors import InvalidArgument

Array = np.ndarray


def _is_int(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def bayer_matrix(depth: int) -> Array:
    """Generate the ``2**depth x 2**depth`` Bayer matrix.

    The matrix holds every integer in ``0..(2**depth)**2 - 1`` exactly once.
    Each level is built from the previous one ``m`` as the quadrants::

        4*m + 0 | 4*m + 2
        --------+--------
        4*m + 3 | 4*m + 1

    Parameters
    ----------
    depth : int
        Recursion depth (>=0). Depth 0 gives ``[[0]]``, depth 3 an 8x8 matrix.

    Returns
    -------
    np.ndarray
        Integer matrix (int64).
    """
    if not _is_int(depth):
        raise InvalidArgument("bayer", f"depth must be an integer, got {depth!r}")
    if depth < 0:
        raise InvalidArgument("bayer", f"depth must be >= 0, got {depth}")

    def build(k: int) -> Array:
        if k == 0:
            return np.array([[0]], dtype=np.int64)
        a = 4 * build(k - 1)
        return np.block(
            [
                [a + 0, a + 2],
                [a + 3, a + 1],
            ]
        )

    return build(int(depth))


def normalize_matrix(matrix: Array) -> Array:
    """Scale a threshold matrix to [0, 1) by dividing by its element count."""
    m = np.asarray(matrix)
    if m.size == 0:
        raise InvalidArgument("bayer", "cannot normalize an empty matrix")
    return m.astype(np.float64) / float(m.size)


def tile_matrix(matrix: Array, height: int, width: int) -> Array:
    """Tile a square matrix periodically to cover ``height x width``.

    Output cell ``(r, c)`` is ``matrix[r % M, c % M]``. This is repetition,
    not resampling: the matrix is never stretched.

    Parameters
    ----------
    matrix : np.ndarray
        Square ``M x M`` matrix, ``M >= 1``.
    height : int
        Output rows (>=0).
    width : int
        Output columns (>=0).

    Returns
    -------
    np.ndarray
        Array of shape (height, width) with the matrix dtype. Empty when
        either dimension is zero.
    """
    m = np.asarray(matrix)
    if m.ndim != 2 or m.shape[0] != m.shape[1] or m.shape[0] < 1:
        raise InvalidArgument("tiler", f"matrix must be a non-empty square 2-D array, got shape {m.shape}")
    if not _is_int(height) or not _is_int(width):
        raise InvalidArgument("tiler", f"dimensions must be integers, got {height!r}x{width!r}")
    if height < 0 or width < 0:
        raise InvalidArgument("tiler", f"dimensions must be >= 0, got {height}x{width}")

    size = m.shape[0]
    ty = (height + size - 1) // size
    tx = (width + size - 1) // size
    return np.tile(m, (ty, tx))[:height, :width]


def dither_map(depth: int, height: int, width: int) -> Array:
    """Centered threshold map for an image of ``height x width``.

    Builds the depth-``depth`` Bayer matrix, normalizes it to [0, 1), tiles it
    over the image and subtracts 0.5, giving values in [-0.5, 0.5) with
    period ``2**depth`` on both axes. The returned array is read-only.
    """
    thresh = tile_matrix(normalize_matrix(bayer_matrix(depth)), height, width) - 0.5
    thresh.setflags(write=False)
    return thresh


__all__ = ["bayer_matrix", "normalize_matrix", "tile_matrix", "dither_map"]
