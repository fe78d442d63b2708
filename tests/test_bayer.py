"""Tests for Bayer matrix construction and tiling."""

import numpy as np
import pytest

from palforge.dithers.bayer import bayer_matrix, dither_map, normalize_matrix, tile_matrix
from palforge.errors import InvalidArgument


class TestBayerMatrix:
    def test_depth_zero(self):
        m = bayer_matrix(0)
        assert m.tolist() == [[0]]
        assert normalize_matrix(m).tolist() == [[0.0]]

    def test_depth_one(self):
        m = bayer_matrix(1)
        assert m.tolist() == [[0, 2], [3, 1]]
        assert normalize_matrix(m).tolist() == [[0.0, 0.5], [0.75, 0.25]]

    def test_depth_two_known_values(self):
        expected = [
            [0, 8, 2, 10],
            [12, 4, 14, 6],
            [3, 11, 1, 9],
            [15, 7, 13, 5],
        ]
        assert bayer_matrix(2).tolist() == expected

    @pytest.mark.parametrize("depth", range(0, 6))
    def test_values_are_permutation(self, depth):
        m = bayer_matrix(depth)
        side = 2 ** depth
        assert m.shape == (side, side)
        assert sorted(m.ravel().tolist()) == list(range(side * side))

    @pytest.mark.parametrize("depth", range(1, 6))
    def test_quadrants_follow_previous_level(self, depth):
        m = bayer_matrix(depth)
        prev = bayer_matrix(depth - 1)
        s = prev.shape[0]
        np.testing.assert_array_equal(m[:s, :s], 4 * prev + 0)
        np.testing.assert_array_equal(m[:s, s:], 4 * prev + 2)
        np.testing.assert_array_equal(m[s:, :s], 4 * prev + 3)
        np.testing.assert_array_equal(m[s:, s:], 4 * prev + 1)

    @pytest.mark.parametrize("depth", range(0, 5))
    def test_normalized_range(self, depth):
        n = normalize_matrix(bayer_matrix(depth))
        side = 2 ** depth
        assert n.min() == 0.0
        assert n.max() == pytest.approx(1 - 1 / (side * side))

    @pytest.mark.parametrize("depth", [-1, -5, 1.5, "2", True, None])
    def test_rejects_bad_depth(self, depth):
        with pytest.raises(InvalidArgument) as exc:
            bayer_matrix(depth)
        assert exc.value.component == "bayer"

    def test_accepts_numpy_integer(self):
        assert bayer_matrix(np.int64(1)).tolist() == [[0, 2], [3, 1]]


class TestTileMatrix:
    def test_wraps_both_axes(self):
        m = np.array([[0, 2], [3, 1]])
        out = tile_matrix(m, 3, 5)
        assert out.tolist() == [
            [0, 2, 0, 2, 0],
            [3, 1, 3, 1, 3],
            [0, 2, 0, 2, 0],
        ]

    def test_periodicity(self):
        m = normalize_matrix(bayer_matrix(2))
        out = tile_matrix(m, 13, 17)
        size = 4
        for r in range(13):
            for c in range(17):
                assert out[r, c] == m[r % size, c % size]
                if r + size < 13:
                    assert out[r, c] == out[r + size, c]
                if c + size < 17:
                    assert out[r, c] == out[r, c + size]

    def test_smaller_than_matrix_crops(self):
        m = bayer_matrix(3)
        np.testing.assert_array_equal(tile_matrix(m, 2, 3), m[:2, :3])

    @pytest.mark.parametrize("h,w", [(0, 5), (5, 0), (0, 0)])
    def test_zero_size_gives_empty(self, h, w):
        out = tile_matrix(bayer_matrix(1), h, w)
        assert out.shape == (h, w)
        assert out.size == 0

    def test_rejects_non_square(self):
        with pytest.raises(InvalidArgument) as exc:
            tile_matrix(np.zeros((2, 3)), 4, 4)
        assert exc.value.component == "tiler"

    def test_rejects_empty_matrix(self):
        with pytest.raises(InvalidArgument):
            tile_matrix(np.zeros((0, 0)), 4, 4)

    @pytest.mark.parametrize("h,w", [(-1, 4), (4, -1), (2.5, 4)])
    def test_rejects_bad_dimensions(self, h, w):
        with pytest.raises(InvalidArgument):
            tile_matrix(bayer_matrix(1), h, w)


class TestDitherMap:
    def test_centered_depth_one(self):
        out = dither_map(1, 2, 2)
        assert out.tolist() == [[-0.5, 0.0], [0.25, -0.25]]

    def test_range(self):
        out = dither_map(3, 20, 30)
        assert out.shape == (20, 30)
        assert out.min() >= -0.5
        assert out.max() < 0.5

    def test_read_only(self):
        out = dither_map(2, 4, 4)
        assert not out.flags.writeable
        with pytest.raises(ValueError):
            out[0, 0] = 1.0
