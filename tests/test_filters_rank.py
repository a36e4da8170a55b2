# -*- coding: utf-8 -*-
"""
Rank-Order Filter Tests.

Color (per-channel) and intensity rank-order filters, the masked median,
and window-size / operation validation. Results are checked against a
direct per-pixel sort-and-select implementation.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import math

import numpy as np
import pytest

from pixelhood.exceptions import InvalidParameterError
from pixelhood.grid import intensity
from pixelhood.image_processing.filters import (
    GrayRankOrderFilter,
    MaskedMedianFilter,
    RankOrderFilter,
)
from pixelhood.image_processing.filters.kernel import PLUS_3X3
from pixelhood.vocabulary import RankOperation


def _window(plane, i, j, n):
    c = n // 2 - (1 - n % 2)
    rows, cols = plane.shape
    values = []
    for k in range(n):
        for l in range(n):
            y = min(max(i + k - c, 0), rows - 1)
            x = min(max(j + l - c, 0), cols - 1)
            values.append(int(plane[y, x]))
    return sorted(values)


def _median(values):
    m = values[len(values) // 2]
    if len(values) % 2 == 0:
        m = (m + values[len(values) // 2 - 1]) // 2
    return m


def _reference_color(rgb, n, op, threshold=0):
    out = np.zeros_like(rgb)
    rows, cols = rgb.shape[:2]
    for c in range(3):
        plane = rgb[..., c]
        for i in range(rows):
            for j in range(cols):
                v = _window(plane, i, j, n)
                mean = sum(v) // len(v)
                if op is RankOperation.MIN:
                    r = v[0]
                elif op is RankOperation.MAX:
                    r = v[-1]
                elif op is RankOperation.MEDIAN:
                    r = _median(v)
                elif op is RankOperation.MEAN:
                    r = mean
                else:
                    orig = int(plane[i, j])
                    r = mean if abs(mean - orig) > threshold else orig
                out[i, j, c] = r
    return out


def _reference_stddev(values):
    avg = sum(values) // len(values)
    ss = sum((v - avg) ** 2 for v in values) // (len(values) - 1)
    return min(int(math.sqrt(ss)), 255)


class TestRankOrderFilter:
    """Per-channel rank-order statistics."""

    @pytest.mark.parametrize('n', [2, 3, 4, 5])
    @pytest.mark.parametrize('op', [
        RankOperation.MIN,
        RankOperation.MAX,
        RankOperation.MEDIAN,
        RankOperation.MEAN,
    ])
    def test_matches_reference(self, random_rgb, n, op):
        out = RankOrderFilter(n, op).apply(random_rgb)
        np.testing.assert_array_equal(out, _reference_color(random_rgb, n, op))

    @pytest.mark.parametrize('threshold', [0, 20, 90])
    def test_noise_clean_matches_reference(self, random_rgb, threshold):
        out = RankOrderFilter(3, RankOperation.NOISE_CLEAN, threshold).apply(random_rgb)
        expected = _reference_color(random_rgb, 3, RankOperation.NOISE_CLEAN, threshold)
        np.testing.assert_array_equal(out, expected)

    @pytest.mark.parametrize('n', [2, 3, 4, 7])
    def test_median_of_flat_window(self, make_gray, n):
        src = make_gray(np.full((5, 5), 133))
        out = RankOrderFilter(n, RankOperation.MEDIAN).apply(src)
        assert np.all(out == 133)

    def test_even_median_averages_middle_pair(self, make_gray):
        src = make_gray([[0, 10], [20, 30]])
        out = RankOrderFilter(2, RankOperation.MEDIAN).apply(src)
        np.testing.assert_array_equal(out[..., 0], [[15, 20], [25, 30]])

    @pytest.mark.parametrize('n', [2, 3, 4])
    def test_min_le_median_le_max(self, random_rgb, n):
        lo = RankOrderFilter(n, RankOperation.MIN).apply(random_rgb)
        med = RankOrderFilter(n, RankOperation.MEDIAN).apply(random_rgb)
        hi = RankOrderFilter(n, RankOperation.MAX).apply(random_rgb)
        assert np.all(lo <= med)
        assert np.all(med <= hi)

    def test_noise_clean_replaces_outlier_above_threshold(self, make_gray):
        levels = np.full((5, 5), 100)
        levels[2, 2] = 250
        out = RankOrderFilter(3, RankOperation.NOISE_CLEAN, 100).apply(make_gray(levels))
        # window mean (8 * 100 + 250) // 9 = 116 differs from 250 by 134
        assert out[2, 2, 0] == 116
        expected = np.full((5, 5), 100)
        expected[2, 2] = 116
        np.testing.assert_array_equal(out[..., 0], expected)

    def test_noise_clean_keeps_outlier_below_threshold(self, make_gray):
        levels = np.full((5, 5), 100)
        levels[2, 2] = 250
        src = make_gray(levels)
        out = RankOrderFilter(3, RankOperation.NOISE_CLEAN, 200).apply(src)
        np.testing.assert_array_equal(out, src)

    def test_noise_clean_per_channel(self):
        src = np.full((3, 3, 3), 100, dtype=np.uint8)
        src[1, 1] = (250, 100, 100)
        out = RankOrderFilter(3, RankOperation.NOISE_CLEAN, 50).apply(src)
        assert out[1, 1].tolist() == [116, 100, 100]

    def test_single_pixel_grid(self):
        src = np.array([[[5, 60, 200]]], dtype=np.uint8)
        for op in (RankOperation.MIN, RankOperation.MAX, RankOperation.MEDIAN,
                   RankOperation.MEAN, RankOperation.NOISE_CLEAN):
            np.testing.assert_array_equal(RankOrderFilter(4, op).apply(src), src)

    def test_window_larger_than_image(self, random_rgb):
        out = RankOrderFilter(25, RankOperation.MAX).apply(random_rgb)
        expected = random_rgb.reshape(-1, 3).max(axis=0)
        assert np.all(out == expected)

    def test_runtime_override(self, random_rgb):
        f = RankOrderFilter(3, RankOperation.MIN)
        np.testing.assert_array_equal(
            f.apply(random_rgb, operation=RankOperation.MAX),
            RankOrderFilter(3, RankOperation.MAX).apply(random_rgb),
        )

    @pytest.mark.parametrize('op', [RankOperation.RANGE, RankOperation.STANDARD_DEVIATION])
    def test_rejects_intensity_operations(self, op):
        with pytest.raises(InvalidParameterError, match='color'):
            RankOrderFilter(3, op)

    @pytest.mark.parametrize('n', [1, 0, -3, 102, 2.5, True, '3'])
    def test_rejects_window_size(self, n):
        with pytest.raises(InvalidParameterError):
            RankOrderFilter(n, RankOperation.MEDIAN)

    @pytest.mark.parametrize('threshold', [-1, 256])
    def test_rejects_threshold(self, threshold):
        with pytest.raises(InvalidParameterError):
            RankOrderFilter(3, RankOperation.NOISE_CLEAN, threshold)

    def test_rejects_unknown_operation(self):
        with pytest.raises(InvalidParameterError):
            RankOrderFilter(3, 'median')


class TestGrayRankOrderFilter:
    """Intensity range and standard deviation."""

    @pytest.mark.parametrize('n', [2, 3, 4])
    def test_range_matches_reference(self, random_rgb, n):
        out = GrayRankOrderFilter(n, RankOperation.RANGE).apply(random_rgb)
        plane = intensity(random_rgb)
        for i in range(plane.shape[0]):
            for j in range(plane.shape[1]):
                v = _window(plane, i, j, n)
                assert out[i, j, 0] == v[-1] - v[0]

    @pytest.mark.parametrize('n', [2, 3, 5])
    def test_stddev_matches_reference(self, random_rgb, n):
        out = GrayRankOrderFilter(n, RankOperation.STANDARD_DEVIATION).apply(random_rgb)
        plane = intensity(random_rgb)
        for i in range(plane.shape[0]):
            for j in range(plane.shape[1]):
                assert out[i, j, 0] == _reference_stddev(_window(plane, i, j, n))

    def test_stddev_small_window(self, make_gray):
        out = GrayRankOrderFilter(2, RankOperation.STANDARD_DEVIATION).apply(
            make_gray([[0, 10], [20, 30]])
        )
        # {0, 10, 20, 30}: avg 15, squared deviations 500, // 3 = 166
        assert out[0, 0, 0] == 12
        assert out[1, 1, 0] == 0

    def test_flat_is_zero(self, make_gray):
        src = make_gray(np.full((4, 3), 61))
        for op in (RankOperation.RANGE, RankOperation.STANDARD_DEVIATION):
            assert np.all(GrayRankOrderFilter(3, op).apply(src) == 0)

    def test_output_is_gray(self, random_rgb):
        out = GrayRankOrderFilter(3, RankOperation.RANGE).apply(random_rgb)
        np.testing.assert_array_equal(out[..., 0], out[..., 1])
        np.testing.assert_array_equal(out[..., 0], out[..., 2])

    def test_single_pixel_grid(self):
        src = np.array([[[5, 60, 200]]], dtype=np.uint8)
        for op in (RankOperation.RANGE, RankOperation.STANDARD_DEVIATION):
            assert GrayRankOrderFilter(2, op).apply(src).tolist() == [[[0, 0, 0]]]

    @pytest.mark.parametrize('op', [
        RankOperation.MIN,
        RankOperation.MAX,
        RankOperation.MEDIAN,
        RankOperation.MEAN,
        RankOperation.NOISE_CLEAN,
    ])
    def test_rejects_color_operations(self, op):
        with pytest.raises(InvalidParameterError, match='intensity'):
            GrayRankOrderFilter(3, op)


class TestMaskedMedianFilter:
    """Median over the non-zero cells of a mask."""

    def test_plus_removes_isolated_spike(self, make_gray):
        levels = np.zeros((3, 3))
        levels[1, 1] = 255
        out = MaskedMedianFilter(PLUS_3X3).apply(make_gray(levels))
        assert np.all(out == 0)

    def test_plus_keeps_flat(self, make_gray):
        src = make_gray(np.full((4, 4), 42))
        np.testing.assert_array_equal(MaskedMedianFilter(PLUS_3X3).apply(src), src)

    def test_even_count_mask(self, make_gray):
        out = MaskedMedianFilter([[1, 1]]).apply(make_gray([[10, 21, 40]]))
        np.testing.assert_array_equal(out[..., 0], [[15, 30, 40]])

    def test_weights_only_select(self, random_rgb):
        a = MaskedMedianFilter(PLUS_3X3).apply(random_rgb)
        b = MaskedMedianFilter([[0, 7, 0], [-1, 3, 9], [0, 2, 0]]).apply(random_rgb)
        np.testing.assert_array_equal(a, b)

    def test_full_mask_equals_square_median(self, random_rgb):
        a = MaskedMedianFilter(np.ones((3, 3), dtype=int)).apply(random_rgb)
        b = RankOrderFilter(3, RankOperation.MEDIAN).apply(random_rgb)
        np.testing.assert_array_equal(a, b)

    def test_rejects_empty_mask(self):
        with pytest.raises(InvalidParameterError):
            MaskedMedianFilter([[0, 0], [0, 0]])
