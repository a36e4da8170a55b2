# -*- coding: utf-8 -*-
"""
Convolution and Emboss Filter Tests.

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

import logging

import numpy as np
import pytest

from pixelhood.exceptions import InvalidGridError, InvalidParameterError
from pixelhood.grid import intensity
from pixelhood.image_processing.filters import ConvolutionFilter, EmbossFilter, Kernel
from pixelhood.image_processing.filters.kernel import (
    LAPLACIAN_3X3,
    SHARPENING_3X3,
    SMOOTHING_3X3,
)


def _reference_convolution(rgb, weights):
    """Per-pixel loop with explicit clamping and truncating division."""
    weights = np.asarray(weights)
    kh, kw = weights.shape
    cy = kh // 2 - (1 - kh % 2)
    cx = kw // 2 - (1 - kw % 2)
    divisor = max(1, int(weights.sum()))
    rows, cols = rgb.shape[:2]
    out = np.zeros_like(rgb)
    for i in range(rows):
        for j in range(cols):
            total = np.zeros(3, dtype=np.int64)
            for k in range(kh):
                for l in range(kw):
                    y = min(max(i + k - cy, 0), rows - 1)
                    x = min(max(j + l - cx, 0), cols - 1)
                    total += rgb[y, x].astype(np.int64) * weights[k, l]
            q = np.sign(total) * (np.abs(total) // divisor)
            out[i, j] = np.clip(q, 0, 255)
    return out


class TestConvolutionFilter:
    """Normalised per-channel convolution."""

    def test_identity_kernel(self, random_rgb):
        f = ConvolutionFilter([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
        np.testing.assert_array_equal(f.apply(random_rgb), random_rgb)

    def test_even_identity_kernel(self, random_rgb):
        f = ConvolutionFilter([[1, 0], [0, 0]])
        np.testing.assert_array_equal(f.apply(random_rgb), random_rgb)

    def test_even_kernel_anchor(self, make_gray):
        src = make_gray([[10, 20, 30]])
        out = ConvolutionFilter([[0, 1], [0, 0]]).apply(src)
        np.testing.assert_array_equal(out[..., 0], [[20, 30, 30]])

    @pytest.mark.parametrize('weights', [
        SMOOTHING_3X3.weights,
        SHARPENING_3X3.weights,
        LAPLACIAN_3X3.weights,
        [[1, 2, 3, 4], [0, -1, 2, 1]],
        [[-2, 1], [1, -2]],
    ])
    def test_matches_reference(self, random_rgb, weights):
        out = ConvolutionFilter(weights).apply(random_rgb)
        np.testing.assert_array_equal(out, _reference_convolution(random_rgb, weights))

    def test_single_pixel_grid(self):
        src = np.array([[[12, 99, 240]]], dtype=np.uint8)
        np.testing.assert_array_equal(ConvolutionFilter(SMOOTHING_3X3).apply(src), src)

    def test_zero_sum_kernel_uses_divisor_one(self, make_gray):
        src = make_gray([[10, 50, 200]])
        out = ConvolutionFilter([[-1, 1, 0]]).apply(src)
        np.testing.assert_array_equal(out[..., 1], [[0, 40, 150]])

    def test_zero_sum_kernel_on_flat_image(self, make_gray):
        out = ConvolutionFilter(LAPLACIAN_3X3).apply(make_gray(np.full((4, 4), 90)))
        assert np.all(out == 0)

    def test_clip_saturation(self, make_gray):
        src = make_gray([[0, 200, 0]])
        out = ConvolutionFilter([[-1, 3, -1]]).apply(src)
        np.testing.assert_array_equal(out[..., 0], [[0, 255, 0]])
        assert out.dtype == np.uint8

    def test_grayscale_flag(self, random_rgb):
        plain = ConvolutionFilter(SMOOTHING_3X3).apply(random_rgb)
        gray = ConvolutionFilter(SMOOTHING_3X3, to_grayscale=True).apply(random_rgb)
        np.testing.assert_array_equal(gray[..., 0], intensity(plain))
        np.testing.assert_array_equal(gray[..., 0], gray[..., 2])

    def test_source_not_modified(self, random_rgb):
        before = random_rgb.copy()
        ConvolutionFilter(SHARPENING_3X3).apply(random_rgb)
        np.testing.assert_array_equal(random_rgb, before)

    def test_divisor_fallback_logged(self, caplog):
        with caplog.at_level(logging.DEBUG,
                             logger='pixelhood.image_processing.filters.convolution'):
            ConvolutionFilter(LAPLACIAN_3X3)
        assert 'normalising by 1' in caplog.text

    def test_accepts_kernel_instance(self):
        k = Kernel([[1]])
        assert ConvolutionFilter(k).kernel is k

    def test_rejects_bad_kernel(self):
        with pytest.raises(InvalidParameterError):
            ConvolutionFilter([1, 2, 3])

    @pytest.mark.parametrize('source', [
        None,
        np.zeros((3, 3), dtype=np.uint8),
        np.zeros((0, 3, 3), dtype=np.uint8),
        np.zeros((3, 3, 3), dtype=np.float64),
    ])
    def test_rejects_bad_source(self, source):
        with pytest.raises(InvalidGridError):
            ConvolutionFilter(SMOOTHING_3X3).apply(source)


class TestEmbossFilter:
    """Emboss recentres the halved response on 127."""

    def test_flat_is_mid_gray(self, make_gray):
        out = EmbossFilter().apply(make_gray(np.full((3, 4), 77)))
        assert np.all(out == 127)

    def test_halving_truncates_toward_zero(self, make_gray):
        levels = np.full((3, 3), 50)
        levels[0, 0] = 10
        levels[2, 2] = 13
        out = EmbossFilter().apply(make_gray(levels))
        # centre: I[0, 0] - I[2, 2] = -3, halved to -1
        assert out[1, 1, 0] == 126

    def test_positive_response(self, make_gray):
        levels = np.zeros((3, 3))
        levels[0, 0] = 255
        out = EmbossFilter().apply(make_gray(levels))
        assert out[1, 1, 0] == 127 + 127

    def test_output_is_gray(self, random_rgb):
        out = EmbossFilter().apply(random_rgb)
        np.testing.assert_array_equal(out[..., 0], out[..., 1])
        np.testing.assert_array_equal(out[..., 1], out[..., 2])

    def test_clips_low(self, make_gray):
        out = EmbossFilter([[0, 0, 0], [0, -4, 0], [0, 0, 0]]).apply(
            make_gray(np.full((2, 2), 200))
        )
        assert np.all(out == 0)

    def test_single_pixel_grid(self):
        out = EmbossFilter().apply(np.array([[[9, 200, 31]]], dtype=np.uint8))
        assert out.tolist() == [[[127, 127, 127]]]
