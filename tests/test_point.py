# -*- coding: utf-8 -*-
"""
Point Process Tests.

Grayscale conversion, binary threshold, histogram equalization (with and
without clipping), percentile contrast stretch, and gamma correction.

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

import numpy as np
import pytest

from pixelhood.exceptions import InvalidParameterError
from pixelhood.grid import intensity
from pixelhood.image_processing.point import (
    BinaryThreshold,
    ContrastStretch,
    GammaCorrection,
    Grayscale,
    HistogramEqualization,
    intensity_histogram,
)


@pytest.fixture
def colored():
    return np.array([[[100, 150, 200], [0, 0, 0]]], dtype=np.uint8)


class TestGrayscale:

    def test_intensity_weights(self, colored):
        out = Grayscale().apply(colored)
        assert out.tolist() == [[[141, 141, 141], [0, 0, 0]]]

    def test_source_not_modified(self, colored):
        before = colored.copy()
        Grayscale().apply(colored)
        np.testing.assert_array_equal(colored, before)


class TestBinaryThreshold:
    """Intensity at or above the threshold is white."""

    def test_boundary_inclusive(self, colored):
        out = BinaryThreshold(threshold=141).apply(colored)
        assert out[0, 0].tolist() == [255, 255, 255]
        assert out[0, 1].tolist() == [0, 0, 0]

    def test_just_above(self, colored):
        out = BinaryThreshold(threshold=142).apply(colored)
        assert np.all(out == 0)

    def test_two_levels(self, random_rgb):
        out = BinaryThreshold().apply(random_rgb)
        assert set(np.unique(out)) <= {0, 255}

    def test_runtime_override(self, colored):
        out = BinaryThreshold(threshold=0).apply(colored, threshold=200)
        assert np.all(out == 0)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            BinaryThreshold(100)

    @pytest.mark.parametrize('threshold', [-1, 256, 12.5])
    def test_rejects_threshold(self, threshold):
        with pytest.raises(InvalidParameterError):
            BinaryThreshold(threshold=threshold)


class TestHistogramEqualization:
    """Cumulative-histogram remapping of intensity."""

    def test_histogram(self, make_gray):
        hist = intensity_histogram(make_gray([[0, 0, 7]]))
        assert hist.shape == (256,)
        assert hist[0] == 2 and hist[7] == 1 and hist.sum() == 3

    def test_two_level_image(self, make_gray):
        out = HistogramEqualization().apply(make_gray([[0, 0], [255, 255]]))
        np.testing.assert_array_equal(out[..., 0], [[128, 128], [255, 255]])

    def test_unclipped_table(self, make_gray):
        out = HistogramEqualization().apply(make_gray([[0, 0, 0, 255]]))
        np.testing.assert_array_equal(out[..., 0], [[192, 192, 192, 255]])

    def test_clipping_flattens_dominant_bin(self, make_gray):
        out = HistogramEqualization(25.0).apply(make_gray([[0, 0, 0, 255]]))
        np.testing.assert_array_equal(out[..., 0], [[128, 128, 128, 255]])

    def test_lookup_table_monotonic(self, random_rgb):
        eq = HistogramEqualization(10.0)
        lut = eq.lookup_table(intensity_histogram(random_rgb))
        assert lut.shape == (256,)
        assert np.all(np.diff(lut) >= 0)
        assert lut[-1] == 255

    def test_tiny_clip_keeps_total_positive(self, make_gray):
        out = HistogramEqualization(0.01).apply(make_gray([[10, 20]]))
        np.testing.assert_array_equal(out[..., 0], [[128, 255]])

    def test_keeps_chroma(self):
        src = np.array([[[100, 50, 0], [200, 200, 200]]], dtype=np.uint8)
        out = HistogramEqualization().apply(src)
        # intensity 60 -> 128: every channel scaled by 128 / 60
        assert out[0, 0].tolist() == [213, 107, 0]
        assert out[0, 1].tolist() == [255, 255, 255]

    def test_gray_output_follows_table(self, rng, make_gray):
        src = make_gray(rng.integers(0, 256, size=(7, 8)))
        eq = HistogramEqualization()
        lut = eq.lookup_table(intensity_histogram(src))
        out = eq.apply(src)
        np.testing.assert_array_equal(out[..., 0], lut[intensity(src)])

    @pytest.mark.parametrize('clip', [0.0, -5.0, 100.5])
    def test_rejects_clip_percent(self, clip):
        with pytest.raises(InvalidParameterError):
            HistogramEqualization(clip)


class TestContrastStretch:
    """Percentile limits mapped linearly onto the full range."""

    def test_full_stretch(self, make_gray):
        out = ContrastStretch().apply(make_gray([[50, 100, 150]]))
        np.testing.assert_array_equal(out[..., 0], [[0, 127, 255]])

    def test_flat_image_unchanged(self, make_gray):
        src = make_gray(np.full((3, 3), 90))
        out = ContrastStretch().apply(src)
        np.testing.assert_array_equal(out, src)
        assert out is not src

    def test_limits_skip_percentages(self):
        hist = np.zeros(256, dtype=np.int64)
        hist[0:100:10] = 1
        assert ContrastStretch(10.0, 10.0).limits(hist) == (10, 80)
        assert ContrastStretch().limits(hist) == (0, 90)

    def test_modified_stretch_saturates_tails(self, make_gray):
        levels = np.arange(0, 100, 10).reshape(1, 10)
        out = ContrastStretch(10.0, 10.0).apply(make_gray(levels))
        assert out[0, 0, 0] == 0
        assert out[0, 1, 0] == 0
        assert out[0, 8, 0] == 255
        assert out[0, 9, 0] == 255

    def test_channels_stretched_independently_of_chroma(self):
        src = np.array([[[10, 10, 10], [210, 210, 110]]], dtype=np.uint8)
        lo, hi = ContrastStretch().limits(intensity_histogram(src))
        out = ContrastStretch().apply(src)
        assert out[0, 0].tolist() == [0, 0, 0]
        assert out[0, 1, 2] == (110 - lo) * 255 // (hi - lo)

    @pytest.mark.parametrize('low,high', [(-1.0, 0.0), (0.0, 101.0), (50.0, 50.0), (70.0, 40.0)])
    def test_rejects_percentages(self, low, high):
        with pytest.raises(InvalidParameterError):
            ContrastStretch(low, high)


class TestGammaCorrection:

    def test_identity(self, random_rgb):
        np.testing.assert_array_equal(GammaCorrection().apply(random_rgb), random_rgb)

    def test_darkening(self, make_gray):
        out = GammaCorrection(2.0).apply(make_gray([[0, 128, 255]]))
        np.testing.assert_array_equal(out[..., 0], [[0, 64, 255]])

    def test_brightening(self, make_gray):
        out = GammaCorrection(0.5).apply(make_gray([[64]]))
        assert out[0, 0, 0] == 128

    def test_per_channel(self):
        src = np.array([[[0, 128, 255]]], dtype=np.uint8)
        assert GammaCorrection(2.0).apply(src).tolist() == [[[0, 64, 255]]]

    @pytest.mark.parametrize('gamma', [0.0, -1.0])
    def test_rejects_gamma(self, gamma):
        with pytest.raises(InvalidParameterError):
            GammaCorrection(gamma)
