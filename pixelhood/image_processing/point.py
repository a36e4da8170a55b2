# -*- coding: utf-8 -*-
"""
Point Processes - Per-pixel intensity and tone transforms.

Each output pixel depends only on the same input pixel (and, for the
histogram-driven transforms, on global image statistics). No neighborhood
is read.

- ``Grayscale``: every pixel becomes its intensity.
- ``BinaryThreshold``: intensity below the threshold becomes black,
  everything else white.
- ``HistogramEqualization``: intensity remapped through the cumulative
  intensity histogram, optionally with clipped bins. Chroma is kept.
- ``ContrastStretch``: linear stretch of ``[lo, hi]`` onto ``[0, 255]``
  where ``lo``/``hi`` skip a percentage of the darkest/brightest pixels.
- ``GammaCorrection``: power-law tone curve per channel.

Dependencies
------------
numpy

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

# Standard library
import logging
from typing import Annotated, Any, Tuple

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.exceptions import InvalidParameterError
from pixelhood.grid import gray_to_rgb, intensity, with_intensity
from pixelhood.image_processing._validation import validate_source
from pixelhood.image_processing.base import ImageTransform
from pixelhood.image_processing.params import Desc, Range
from pixelhood.image_processing.versioning import processor_tags, processor_version
from pixelhood.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def intensity_histogram(source: np.ndarray) -> np.ndarray:
    """256-bin int64 histogram of pixel intensities."""
    return np.bincount(intensity(source).ravel(), minlength=256).astype(np.int64)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Convert to gray intensity')
class Grayscale(ImageTransform):
    """Replace every pixel by its intensity."""

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        return gray_to_rgb(intensity(source))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Black/white intensity threshold')
class BinaryThreshold(ImageTransform):
    """Two-level threshold on intensity.

    Parameters
    ----------
    threshold : int
        Pixels with intensity ``< threshold`` become 0, the rest 255.
        Default 128.
    """

    threshold: Annotated[int, Range(min=0, max=255),
                         Desc('Lowest intensity mapped to white')] = 128

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        params = self._resolve_params(kwargs)
        white = intensity(source) >= params['threshold']
        return gray_to_rgb(np.where(white, 255, 0))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Histogram equalization with optional bin clipping')
class HistogramEqualization(ImageTransform):
    """Equalize the intensity histogram, keeping each pixel's chroma.

    Each histogram bin is capped at ``int(total * clip_percent / 100)``
    (at least 1) and the total recomputed. The lookup table is
    ``lut[i] = int(cumsum[i] / (total / 256))`` clipped to ``[0, 255]``;
    each pixel's intensity is then replaced by ``lut[intensity]``.

    Parameters
    ----------
    clip_percent : float
        Bin cap as a percentage of the pixel count, in ``(0, 100]``.
        ``100`` (default) disables clipping.
    """

    clip_percent: Annotated[float, Range(min=0.0, max=100.0),
                            Desc('Histogram bin cap (percent of pixels)')] = 100.0

    def __init__(self, clip_percent: float = 100.0) -> None:
        self.clip_percent = clip_percent
        self._resolve_params({})
        if clip_percent <= 0:
            raise InvalidParameterError(
                f"clip_percent must be > 0, got {clip_percent}"
            )

    def lookup_table(self, histogram: np.ndarray) -> np.ndarray:
        """Build the 256-entry equalization table for *histogram*."""
        cap = max(1, int(histogram.sum() * (self.clip_percent / 100)))
        clipped = np.minimum(histogram, cap)
        total = clipped.sum()
        lut = np.trunc(np.cumsum(clipped) / (total / 256.0))
        return np.clip(lut, 0, 255).astype(np.int64)

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        lut = self.lookup_table(intensity_histogram(source))
        return with_intensity(source, lut[intensity(source)])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Percentile contrast stretch')
class ContrastStretch(ImageTransform):
    """Linear contrast stretch between two intensity percentiles.

    ``lo`` is the lowest intensity left after ignoring ``low_percent`` of
    the darkest pixels and ``hi`` the highest left after ignoring
    ``high_percent`` of the brightest. Each channel maps through
    ``v -> clip((v - lo) * 255 // (hi - lo))``. An image whose ``hi`` does
    not exceed ``lo`` is returned unchanged.

    Parameters
    ----------
    low_percent, high_percent : float
        Percent of pixels ignored at each end, each in ``[0, 100]`` and
        together below 100. Both 0 (default) stretches the full range.
    """

    low_percent: Annotated[float, Range(min=0.0, max=100.0),
                           Desc('Percent of darkest pixels ignored')] = 0.0
    high_percent: Annotated[float, Range(min=0.0, max=100.0),
                            Desc('Percent of brightest pixels ignored')] = 0.0

    def __init__(self, low_percent: float = 0.0, high_percent: float = 0.0) -> None:
        self.low_percent = low_percent
        self.high_percent = high_percent
        self._resolve_params({})
        if low_percent + high_percent >= 100:
            raise InvalidParameterError(
                "low_percent + high_percent must be below 100"
            )

    def limits(self, histogram: np.ndarray) -> Tuple[int, int]:
        """``(lo, hi)`` intensity limits for *histogram*."""
        n_pixels = int(histogram.sum())
        skip_low = int(n_pixels * self.low_percent / 100)
        skip_high = int(n_pixels * self.high_percent / 100)
        from_dark = np.cumsum(histogram)
        from_bright = np.cumsum(histogram[::-1])[::-1]
        lo = int(np.argmax(from_dark > skip_low))
        hi = int(np.nonzero(from_bright > skip_high)[0][-1])
        return lo, hi

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        lo, hi = self.limits(intensity_histogram(source))
        logger.debug("Contrast stretch limits lo=%d hi=%d", lo, hi)
        if hi <= lo:
            return source.copy()
        values = source.astype(np.int64)
        out = (values - lo) * 255 // (hi - lo)
        return np.clip(out, 0, 255).astype(np.uint8)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.POINT,
                description='Power-law gamma correction')
class GammaCorrection(ImageTransform):
    """Per-channel gamma curve ``v -> round(255 * (v / 255) ** gamma)``.

    Halves round up.

    Parameters
    ----------
    gamma : float
        Exponent, ``> 0``. Default 1.0 (identity).
    """

    gamma: Annotated[float, Range(min=0.0),
                     Desc('Gamma exponent')] = 1.0

    def __init__(self, gamma: float = 1.0) -> None:
        self.gamma = gamma
        self._resolve_params({})
        if gamma <= 0:
            raise InvalidParameterError(f"gamma must be > 0, got {gamma}")

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        levels = np.arange(256, dtype=np.float64)
        lut = np.floor(255.0 * (levels / 255.0) ** self.gamma + 0.5)
        lut = np.clip(lut, 0, 255).astype(np.uint8)
        return lut[source]
