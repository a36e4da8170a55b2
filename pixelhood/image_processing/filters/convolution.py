# -*- coding: utf-8 -*-
"""
Convolution Filters - Weighted-sum kernel filters and the emboss filter.

- ``ConvolutionFilter``: per-channel weighted sum normalised by the kernel's
  weight total, with optional conversion of the result to gray. Smoothing,
  sharpening and Laplacian edge highlighting are all this filter with a
  different kernel.
- ``EmbossFilter``: intensity-only weighted sum recentred on mid-gray.

Both use ``scipy.ndimage.correlate`` with ``mode='nearest'`` (clamp-to-edge)
on int64 planes so the arithmetic is exact integer arithmetic.

Dependencies
------------
scipy

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
from typing import Any, Optional

# Third-party
import numpy as np
from scipy.ndimage import correlate

# pixelhood internal
from pixelhood.grid import gray_to_rgb, intensity
from pixelhood.image_processing._validation import validate_source
from pixelhood.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from pixelhood.image_processing.versioning import processor_tags, processor_version
from pixelhood.image_processing.filters.border import (
    BORDER_MODE,
    clip_to_byte,
    truncate_divide,
)
from pixelhood.image_processing.filters.kernel import EMBOSS_3X3, Kernel
from pixelhood.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)

#: Mid-gray bias added to the halved emboss response.
EMBOSS_BIAS = 127


def correlate_plane(plane: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Raw clamp-to-edge weighted sum of *kernel* over an int64 *plane*.

    Output pixel ``(i, j)`` is ``sum(plane[clamp(i + k - cy), clamp(j + l - cx)]
    * w[k, l])`` with ``(cy, cx) = kernel.center``.
    """
    return correlate(
        plane.astype(np.int64),
        kernel.weights,
        mode=BORDER_MODE,
        origin=kernel.origin,
    )


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.SMOOTHING,
    description='Normalised weighted-sum convolution',
)
class ConvolutionFilter(ChannelwiseTransformMixin, ImageTransform):
    """Weighted-sum convolution of each RGB channel.

    Each channel sum is divided (truncating toward zero) by the kernel's
    weight total, floored at 1 so zero- and negative-sum kernels stay
    defined, then clipped to ``[0, 255]``.

    Parameters
    ----------
    kernel : Kernel or array-like
        2D integer weights, odd or even dimensions.
    to_grayscale : bool
        Rewrite each output pixel as the intensity of its clipped RGB.
        Default ``False``.

    Examples
    --------
    >>> from pixelhood.image_processing.filters import ConvolutionFilter
    >>> from pixelhood.image_processing.filters.kernel import SMOOTHING_3X3
    >>> smoothed = ConvolutionFilter(SMOOTHING_3X3).apply(rgb)
    """

    def __init__(self, kernel: Any, to_grayscale: bool = False) -> None:
        self.kernel = Kernel.coerce(kernel)
        self.to_grayscale = bool(to_grayscale)
        if self.kernel.weight_sum < 1:
            logger.debug(
                "Kernel weight sum %d below 1; normalising by 1",
                self.kernel.weight_sum,
            )

    def _apply_2d(self, plane: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Convolve one channel plane and normalise.

        Parameters
        ----------
        plane : np.ndarray
            2D int64 channel values, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Normalised sums (unclipped), int64.
        """
        raw = correlate_plane(plane, self.kernel)
        return truncate_divide(raw, self.kernel.divisor)

    def _finish(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        if self.to_grayscale:
            return gray_to_rgb(intensity(rgb))
        return rgb


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.EDGES,
    description='Intensity emboss recentred on mid-gray',
)
class EmbossFilter(ImageTransform):
    """Emboss: single-kernel convolution of pixel intensity.

    The raw response is halved (truncating toward zero), biased by 127 and
    clipped: ``clip(127 + sum / 2)``. The output is gray.

    Parameters
    ----------
    kernel : Kernel or array-like, optional
        Emboss weights. Default is the diagonal 3x3 ``EMBOSS_3X3`` mask.
    """

    def __init__(self, kernel: Optional[Any] = None) -> None:
        self.kernel = EMBOSS_3X3 if kernel is None else Kernel.coerce(kernel)

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Emboss a ``(rows, cols, 3)`` ``uint8`` image into a gray image."""
        validate_source(source)
        raw = correlate_plane(intensity(source), self.kernel)
        return gray_to_rgb(clip_to_byte(EMBOSS_BIAS + truncate_divide(raw, 2)))
