# -*- coding: utf-8 -*-
"""
Filter Engine - In-place filter operations on a ``PixelGrid``.

Each function takes a grid plus filter-specific parameters, runs the
matching processor against the grid's pixels, and copies the result back
into the grid. Every function returns ``True`` on success. On a null grid
or invalid parameters it logs a warning and returns ``False``, and the grid
is left exactly as it was: processors validate everything before computing
and never write their source array, and the grid is only overwritten once
the full result exists.

Usage
-----
    >>> import numpy as np
    >>> from pixelhood import PixelGrid, engine
    >>> from pixelhood.vocabulary import RankOperation
    >>> grid = PixelGrid(np.random.randint(0, 256, (32, 32, 3), dtype=np.uint8))
    >>> engine.rank_order_color(grid, 3, RankOperation.MEDIAN)
    True
    >>> engine.rank_order_color(grid, 1, RankOperation.MEDIAN)
    False

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
from typing import Any, Callable, Optional

# pixelhood internal
from pixelhood.exceptions import PixelhoodError
from pixelhood.grid import PixelGrid
from pixelhood.image_processing.base import ImageTransform
from pixelhood.image_processing.filters import (
    ConvolutionFilter,
    EmbossFilter,
    GrayRankOrderFilter,
    KirschOperator,
    MaskedMedianFilter,
    RankOrderFilter,
    SobelOperator,
)
from pixelhood.image_processing.filters.kernel import PLUS_3X3
from pixelhood.image_processing.noise import GaussianNoise, ImpulseNoise
from pixelhood.image_processing.point import (
    BinaryThreshold,
    ContrastStretch,
    GammaCorrection,
    Grayscale,
    HistogramEqualization,
)
from pixelhood.vocabulary import EdgeMode, RankOperation

logger = logging.getLogger(__name__)


def run(grid: PixelGrid, build: Callable[[], ImageTransform]) -> bool:
    """Build a processor, apply it to *grid*, and write the result back.

    Parameters
    ----------
    grid : PixelGrid
        Grid to filter in place.
    build : Callable[[], ImageTransform]
        Zero-argument factory for the processor. Called after the grid is
        checked so that parameter errors are reported the same way.

    Returns
    -------
    bool
        ``True`` if the grid was filtered, ``False`` if the call was
        rejected (grid untouched).
    """
    if not isinstance(grid, PixelGrid) or grid.is_null:
        logger.warning("Filter rejected: grid is null")
        return False
    if not grid.data.flags.writeable:
        logger.warning("Filter rejected: grid pixel array is read-only")
        return False
    try:
        processor = build()
        result = processor.apply(grid.data)
        grid.assign(result)
    except PixelhoodError as e:
        logger.warning("Filter rejected: %s", e)
        return False
    logger.debug("Applied %s to %r", type(processor).__name__, grid)
    return True


# ---------------------------------------------------------------------
# Neighborhood filters
# ---------------------------------------------------------------------

def convolve(grid: PixelGrid, kernel: Any, to_grayscale: bool = False) -> bool:
    """Normalised weighted-sum convolution; see ``ConvolutionFilter``."""
    return run(grid, lambda: ConvolutionFilter(kernel, to_grayscale=to_grayscale))


def emboss(grid: PixelGrid, kernel: Optional[Any] = None) -> bool:
    """Emboss on intensity; see ``EmbossFilter``."""
    return run(grid, lambda: EmbossFilter(kernel))


def rank_order_color(
    grid: PixelGrid,
    window_size: int,
    operation: RankOperation,
    threshold: int = 0,
) -> bool:
    """Per-channel rank-order filter; see ``RankOrderFilter``.

    ``threshold`` is only read by ``RankOperation.NOISE_CLEAN``.
    """
    return run(grid, lambda: RankOrderFilter(window_size, operation, threshold))


def rank_order_gray(
    grid: PixelGrid,
    window_size: int,
    operation: RankOperation,
) -> bool:
    """Intensity range or standard deviation; see ``GrayRankOrderFilter``."""
    return run(grid, lambda: GrayRankOrderFilter(window_size, operation))


def masked_median(grid: PixelGrid, mask: Any = PLUS_3X3) -> bool:
    """Per-channel median over a mask footprint (plus shape by default)."""
    return run(grid, lambda: MaskedMedianFilter(mask))


def sobel(grid: PixelGrid, mode: EdgeMode = EdgeMode.MAGNITUDE) -> bool:
    """Sobel edge magnitude or direction."""
    return run(grid, lambda: SobelOperator(mode=mode))


def kirsch(grid: PixelGrid, mode: EdgeMode = EdgeMode.MAGNITUDE) -> bool:
    """Kirsch compass edge magnitude or direction."""
    return run(grid, lambda: KirschOperator(mode=mode))


# ---------------------------------------------------------------------
# Point processes
# ---------------------------------------------------------------------

def grayscale(grid: PixelGrid) -> bool:
    return run(grid, Grayscale)


def binary_threshold(grid: PixelGrid, threshold: int) -> bool:
    return run(grid, lambda: BinaryThreshold(threshold=threshold))


def equalize(grid: PixelGrid, clip_percent: float = 100.0) -> bool:
    """Histogram equalization, optionally with bin clipping."""
    return run(grid, lambda: HistogramEqualization(clip_percent))


def contrast_stretch(
    grid: PixelGrid,
    low_percent: float = 0.0,
    high_percent: float = 0.0,
) -> bool:
    """Percentile contrast stretch; both percentages 0 is the auto stretch."""
    return run(grid, lambda: ContrastStretch(low_percent, high_percent))


def gamma_correct(grid: PixelGrid, gamma: float) -> bool:
    return run(grid, lambda: GammaCorrection(gamma))


# ---------------------------------------------------------------------
# Noise tools
# ---------------------------------------------------------------------

def gaussian_noise(grid: PixelGrid, stddev: float, seed: Optional[int] = None) -> bool:
    return run(grid, lambda: GaussianNoise(stddev, seed))


def impulse_noise(
    grid: PixelGrid,
    probability: float,
    seed: Optional[int] = None,
) -> bool:
    return run(grid, lambda: ImpulseNoise(probability, seed))
