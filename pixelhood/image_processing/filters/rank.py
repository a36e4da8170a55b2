# -*- coding: utf-8 -*-
"""
Rank-Order Filters - Window statistics over square and masked neighborhoods.

- ``RankOrderFilter``: Min, Max, Mean, Median and threshold-gated
  NoiseClean on each RGB channel independently.
- ``GrayRankOrderFilter``: Range and StandardDeviation of pixel intensity;
  the output is gray.
- ``MaskedMedianFilter``: median over the non-zero cells of an arbitrary
  mask (e.g. the 3x3 plus shape).

Windows may be odd or even; an even window is anchored at the upper-left
cell of its middle 2x2. Order statistics come from scipy's C rank filters
with ``mode='nearest'`` (clamp-to-edge); window sums from an integer
``correlate`` with a ones kernel, so every result is exact.

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
from typing import Annotated, Any, Dict

# Third-party
import numpy as np
from scipy.ndimage import correlate, maximum_filter, minimum_filter, rank_filter

# pixelhood internal
from pixelhood.exceptions import InvalidParameterError
from pixelhood.grid import gray_to_rgb, intensity
from pixelhood.image_processing._validation import (
    MAX_WINDOW_SIZE,
    MIN_WINDOW_SIZE,
    validate_operation,
    validate_source,
    validate_window_size,
)
from pixelhood.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from pixelhood.image_processing.params import Desc, Options, Range
from pixelhood.image_processing.versioning import processor_tags, processor_version
from pixelhood.image_processing.filters.border import BORDER_MODE, window_origin
from pixelhood.image_processing.filters.kernel import Kernel
from pixelhood.vocabulary import (
    COLOR_OPERATIONS,
    GRAY_OPERATIONS,
    ProcessorCategory,
    RankOperation,
)

logger = logging.getLogger(__name__)


def _window_kwargs(window_size: int) -> Dict[str, Any]:
    """scipy.ndimage keyword arguments for a square clamp-to-edge window."""
    o = window_origin(window_size)
    return {'size': window_size, 'mode': BORDER_MODE, 'origin': (o, o)}


def window_sum(plane: np.ndarray, window_size: int) -> np.ndarray:
    """Exact int64 sum of each pixel's ``window_size`` square neighborhood."""
    o = window_origin(window_size)
    ones = np.ones((window_size, window_size), dtype=np.int64)
    return correlate(plane.astype(np.int64), ones, mode=BORDER_MODE,
                     origin=(o, o))


def window_median(plane: np.ndarray, count: int, **filter_kwargs: Any) -> np.ndarray:
    """Median of *count* window values; even counts floor-average the middle pair.

    Parameters
    ----------
    plane : np.ndarray
        2D int64 values.
    count : int
        Number of values in each window.
    **filter_kwargs
        Window definition forwarded to ``scipy.ndimage.rank_filter``
        (``size`` or ``footprint``, plus ``mode`` and ``origin``).

    Returns
    -------
    np.ndarray
        int64 medians.
    """
    upper = rank_filter(plane, count // 2, **filter_kwargs).astype(np.int64)
    if count % 2:
        return upper
    lower = rank_filter(plane, count // 2 - 1, **filter_kwargs).astype(np.int64)
    return (upper + lower) // 2


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.RANK_ORDER,
    description='Per-channel window min/max/mean/median/noise-clean',
)
class RankOrderFilter(ChannelwiseTransformMixin, ImageTransform):
    """Rank-order statistic of each RGB channel over a square window.

    Parameters
    ----------
    window_size : int
        Window side length, odd or even, in ``[2, 101]``. Default 3.
    operation : RankOperation
        One of ``MIN``, ``MAX``, ``MEAN``, ``MEDIAN``, ``NOISE_CLEAN``.
        Default ``MEDIAN``.
    threshold : int
        NoiseClean gate in ``[0, 255]``: a channel is replaced by its window
        mean only where ``|mean - value| > threshold``. Default 0.

    Raises
    ------
    InvalidParameterError
        If a parameter is out of range or the operation is intensity-only.

    Examples
    --------
    >>> from pixelhood.image_processing.filters import RankOrderFilter
    >>> from pixelhood.vocabulary import RankOperation
    >>> f = RankOrderFilter(window_size=4, operation=RankOperation.MEDIAN)
    >>> cleaned = f.apply(rgb)
    """

    window_size: Annotated[int, Range(min=MIN_WINDOW_SIZE, max=MAX_WINDOW_SIZE),
                           Desc('Square window side length')] = 3
    operation: Annotated[RankOperation, Options(*COLOR_OPERATIONS),
                         Desc('Per-channel window statistic')] = RankOperation.MEDIAN
    threshold: Annotated[int, Range(min=0, max=255),
                         Desc('NoiseClean replacement gate')] = 0

    def __init__(
        self,
        window_size: int = 3,
        operation: RankOperation = RankOperation.MEDIAN,
        threshold: int = 0,
    ) -> None:
        validate_window_size(window_size)
        validate_operation(operation, COLOR_OPERATIONS, 'color')
        self.window_size = window_size
        self.operation = operation
        self.threshold = threshold
        self._resolve_params({})

    def _apply_2d(self, plane: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Reduce one channel plane.

        Parameters
        ----------
        plane : np.ndarray
            2D int64 channel values, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Reduced plane, int64, values in ``[0, 255]``.
        """
        params = self._resolve_params(kwargs)
        n = params['window_size']
        op = params['operation']
        count = n * n
        window = _window_kwargs(n)
        logger.debug("Rank-order %s over %dx%d window", op.name, n, n)

        if op is RankOperation.MIN:
            return minimum_filter(plane, **window)
        if op is RankOperation.MAX:
            return maximum_filter(plane, **window)
        if op is RankOperation.MEDIAN:
            return window_median(plane, count, **window)

        mean = window_sum(plane, n) // count
        if op is RankOperation.MEAN:
            return mean
        # NOISE_CLEAN
        return np.where(np.abs(mean - plane) > params['threshold'], mean, plane)


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.EDGES,
    description='Window range or standard deviation of intensity',
)
class GrayRankOrderFilter(ImageTransform):
    """Rank-order statistic of pixel intensity over a square window.

    ``RANGE`` is ``max - min``. ``STANDARD_DEVIATION`` uses the integer
    sample form: ``avg = sum // N``, ``ss = sum((v - avg) ** 2) // (N - 1)``,
    output ``min(floor(sqrt(ss)), 255)``. The output is gray.

    Parameters
    ----------
    window_size : int
        Window side length, odd or even, in ``[2, 101]``. Default 3.
    operation : RankOperation
        ``RANGE`` or ``STANDARD_DEVIATION``. Default ``RANGE``.
    """

    window_size: Annotated[int, Range(min=MIN_WINDOW_SIZE, max=MAX_WINDOW_SIZE),
                           Desc('Square window side length')] = 3
    operation: Annotated[RankOperation, Options(*GRAY_OPERATIONS),
                         Desc('Intensity window statistic')] = RankOperation.RANGE

    def __init__(
        self,
        window_size: int = 3,
        operation: RankOperation = RankOperation.RANGE,
    ) -> None:
        validate_window_size(window_size)
        validate_operation(operation, GRAY_OPERATIONS, 'intensity')
        self.window_size = window_size
        self.operation = operation
        self._resolve_params({})

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Filter a ``(rows, cols, 3)`` ``uint8`` image into a gray image."""
        validate_source(source)
        params = self._resolve_params(kwargs)
        n = params['window_size']
        window = _window_kwargs(n)
        values = intensity(source)

        if params['operation'] is RankOperation.RANGE:
            out = maximum_filter(values, **window) - minimum_filter(values, **window)
            return gray_to_rgb(out)

        count = n * n
        s1 = window_sum(values, n)
        s2 = window_sum(values * values, n)
        avg = s1 // count
        # sum((v - avg)^2) expanded over the window
        ss = s2 - 2 * avg * s1 + count * avg * avg
        ss //= count - 1
        out = np.minimum(np.floor(np.sqrt(ss)), 255)
        return gray_to_rgb(out)


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.RANK_ORDER,
    description='Per-channel median over a mask footprint',
)
class MaskedMedianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Median of each RGB channel over the non-zero cells of a mask.

    Parameters
    ----------
    mask : Kernel or array-like
        2D integer mask; cells with non-zero weight are gathered. The mask
        centre follows the kernel centre rule.

    Raises
    ------
    InvalidParameterError
        If the mask has no non-zero cell.
    """

    def __init__(self, mask: Any) -> None:
        self.mask = Kernel.coerce(mask)
        self.count = int(self.mask.footprint.sum())
        if self.count == 0:
            raise InvalidParameterError("Median mask has no non-zero cells")

    def _apply_2d(self, plane: np.ndarray, **kwargs: Any) -> np.ndarray:
        return window_median(
            plane,
            self.count,
            footprint=self.mask.footprint,
            mode=BORDER_MODE,
            origin=self.mask.origin,
        )
