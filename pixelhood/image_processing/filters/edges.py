# -*- coding: utf-8 -*-
"""
Directional Edge Operators - Sobel and Kirsch compass edge detection.

Both operators convolve pixel intensity with a fixed set of oriented 3x3
kernels and reduce the responses to one gray value per pixel, either an
edge magnitude or a discretised edge direction.

- ``SobelOperator``: horizontal and vertical gradients ``Gx``, ``Gy``.
  Magnitude is ``floor(sqrt(Gx^2 + Gy^2))``; direction is the angle of
  ``(Gx, -Gy)`` scaled so a half turn spans 127 levels, wrapped into
  ``[0, 255]``.
- ``KirschOperator``: the eight compass kernels. Magnitude is the largest
  response; direction is ``32 * index`` of the kernel that produced it,
  the lowest index winning ties.

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
from typing import Annotated, Any

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.grid import gray_to_rgb, intensity
from pixelhood.image_processing._validation import validate_source
from pixelhood.image_processing.base import ImageTransform
from pixelhood.image_processing.params import Desc, Options
from pixelhood.image_processing.versioning import processor_tags, processor_version
from pixelhood.image_processing.filters.border import clip_to_byte, neighborhood_stack
from pixelhood.image_processing.filters.convolution import correlate_plane
from pixelhood.image_processing.filters.kernel import KIRSCH_COMPASS, SOBEL_X, SOBEL_Y
from pixelhood.vocabulary import EdgeMode, ProcessorCategory

logger = logging.getLogger(__name__)

#: Gray step between adjacent Kirsch compass directions.
KIRSCH_DIRECTION_STEP = 256 // len(KIRSCH_COMPASS)


class _EdgeOperator(ImageTransform):
    """Shared parameter handling for the directional edge operators.

    ``mode`` is keyword-only; the generated ``__init__`` validates it.
    """

    mode: Annotated[EdgeMode, Options(EdgeMode.MAGNITUDE, EdgeMode.DIRECTION),
                    Desc('Edge magnitude or direction output')] = EdgeMode.MAGNITUDE

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Detect edges in a ``(rows, cols, 3)`` ``uint8`` image.

        Parameters
        ----------
        source : np.ndarray
            RGB image. Only its intensity is used.

        Returns
        -------
        np.ndarray
            Gray ``(rows, cols, 3)`` ``uint8`` edge image.
        """
        validate_source(source)
        params = self._resolve_params(kwargs)
        mode = params['mode']
        logger.debug("%s %s", type(self).__name__, mode.name.lower())
        if mode is EdgeMode.MAGNITUDE:
            out = self._magnitude(intensity(source))
        else:
            out = self._direction(intensity(source))
        return gray_to_rgb(clip_to_byte(out))

    def _magnitude(self, values: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _direction(self, values: np.ndarray) -> np.ndarray:
        raise NotImplementedError


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.EDGES,
    description='Sobel gradient magnitude or direction',
)
class SobelOperator(_EdgeOperator):
    """Sobel edge operator on pixel intensity.

    Parameters
    ----------
    mode : EdgeMode
        ``MAGNITUDE`` (default) or ``DIRECTION``.

    Examples
    --------
    >>> from pixelhood.image_processing.filters import SobelOperator
    >>> from pixelhood.vocabulary import EdgeMode
    >>> directions = SobelOperator(mode=EdgeMode.DIRECTION).apply(rgb)
    """

    def _gradients(self, values: np.ndarray):
        return correlate_plane(values, SOBEL_X), correlate_plane(values, SOBEL_Y)

    def _magnitude(self, values: np.ndarray) -> np.ndarray:
        gx, gy = self._gradients(values)
        return np.floor(np.sqrt((gx * gx + gy * gy).astype(np.float64)))

    def _direction(self, values: np.ndarray) -> np.ndarray:
        gx, gy = self._gradients(values)
        # negate as integers so a zero Gy stays +0.0 and atan2(0, -x) is +pi
        angle = np.arctan2((-gy).astype(np.float64), gx.astype(np.float64))
        # truncation toward zero, then wrap negatives
        code = np.trunc(((angle * 255) / np.pi) / 2).astype(np.int64)
        return np.where(code < 0, code + 255, code)


@processor_version('1.0.0')
@processor_tags(
    category=ProcessorCategory.EDGES,
    description='Kirsch compass edge magnitude or direction',
)
class KirschOperator(_EdgeOperator):
    """Kirsch compass edge operator on pixel intensity.

    Kernels are compared in compass order with a strict ``>``, so the
    lowest index wins a tie. Magnitude keeps a running maximum that is
    clamped to ``[0, 255]`` each time it is replaced, and later responses
    are compared against the clamped value. The eight responses of a pixel
    sum to zero, so the true maximum is never negative and the result
    equals the final maximum clamped once.

    Parameters
    ----------
    mode : EdgeMode
        ``MAGNITUDE`` (default) or ``DIRECTION``.
    """

    def _responses(self, values: np.ndarray) -> np.ndarray:
        """``(8, rows, cols)`` raw responses of the compass kernels."""
        stack = neighborhood_stack(values, (3, 3))
        weights = np.stack([k.weights.ravel() for k in KIRSCH_COMPASS])
        return np.tensordot(weights, stack, axes=1)

    def _magnitude(self, values: np.ndarray) -> np.ndarray:
        responses = self._responses(values)
        running = np.full(values.shape, -1, dtype=np.int64)
        for response in responses:
            running = np.where(response > running, clip_to_byte(response), running)
        return running

    def _direction(self, values: np.ndarray) -> np.ndarray:
        responses = self._responses(values)
        # argmax returns the first maximum
        return np.argmax(responses, axis=0) * KIRSCH_DIRECTION_STEP
