# -*- coding: utf-8 -*-
"""
Noise Tools - Synthetic noise generators for exercising the cleaning filters.

- ``GaussianNoise``: zero-mean normal noise added to every channel.
- ``ImpulseNoise``: salt-and-pepper noise; a chosen fraction of pixels is
  forced to black or white.

Randomness comes from ``numpy.random.default_rng``; pass ``seed`` for
repeatable output.

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
from typing import Annotated, Any, Optional

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.exceptions import InvalidParameterError
from pixelhood.image_processing._validation import validate_source
from pixelhood.image_processing.base import ImageTransform
from pixelhood.image_processing.params import Desc, Range
from pixelhood.image_processing.versioning import processor_tags, processor_version
from pixelhood.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def _validate_seed(seed: Optional[int]) -> None:
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidParameterError(
            f"seed must be an integer or None, got {type(seed).__name__}"
        )


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                description='Additive Gaussian noise')
class GaussianNoise(ImageTransform):
    """Add ``N(0, stddev)`` noise to each channel, rounded and clipped.

    Parameters
    ----------
    stddev : float
        Noise standard deviation in gray levels, ``>= 0``.
    seed : int, optional
        Random seed.

    Examples
    --------
    >>> from pixelhood.image_processing.noise import GaussianNoise
    >>> noisy = GaussianNoise(stddev=12.0, seed=7).apply(rgb)
    """

    stddev: Annotated[float, Range(min=0.0),
                      Desc('Noise standard deviation')] = 0.0

    def __init__(self, stddev: float = 0.0, seed: Optional[int] = None) -> None:
        _validate_seed(seed)
        self.stddev = stddev
        self.seed = seed
        self._resolve_params({})

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        params = self._resolve_params(kwargs)
        rng = np.random.default_rng(self.seed)
        noise = rng.normal(0.0, params['stddev'], size=source.shape)
        out = np.rint(source.astype(np.float64) + noise)
        return np.clip(out, 0, 255).astype(np.uint8)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                description='Salt-and-pepper impulse noise')
class ImpulseNoise(ImageTransform):
    """Force randomly chosen pixels to black or white.

    Each pixel is hit independently with ``probability`` percent chance;
    a hit pixel becomes black or white with equal odds.

    Parameters
    ----------
    probability : float
        Hit chance in percent, ``[0, 100]``.
    seed : int, optional
        Random seed.
    """

    probability: Annotated[float, Range(min=0.0, max=100.0),
                           Desc('Percent of pixels replaced')] = 0.0

    def __init__(self, probability: float = 0.0, seed: Optional[int] = None) -> None:
        _validate_seed(seed)
        self.probability = probability
        self.seed = seed
        self._resolve_params({})

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        validate_source(source)
        params = self._resolve_params(kwargs)
        rng = np.random.default_rng(self.seed)
        rows, cols = source.shape[:2]
        hit = rng.random((rows, cols)) < params['probability'] / 100.0
        white = rng.random((rows, cols)) < 0.5
        logger.debug("Impulse noise hit %d of %d pixels",
                     int(hit.sum()), rows * cols)
        out = source.copy()
        out[hit & white] = 255
        out[hit & ~white] = 0
        return out
