# -*- coding: utf-8 -*-
"""
Image Processing Module - Neighborhood filters, point processes, and noise tools.

Provides the processor classes behind every engine operation. All processors
inherit from ``ImageProcessor``, which provides version checking and
tunable parameter validation, and implement ``apply(source, **kwargs)`` on a
``(rows, cols, 3)`` ``uint8`` RGB array.

Sub-modules
-----------
filters/
    Windowed filters -- convolution, emboss, rank order (color, intensity,
    masked median), and the Sobel and Kirsch edge operators.
point.py
    Per-pixel transforms -- grayscale, binary threshold, histogram
    equalization, contrast stretch, gamma correction.
noise.py
    Gaussian and impulse noise generators.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range``, ``Options``, ``Desc`` constraint markers for tunable
    parameters via ``Annotated`` type hints, and ``FilterParameters``.

Usage
-----
    >>> from pixelhood.image_processing import RankOrderFilter
    >>> from pixelhood.vocabulary import RankOperation
    >>> median = RankOrderFilter(window_size=3, operation=RankOperation.MEDIAN)
    >>> out = median.apply(rgb)

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

from pixelhood.image_processing.base import (
    ChannelwiseTransformMixin,
    ImageProcessor,
    ImageTransform,
)
from pixelhood.image_processing.versioning import processor_tags, processor_version
from pixelhood.image_processing.params import (
    Desc,
    FilterParameters,
    Options,
    ParamSpec,
    Range,
)
from pixelhood.image_processing.filters import (
    ConvolutionFilter,
    EmbossFilter,
    GrayRankOrderFilter,
    Kernel,
    KirschOperator,
    MaskedMedianFilter,
    RankOrderFilter,
    SobelOperator,
)
from pixelhood.image_processing.point import (
    BinaryThreshold,
    ContrastStretch,
    GammaCorrection,
    Grayscale,
    HistogramEqualization,
)
from pixelhood.image_processing.noise import GaussianNoise, ImpulseNoise

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ChannelwiseTransformMixin',
    'processor_version',
    'processor_tags',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
    'FilterParameters',
    'Kernel',
    'ConvolutionFilter',
    'EmbossFilter',
    'RankOrderFilter',
    'GrayRankOrderFilter',
    'MaskedMedianFilter',
    'SobelOperator',
    'KirschOperator',
    'Grayscale',
    'BinaryThreshold',
    'HistogramEqualization',
    'ContrastStretch',
    'GammaCorrection',
    'GaussianNoise',
    'ImpulseNoise',
]
