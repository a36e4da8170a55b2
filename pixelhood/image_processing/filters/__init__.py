# -*- coding: utf-8 -*-
"""
Neighborhood Filters - Windowed filters with clamp-to-edge borders.

Every filter reads a ``(rows, cols, 3)`` ``uint8`` RGB array and returns a
new one; out-of-range neighbors resolve to the nearest edge pixel.

Convolution
    ``ConvolutionFilter`` - normalised weighted sum per channel
    ``EmbossFilter`` - intensity response recentred on mid-gray

Rank Order
    ``RankOrderFilter`` - per-channel min/max/mean/median/noise-clean
    ``GrayRankOrderFilter`` - intensity range and standard deviation
    ``MaskedMedianFilter`` - per-channel median over a mask footprint

Directional Edges
    ``SobelOperator`` - gradient magnitude or direction
    ``KirschOperator`` - compass magnitude or direction

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

from pixelhood.image_processing.filters.kernel import Kernel
from pixelhood.image_processing.filters.convolution import ConvolutionFilter, EmbossFilter
from pixelhood.image_processing.filters.rank import (
    GrayRankOrderFilter,
    MaskedMedianFilter,
    RankOrderFilter,
)
from pixelhood.image_processing.filters.edges import KirschOperator, SobelOperator

__all__ = [
    'Kernel',
    'ConvolutionFilter',
    'EmbossFilter',
    'RankOrderFilter',
    'GrayRankOrderFilter',
    'MaskedMedianFilter',
    'SobelOperator',
    'KirschOperator',
]
