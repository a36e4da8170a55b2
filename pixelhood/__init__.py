# -*- coding: utf-8 -*-
"""
pixelhood - Neighborhood image filter engine.

Convolution, emboss, rank-order, and directional edge filters over RGB pixel
grids with clamp-to-edge borders and exact integer arithmetic, plus the
point processes and noise tools of a small image-processing workbench.

Dependencies
------------
numpy
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

__version__ = "0.1.0"

from pixelhood.exceptions import (
    PixelhoodError,
    ValidationError,
    InvalidGridError,
    InvalidParameterError,
    ProcessorError,
)
from pixelhood.vocabulary import (
    ProcessorCategory,
    RankOperation,
    EdgeMode,
)
from pixelhood.grid import Pixel, PixelGrid
from pixelhood.image_processing.params import FilterParameters
from pixelhood.image_processing.filters.kernel import Kernel
from pixelhood.engine import (
    convolve,
    emboss,
    rank_order_color,
    rank_order_gray,
    masked_median,
    sobel,
    kirsch,
)
from pixelhood.commands import COMMANDS, FilterCommand, run_command

__all__ = [
    '__version__',
    'PixelhoodError',
    'ValidationError',
    'InvalidGridError',
    'InvalidParameterError',
    'ProcessorError',
    'ProcessorCategory',
    'RankOperation',
    'EdgeMode',
    'Pixel',
    'PixelGrid',
    'FilterParameters',
    'Kernel',
    'convolve',
    'emboss',
    'rank_order_color',
    'rank_order_gray',
    'masked_median',
    'sobel',
    'kirsch',
    'COMMANDS',
    'FilterCommand',
    'run_command',
]
