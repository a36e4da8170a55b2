# -*- coding: utf-8 -*-
"""
Filter Commands - Menu-identifier table for a host application shell.

``COMMANDS`` maps each menu path (``'<Menu>/<Item>'``) to a
``FilterCommand`` holding the processor class and the engine call it
runs. Each command reads its category, description and tunable
parameters from the processor's metadata, so a shell can group menus
and build dialogs without its own tables. A shell collects a
``FilterParameters`` from its dialogs and calls ``run_command``; the
parameters are validated in full before the grid is touched.

Usage
-----
    >>> from pixelhood import PixelGrid
    >>> from pixelhood.commands import run_command
    >>> from pixelhood.image_processing.params import FilterParameters
    >>> run_command('Rank Order Filters/Median Filter', grid,
    ...             FilterParameters(window_size=5))
    True

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
import dataclasses
import logging
from typing import Callable, Dict, List, Optional, Tuple, Type

# pixelhood internal
from pixelhood import engine
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
from pixelhood.image_processing.filters.kernel import (
    EMBOSS_3X3,
    LAPLACIAN_3X3,
    PLUS_3X3,
    SHARPENING_3X3,
    SMOOTHING_3X3,
)
from pixelhood.image_processing.noise import GaussianNoise, ImpulseNoise
from pixelhood.image_processing.params import FilterParameters, ParamSpec
from pixelhood.image_processing.point import (
    BinaryThreshold,
    ContrastStretch,
    GammaCorrection,
    Grayscale,
    HistogramEqualization,
)
from pixelhood.vocabulary import EdgeMode, ProcessorCategory, RankOperation

logger = logging.getLogger(__name__)

Handler = Callable[[PixelGrid, FilterParameters], bool]


@dataclasses.dataclass(frozen=True)
class FilterCommand:
    """One menu entry.

    The command's category, description and dialog parameters come from
    the metadata stamped on its processor class by ``@processor_tags``
    and the ``Annotated`` parameter markers.

    Attributes
    ----------
    name : str
        Menu path, ``'<Menu>/<Item>'``.
    processor : type
        ``ImageTransform`` subclass the command runs.
    handler : Callable[[PixelGrid, FilterParameters], bool]
        Engine call taking the grid and validated parameters.
    """

    name: str
    processor: Type[ImageTransform]
    handler: Handler

    @property
    def menu(self) -> str:
        return self.name.split('/', 1)[0]

    @property
    def label(self) -> str:
        return self.name.split('/', 1)[1]

    @property
    def category(self) -> ProcessorCategory:
        """Processor grouping from the processor's tags."""
        return self.processor.__processor_tags__['category']

    @property
    def description(self) -> str:
        return self.processor.__processor_tags__['description']

    @property
    def parameters(self) -> Tuple[ParamSpec, ...]:
        """Tunable parameters a shell prompts for (name, bounds, description)."""
        return self.processor.__param_specs__


def _convolution(default_kernel, to_grayscale: bool = False) -> Handler:
    def handler(grid: PixelGrid, p: FilterParameters) -> bool:
        kernel = default_kernel if p.kernel is None else p.kernel
        return engine.convolve(grid, kernel, to_grayscale or p.to_grayscale)
    return handler


def _rank_color(default_op: RankOperation) -> Handler:
    def handler(grid: PixelGrid, p: FilterParameters) -> bool:
        op = p.operation or default_op
        return engine.rank_order_color(grid, p.window_size, op, p.threshold)
    return handler


def _rank_gray(default_op: RankOperation) -> Handler:
    def handler(grid: PixelGrid, p: FilterParameters) -> bool:
        return engine.rank_order_gray(grid, p.window_size, p.operation or default_op)
    return handler


def _emboss(grid: PixelGrid, p: FilterParameters) -> bool:
    return engine.emboss(grid, EMBOSS_3X3 if p.kernel is None else p.kernel)


def _plus_median(grid: PixelGrid, p: FilterParameters) -> bool:
    return engine.masked_median(grid, PLUS_3X3 if p.kernel is None else p.kernel)


def _command_table() -> Dict[str, FilterCommand]:
    entries = [
        ('Smoothing/3x3 Smoothing Filter', ConvolutionFilter,
         _convolution(SMOOTHING_3X3)),

        ('Edge Detection/3x3 Sharpening Filter', ConvolutionFilter,
         _convolution(SHARPENING_3X3)),
        ('Edge Detection/Laplacian Edges', ConvolutionFilter,
         _convolution(LAPLACIAN_3X3, to_grayscale=True)),
        ('Edge Detection/Emboss', EmbossFilter, _emboss),
        ('Edge Detection/Sobel Edge Magnitudes', SobelOperator,
         lambda g, p: engine.sobel(g, EdgeMode.MAGNITUDE)),
        ('Edge Detection/Sobel Edge Directions', SobelOperator,
         lambda g, p: engine.sobel(g, EdgeMode.DIRECTION)),
        ('Edge Detection/Kirsch Edge Magnitudes', KirschOperator,
         lambda g, p: engine.kirsch(g, EdgeMode.MAGNITUDE)),
        ('Edge Detection/Kirsch Edge Directions', KirschOperator,
         lambda g, p: engine.kirsch(g, EdgeMode.DIRECTION)),
        ('Edge Detection/Standard Deviation', GrayRankOrderFilter,
         _rank_gray(RankOperation.STANDARD_DEVIATION)),
        ('Edge Detection/Range Filter', GrayRankOrderFilter,
         _rank_gray(RankOperation.RANGE)),

        ('Rank Order Filters/Median Filter', RankOrderFilter,
         _rank_color(RankOperation.MEDIAN)),
        ('Rank Order Filters/Minimum Filter', RankOrderFilter,
         _rank_color(RankOperation.MIN)),
        ('Rank Order Filters/Maximum Filter', RankOrderFilter,
         _rank_color(RankOperation.MAX)),
        ('Rank Order Filters/Mean Filter', RankOrderFilter,
         _rank_color(RankOperation.MEAN)),
        ('Rank Order Filters/Plus-Shaped Median Filter', MaskedMedianFilter,
         _plus_median),

        ('Noise Tools/Noise Clean Filter', RankOrderFilter,
         _rank_color(RankOperation.NOISE_CLEAN)),
        ('Noise Tools/Add Gaussian Noise', GaussianNoise,
         lambda g, p: engine.gaussian_noise(g, p.stddev, p.seed)),
        ('Noise Tools/Add Impulse Noise', ImpulseNoise,
         lambda g, p: engine.impulse_noise(g, p.probability, p.seed)),

        ('Point Processes/Convert to Grayscale', Grayscale,
         lambda g, p: engine.grayscale(g)),
        ('Point Processes/Binary Threshold', BinaryThreshold,
         lambda g, p: engine.binary_threshold(g, p.threshold)),
        ('Point Processes/Histogram Equalization', HistogramEqualization,
         lambda g, p: engine.equalize(g)),
        ('Point Processes/Histogram Equalization with Clipping', HistogramEqualization,
         lambda g, p: engine.equalize(g, p.clip_percent)),
        ('Point Processes/Auto Contrast Stretch', ContrastStretch,
         lambda g, p: engine.contrast_stretch(g)),
        ('Point Processes/Modified Contrast Stretch', ContrastStretch,
         lambda g, p: engine.contrast_stretch(g, p.low_percent, p.high_percent)),
        ('Point Processes/Gamma Correction', GammaCorrection,
         lambda g, p: engine.gamma_correct(g, p.gamma)),
    ]
    return {name: FilterCommand(name, cls, fn) for name, cls, fn in entries}


#: Menu path -> command.
COMMANDS: Dict[str, FilterCommand] = _command_table()


def menus() -> List[str]:
    """Menu names in first-appearance order."""
    return list(dict.fromkeys(c.menu for c in COMMANDS.values()))


def run_command(
    name: str,
    grid: PixelGrid,
    parameters: Optional[FilterParameters] = None,
) -> bool:
    """Run the command registered under *name* on *grid*.

    Parameters
    ----------
    name : str
        Menu path, e.g. ``'Smoothing/3x3 Smoothing Filter'``.
    grid : PixelGrid
        Grid filtered in place.
    parameters : FilterParameters, optional
        Dialog values. Defaults to ``FilterParameters()``.

    Returns
    -------
    bool
        ``True`` on success; ``False`` if the parameters or grid were
        rejected (grid untouched).

    Raises
    ------
    KeyError
        If no command is registered under *name*.
    """
    command = COMMANDS[name]
    params = FilterParameters() if parameters is None else parameters
    try:
        params.validate()
    except PixelhoodError as e:
        logger.warning("Command %r rejected: %s", name, e)
        return False
    logger.debug("Running command %r: %s", name, command.description)
    return command.handler(grid, params)
