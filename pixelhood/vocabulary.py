# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the pixelhood filter engine.

Defines the single source of truth for controlled vocabularies: processor
categories (mirroring the menus of the host application), rank-order
operation selectors, and directional edge output modes. Using enums keeps
selector values typo-free between the engine and whatever shell drives it.

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

from enum import Enum


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Each value corresponds to a menu grouping of the host application.
    """

    SMOOTHING = "smoothing"
    EDGES = "edges"
    RANK_ORDER = "rank_order"
    NOISE = "noise"
    POINT = "point"


class RankOperation(Enum):
    """Statistic selected by a rank-order filter.

    ``MIN``, ``MAX``, ``MEAN``, ``MEDIAN`` and ``NOISE_CLEAN`` operate on
    each RGB channel independently. ``RANGE`` and ``STANDARD_DEVIATION``
    operate on pixel intensity only.
    """

    MIN = "min"
    MAX = "max"
    MEAN = "mean"
    MEDIAN = "median"
    RANGE = "range"
    STANDARD_DEVIATION = "standard_deviation"
    NOISE_CLEAN = "noise_clean"


#: Operations reduced per RGB channel.
COLOR_OPERATIONS = (
    RankOperation.MIN,
    RankOperation.MAX,
    RankOperation.MEAN,
    RankOperation.MEDIAN,
    RankOperation.NOISE_CLEAN,
)

#: Operations reduced over pixel intensity.
GRAY_OPERATIONS = (
    RankOperation.RANGE,
    RankOperation.STANDARD_DEVIATION,
)


class EdgeMode(Enum):
    """Output of a directional edge operator."""

    MAGNITUDE = "magnitude"
    DIRECTION = "direction"
