# -*- coding: utf-8 -*-
"""
Kernel - Integer weight masks and the fixed masks used by the built-in filters.

A ``Kernel`` wraps a read-only 2D array of signed integer weights. Its
centre on each axis is ``dim // 2 - (1 - dim % 2)``: the true centre for odd
dimensions and the upper-left cell of the middle pair for even ones.

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
from typing import Any, Optional, Tuple

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.exceptions import InvalidParameterError
from pixelhood.image_processing.filters.border import kernel_center, window_origin


class Kernel:
    """Fixed-size 2D mask of signed integer weights.

    Parameters
    ----------
    weights : array-like
        2D nested sequence or array of integer weights, row-major.
    width : int, optional
        Declared column count. Checked against *weights* when given.
    height : int, optional
        Declared row count. Checked against *weights* when given.

    Raises
    ------
    InvalidParameterError
        If *weights* is not a non-empty 2D array of integers, or its shape
        disagrees with the declared width/height.

    Examples
    --------
    >>> k = Kernel([[1, 2, 1], [2, 4, 2], [1, 2, 1]])
    >>> k.center, k.weight_sum
    ((1, 1), 16)
    >>> Kernel([[1, 1], [1, 1]]).center
    (0, 0)
    """

    __slots__ = ('_weights',)

    def __init__(
        self,
        weights: Any,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> None:
        try:
            arr = np.array(weights)
        except ValueError as exc:
            raise InvalidParameterError(f"Ragged kernel rows: {exc}") from exc
        if arr.ndim != 2 or arr.size == 0:
            raise InvalidParameterError(
                f"Kernel must be a non-empty 2D array, got shape {arr.shape}"
            )
        if not np.issubdtype(arr.dtype, np.integer):
            if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
                raise InvalidParameterError(
                    f"Kernel weights must be integers, got dtype {arr.dtype}"
                )
            if not np.all(np.mod(arr, 1) == 0):
                raise InvalidParameterError(
                    "Kernel weights must be whole numbers"
                )
        if width is not None and width != arr.shape[1]:
            raise InvalidParameterError(
                f"Declared kernel width {width} does not match "
                f"{arr.shape[1]} columns"
            )
        if height is not None and height != arr.shape[0]:
            raise InvalidParameterError(
                f"Declared kernel height {height} does not match "
                f"{arr.shape[0]} rows"
            )
        self._weights = arr.astype(np.int64)
        self._weights.setflags(write=False)

    @classmethod
    def coerce(cls, value: Any) -> 'Kernel':
        """Return *value* if it is a ``Kernel``, else build one from it."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def weights(self) -> np.ndarray:
        """Read-only ``(height, width)`` int64 weights."""
        return self._weights

    @property
    def width(self) -> int:
        return self._weights.shape[1]

    @property
    def height(self) -> int:
        return self._weights.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._weights.shape

    @property
    def center(self) -> Tuple[int, int]:
        """``(row, col)`` of the cell aligned with the output pixel."""
        return kernel_center(self.height), kernel_center(self.width)

    @property
    def origin(self) -> Tuple[int, int]:
        """``scipy.ndimage`` origin placing :attr:`center` on the output pixel."""
        return window_origin(self.height), window_origin(self.width)

    @property
    def weight_sum(self) -> int:
        return int(self._weights.sum())

    @property
    def divisor(self) -> int:
        """Normalisation divisor: the weight sum, floored at 1."""
        return max(1, self.weight_sum)

    @property
    def footprint(self) -> np.ndarray:
        """Boolean mask of cells with non-zero weight."""
        return self._weights != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kernel):
            return NotImplemented
        return np.array_equal(self._weights, other._weights)

    def __hash__(self) -> int:
        return hash((self.shape, self._weights.tobytes()))

    def __repr__(self) -> str:
        return f"Kernel({self._weights.tolist()})"


# Built-in masks ---------------------------------------------------------

SMOOTHING_3X3 = Kernel([[1, 2, 1],
                        [2, 4, 2],
                        [1, 2, 1]])

SHARPENING_3X3 = Kernel([[0, -1, 0],
                         [-1, 5, -1],
                         [0, -1, 0]])

LAPLACIAN_3X3 = Kernel([[-1, -1, -1],
                        [-1, 8, -1],
                        [-1, -1, -1]])

EMBOSS_3X3 = Kernel([[1, 0, 0],
                     [0, 0, 0],
                     [0, 0, -1]])

PLUS_3X3 = Kernel([[0, 1, 0],
                   [1, 1, 1],
                   [0, 1, 0]])

SOBEL_X = Kernel([[-1, 0, 1],
                  [-2, 0, 2],
                  [-1, 0, 1]])

SOBEL_Y = Kernel([[-1, -2, -1],
                  [0, 0, 0],
                  [1, 2, 1]])

# Compass order: east first, then counter-clockwise in 45 degree steps.
KIRSCH_COMPASS = (
    Kernel([[-3, -3, 5], [-3, 0, 5], [-3, -3, 5]]),
    Kernel([[-3, 5, 5], [-3, 0, 5], [-3, -3, -3]]),
    Kernel([[5, 5, 5], [-3, 0, -3], [-3, -3, -3]]),
    Kernel([[5, 5, -3], [5, 0, -3], [-3, -3, -3]]),
    Kernel([[5, -3, -3], [5, 0, -3], [5, -3, -3]]),
    Kernel([[-3, -3, -3], [5, 0, -3], [5, 5, -3]]),
    Kernel([[-3, -3, -3], [-3, 0, -3], [5, 5, 5]]),
    Kernel([[-3, -3, -3], [-3, 0, 5], [-3, 5, 5]]),
)
