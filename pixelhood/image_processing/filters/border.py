# -*- coding: utf-8 -*-
"""
Border Policy - Clamp-to-edge neighbor addressing and fixed-point helpers.

Every windowed filter in pixelhood resolves out-of-range neighbor
coordinates to the nearest valid edge pixel (replicate padding). This module
is the single definition of that policy: ``clamp_coordinate`` for explicit
gathers, and ``BORDER_MODE`` for the ``scipy.ndimage`` filters, whose
``'nearest'`` mode is the same rule. It also hosts the integer helpers the
filters share (byte clipping and C-style truncating division).

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
from typing import Optional, Tuple, Union

# Third-party
import numpy as np

#: ``scipy.ndimage`` boundary mode equivalent to clamp-to-edge.
BORDER_MODE = 'nearest'

ArrayOrInt = Union[int, np.ndarray]


def clamp_coordinate(
    x: ArrayOrInt,
    y: ArrayOrInt,
    width: int,
    height: int,
) -> Tuple[ArrayOrInt, ArrayOrInt]:
    """Clamp a column/row coordinate pair into a ``width`` x ``height`` image.

    Parameters
    ----------
    x, y : int or np.ndarray
        Candidate column and row coordinates (may be out of range).
    width, height : int
        Image dimensions, both >= 1.

    Returns
    -------
    Tuple
        ``(clamp(x, 0, width - 1), clamp(y, 0, height - 1))``. Scalars in,
        Python ints out; arrays in, arrays out.
    """
    cx = np.clip(x, 0, width - 1)
    cy = np.clip(y, 0, height - 1)
    if np.ndim(cx) == 0 and np.ndim(cy) == 0:
        return int(cx), int(cy)
    return cx, cy


def kernel_center(dim: int) -> int:
    """Centre index along one kernel axis of length *dim*."""
    return dim // 2 - (1 - dim % 2)


def window_origin(dim: int) -> int:
    """``scipy.ndimage`` origin aligning :func:`kernel_center` with the output.

    scipy centres a length-``dim`` filter at ``dim // 2 + origin``, so even
    windows need ``origin = -1`` to match :func:`kernel_center`.
    """
    return kernel_center(dim) - dim // 2


def neighborhood_stack(
    plane: np.ndarray,
    shape: Tuple[int, int],
    footprint: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Gather every pixel's clamped neighborhood into a stack of planes.

    Parameters
    ----------
    plane : np.ndarray
        2D values, shape ``(rows, cols)``.
    shape : Tuple[int, int]
        Window ``(height, width)``; centred with :func:`kernel_center`.
    footprint : np.ndarray, optional
        Boolean ``shape`` mask; only ``True`` cells are gathered.

    Returns
    -------
    np.ndarray
        ``(cells, rows, cols)`` array. Slice ``i`` holds, for every pixel,
        the neighbor at the ``i``-th selected window cell in row-major order.
    """
    rows, cols = plane.shape
    win_h, win_w = shape
    cy, cx = kernel_center(win_h), kernel_center(win_w)
    row_idx = np.arange(rows)
    col_idx = np.arange(cols)

    slices = []
    for k in range(win_h):
        for l in range(win_w):
            if footprint is not None and not footprint[k, l]:
                continue
            xs, ys = clamp_coordinate(col_idx + (l - cx), row_idx + (k - cy),
                                      cols, rows)
            slices.append(plane[np.ix_(ys, xs)])
    return np.stack(slices)


def clip_to_byte(values: np.ndarray) -> np.ndarray:
    """Clip to ``[0, 255]`` (values above saturate at 255, below at 0)."""
    return np.clip(values, 0, 255)


def truncate_divide(values: np.ndarray, divisor: int) -> np.ndarray:
    """Integer division truncating toward zero, as C integer division does.

    Parameters
    ----------
    values : np.ndarray
        Integer dividends (any sign).
    divisor : int
        Positive divisor.

    Returns
    -------
    np.ndarray
        int64 quotients.
    """
    values = np.asarray(values, dtype=np.int64)
    return np.sign(values) * (np.abs(values) // divisor)
