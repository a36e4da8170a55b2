# -*- coding: utf-8 -*-
"""
Validation Helpers - Shared source, window size, and operation validation.

Provides reusable validation functions for pixel-grid processors. Every
processor calls these before computing any output so that a rejected call
never produces partial results.

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
from typing import Any, Sequence

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.exceptions import InvalidGridError, InvalidParameterError

#: Inclusive bounds on user-supplied rank-order window sizes.
MIN_WINDOW_SIZE = 2
MAX_WINDOW_SIZE = 101


def validate_source(source: Any) -> None:
    """Validate that *source* is a non-empty ``(rows, cols, 3)`` uint8 array.

    Parameters
    ----------
    source : Any
        Candidate RGB image.

    Raises
    ------
    InvalidGridError
        If ``source`` is ``None``, empty, not 3-channel, or not ``uint8``.
    """
    if source is None:
        raise InvalidGridError("Image is null")
    if not isinstance(source, np.ndarray):
        raise InvalidGridError(
            f"Image must be a numpy array, got {type(source).__name__}"
        )
    if source.ndim != 3 or source.shape[-1] != 3:
        raise InvalidGridError(
            f"Expected (rows, cols, 3) image, got shape {source.shape}"
        )
    if source.size == 0:
        raise InvalidGridError(f"Image is empty, shape {source.shape}")
    if source.dtype != np.uint8:
        raise InvalidGridError(
            f"Expected uint8 image, got dtype {source.dtype}"
        )


def validate_window_size(window_size: Any, name: str = 'window_size') -> None:
    """Validate a rank-order window side length.

    Odd and even sizes are both allowed. The size is not bounded by the
    image dimensions: clamp-to-edge makes oversized windows well defined.

    Parameters
    ----------
    window_size : int
        Square window side length.
    name : str
        Parameter name for error messages. Default ``'window_size'``.

    Raises
    ------
    InvalidParameterError
        If ``window_size`` is not an integer in
        ``[MIN_WINDOW_SIZE, MAX_WINDOW_SIZE]``.
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(window_size).__name__}"
        )
    if window_size < MIN_WINDOW_SIZE:
        raise InvalidParameterError(
            f"{name} must be >= {MIN_WINDOW_SIZE}, got {window_size}"
        )
    if window_size > MAX_WINDOW_SIZE:
        raise InvalidParameterError(
            f"{name} must be <= {MAX_WINDOW_SIZE}, got {window_size}"
        )


def validate_operation(operation: Any, allowed: Sequence[Any], context: str) -> None:
    """Validate that *operation* is one of *allowed*.

    Parameters
    ----------
    operation : Any
        Operation selector to check.
    allowed : Sequence
        Selectors supported in this context.
    context : str
        Short name of the reducer for error messages (e.g. ``'color'``).

    Raises
    ------
    InvalidParameterError
        If ``operation`` is not in ``allowed``.
    """
    if operation not in allowed:
        names = ', '.join(getattr(a, 'name', str(a)) for a in allowed)
        raise InvalidParameterError(
            f"Operation {operation!r} is not supported by the {context} "
            f"reducer; expected one of: {names}"
        )
