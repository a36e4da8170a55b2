# -*- coding: utf-8 -*-
"""
Pixelhood Exception Hierarchy - Domain-specific exceptions for filter operations.

Provides a small exception hierarchy that lets callers (e.g., a GUI shell
dispatching menu commands) catch pixelhood errors distinctly from Python
built-in exceptions. All pixelhood exceptions subclass both
``PixelhoodError`` and the appropriate built-in exception.

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


class PixelhoodError(Exception):
    """Base exception for all pixelhood errors."""


class ValidationError(PixelhoodError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised before any pixel is computed, so a rejected call never leaves
    a partially filtered image behind.
    """


class InvalidGridError(ValidationError):
    """Null, empty, or mis-shaped pixel grid."""


class InvalidParameterError(ValidationError):
    """Out-of-range window size, mismatched kernel, or unsupported operation.

    Also raised when an operation selector is used in the wrong context,
    e.g. a color-only rank operation handed to the intensity reducer.
    """


class ProcessorError(PixelhoodError, RuntimeError):
    """Algorithm or processing failure during apply().

    Raised when a processor encounters a non-recoverable error
    during execution (not an input validation issue).
    """
