# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for pixel-grid processors.

Defines the ``ImageProcessor`` common base class and the ``ImageTransform``
ABC for dense RGB transforms. ``ImageProcessor`` provides version checking
at first instantiation and ``typing.Annotated``-based tunable parameter
declarations with automatic ``__init__`` generation and runtime resolution
through ``**kwargs``.

Every transform reads a ``(rows, cols, 3)`` ``uint8`` RGB array and returns
a new array. The source array is never written, so neighbor lookups always
see the pre-filter frame regardless of traversal order.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.exceptions import ProcessorError
from pixelhood.image_processing._validation import validate_source
from pixelhood.image_processing.params import ParamSpec, collect_param_specs, _make_init

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: Concrete subclasses that do not declare a processor
    version via ``@processor_version('x.y.z')`` trigger a ``UserWarning`` at
    first instantiation.

    **Tunable parameter flow**: Subclasses declare tunable parameters as
    ``typing.Annotated`` class-body fields using constraint markers from
    :mod:`pixelhood.image_processing.params` (``Range``, ``Options``,
    ``Desc``). ``__init_subclass__`` collects these into ``__param_specs__``
    and auto-generates an ``__init__`` unless the subclass defines its own.
    At runtime ``_resolve_params(kwargs)`` merges instance values with
    keyword-argument overrides and validates them.
    """

    _version_warned_classes: set = set()

    #: Built by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments. Keys that are not declared
            parameters are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        InvalidParameterError
            If a resolved value fails its spec.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs.get(spec.name, getattr(self, spec.name))
            spec.validate(value)
            resolved[spec.name] = value
        return resolved


class ImageTransform(ImageProcessor):
    """
    Abstract base class for RGB image transforms.

    Subclasses implement ``apply``, which takes a ``(rows, cols, 3)``
    ``uint8`` array and returns a new array of the same shape and dtype.
    """

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Apply the transform to a source RGB array.

        Parameters
        ----------
        source : np.ndarray
            ``(rows, cols, 3)`` ``uint8`` RGB image. Not modified.

        Returns
        -------
        np.ndarray
            Transformed ``(rows, cols, 3)`` ``uint8`` image.
        """
        ...


class ChannelwiseTransformMixin:
    """Mixin that applies a 2D transform to each RGB channel independently.

    When mixed into an ``ImageTransform`` subclass, this provides
    ``apply()``: the source is validated, each channel is handed to the
    subclass's ``_apply_2d()`` as an int64 plane, and the results are
    stacked back on the last axis and clipped to bytes. ``_finish()`` may
    post-process the stacked RGB result.

    Usage
    -----
    ::

        class MyFilter(ChannelwiseTransformMixin, ImageTransform):
            def _apply_2d(self, plane, **kwargs):
                ...
    """

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform channel by channel.

        Parameters
        ----------
        source : np.ndarray
            ``(rows, cols, 3)`` ``uint8`` RGB image.

        Returns
        -------
        np.ndarray
            ``(rows, cols, 3)`` ``uint8`` image.
        """
        validate_source(source)
        planes = source.astype(np.int64)
        out = np.stack(
            [self._apply_2d(planes[..., c], **kwargs) for c in range(3)],
            axis=-1,
        )
        if out.shape != source.shape:
            raise ProcessorError(
                f"{type(self).__name__} produced shape {out.shape} "
                f"for source shape {source.shape}"
            )
        out = np.clip(out, 0, 255).astype(np.uint8)
        return self._finish(out, **kwargs)

    def _finish(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Post-process the stacked result. Default returns it unchanged."""
        return rgb

    @abstractmethod
    def _apply_2d(self, plane: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform to a single int64 channel plane.

        Parameters
        ----------
        plane : np.ndarray
            2D channel values, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Transformed 2D plane (values clipped to bytes by the caller).
        """
        ...
