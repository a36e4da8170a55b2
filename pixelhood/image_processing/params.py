# -*- coding: utf-8 -*-
"""
Tunable Parameters - Declarative parameter constraints and per-call filter configuration.

Provides constraint marker types (``Range``, ``Options``, ``Desc``) for use
inside ``typing.Annotated`` annotations on ``ImageProcessor`` subclasses, the
``ParamSpec`` introspection class and the collection/init-generation helpers
consumed by ``ImageProcessor.__init_subclass__``.

Also provides ``FilterParameters``, the bundle of values a host shell
collects from its dialogs (window size, threshold, clipping percentage,
gamma, ...) before dispatching a filter command. It is validated in full
before any pixel is touched.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from pixelhood.image_processing.params import Range, Desc

    class MyFilter(ImageTransform):
        window_size: Annotated[int, Range(min=2, max=101),
                               Desc('Window side length')] = 3

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
import inspect
import math
from typing import (
    Annotated,
    Any,
    Optional,
    Sequence,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# pixelhood internal
from pixelhood.exceptions import InvalidParameterError
from pixelhood.image_processing._validation import validate_window_size
from pixelhood.vocabulary import RankOperation

# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types."""


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value (inclusive).
    max : int or float, optional
        Maximum allowed value (inclusive).
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        return f"Range(min={self.min!r}, max={self.max!r})"


class Options(ParamMeta):
    """Discrete choice constraint.

    Parameters
    ----------
    *choices
        Allowed values.  Must supply at least one.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

_SENTINEL = object()


class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type.
    default : Any
        Default value (``None`` when the parameter is required).
    description : str
        Human-readable description.
    min_value, max_value : int, float, or None
        Inclusive bounds (from ``Range``).
    choices : tuple or None
        Allowed values (from ``Options``).
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str = '',
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None,
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        """Whether this parameter has no default."""
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Validate *value* against this spec's type and constraints.

        ``int`` is accepted where ``float`` is declared; ``bool`` is never
        accepted where a number is declared.

        Raises
        ------
        InvalidParameterError
            If *value* has the wrong type or violates a constraint.
        """
        expected = self.param_type
        if expected in (int, float) and isinstance(value, bool):
            raise InvalidParameterError(
                f"Parameter '{self.name}' must be {expected.__name__}, "
                f"got bool"
            )
        if expected is float:
            ok = isinstance(value, (int, float))
        elif expected is object:
            ok = True
        else:
            ok = isinstance(value, expected)
        if not ok:
            raise InvalidParameterError(
                f"Parameter '{self.name}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise InvalidParameterError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise InvalidParameterError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise InvalidParameterError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            text += f", default={self.default!r}"
        return text + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` type hints on *cls* into a tuple of ``ParamSpec``.

    Only fields carrying at least one ``ParamMeta`` marker are collected,
    parents first, in declaration order.

    Raises
    ------
    TypeError
        If a field declares both ``Range`` and ``Options``.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    ordered = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in ordered:
                ordered.append(name)

    specs = []
    for name in ordered:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        rng = next((m for m in metas if isinstance(m, Range)), None)
        opts = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if rng is not None and opts is not None:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        default = getattr(cls, name, _SENTINEL)
        has_default = default is not _SENTINEL
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=default if has_default else None,
            has_default=has_default,
            description=desc.text if desc else '',
            min_value=rng.min if rng else None,
            max_value=rng.max if rng else None,
            choices=opts.choices if opts else None,
        ))
    return tuple(specs)


def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` that validates and stores each param."""
    _specs = param_specs

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - {s.name for s in _specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in _specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in _specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=(inspect.Parameter.empty if spec.required
                     else spec.default),
        ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'
    return __init__


# =====================================================================
# Per-invocation filter configuration
# =====================================================================

def _check_type(name: str, value: Any, expected: type) -> None:
    """Reject *value* unless it is a finite number of *expected* type.

    Follows ``ParamSpec.validate``: ``int`` is accepted where ``float`` is
    expected and ``bool`` is never accepted.
    """
    allowed = (int, float) if expected is float else (expected,)
    if isinstance(value, bool) or not isinstance(value, allowed):
        raise InvalidParameterError(
            f"{name} must be {expected.__name__}, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")


@dataclasses.dataclass
class FilterParameters:
    """Values a host shell collects before running a filter command.

    Only the fields a given command reads matter to it; every field is
    still range-checked by :meth:`validate`.

    Attributes
    ----------
    kernel : sequence of sequences of int, optional
        Convolution weights overriding a command's built-in kernel.
    to_grayscale : bool
        Convert convolution output to gray.
    window_size : int
        Rank-order window side length. Default 3.
    operation : RankOperation, optional
        Rank-order statistic overriding a command's built-in operation.
    threshold : int
        Noise-clean gate or binary threshold, ``0..255``.
    clip_percent : float
        Histogram bin clipping percentage, ``(0, 100]``.
    low_percent, high_percent : float
        Percentage of darkest/brightest pixels ignored by contrast stretch.
    gamma : float
        Gamma exponent, ``> 0``.
    stddev : float
        Gaussian noise standard deviation, ``>= 0``.
    probability : float
        Impulse noise probability in percent, ``0..100``.
    seed : int, optional
        Random seed for the noise tools.
    """

    kernel: Optional[Sequence[Sequence[int]]] = None
    to_grayscale: bool = False
    window_size: int = 3
    operation: Optional[RankOperation] = None
    threshold: int = 0
    clip_percent: float = 100.0
    low_percent: float = 0.0
    high_percent: float = 0.0
    gamma: float = 1.0
    stddev: float = 0.0
    probability: float = 0.0
    seed: Optional[int] = None

    def validate(self) -> None:
        """Check every field.

        Raises
        ------
        InvalidParameterError
            If any field is out of range or of the wrong type.
        """
        validate_window_size(self.window_size)
        if self.operation is not None and not isinstance(
            self.operation, RankOperation
        ):
            raise InvalidParameterError(
                f"operation must be a RankOperation, got {self.operation!r}"
            )
        if not isinstance(self.to_grayscale, bool):
            raise InvalidParameterError(
                f"to_grayscale must be bool, got "
                f"{type(self.to_grayscale).__name__}"
            )
        if self.seed is not None:
            _check_type('seed', self.seed, int)
        _check_type('threshold', self.threshold, int)
        for name in ('clip_percent', 'low_percent', 'high_percent',
                     'probability', 'gamma', 'stddev'):
            _check_type(name, getattr(self, name), float)

        if not 0 <= self.threshold <= 255:
            raise InvalidParameterError(
                f"threshold must be in [0, 255], got {self.threshold}"
            )
        if not 0 < self.clip_percent <= 100:
            raise InvalidParameterError(
                f"clip_percent must be in (0, 100], got {self.clip_percent}"
            )
        for name in ('low_percent', 'high_percent', 'probability'):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise InvalidParameterError(
                    f"{name} must be in [0, 100], got {value}"
                )
        if self.low_percent + self.high_percent >= 100:
            raise InvalidParameterError(
                "low_percent + high_percent must be below 100"
            )
        if self.gamma <= 0:
            raise InvalidParameterError(
                f"gamma must be > 0, got {self.gamma}"
            )
        if self.stddev < 0:
            raise InvalidParameterError(
                f"stddev must be >= 0, got {self.stddev}"
            )
