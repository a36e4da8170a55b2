# -*- coding: utf-8 -*-
"""
Pixel Grid - RGB pixel grid data model shared by every filter.

A ``PixelGrid`` owns a ``(rows, cols, 3)`` ``uint8`` numpy array in
row-major order. Its width and height are fixed once created. A grid built
without data is *null*; every filter rejects a null grid. ``Pixel`` is a
live view onto one cell of a grid, exposing red/green/blue/gray/intensity
accessors and in-place setters.

Intensity is the rounded 0.30/0.59/0.11 luminance of the RGB triple,
computed in integer arithmetic so that results are exact and repeatable.

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
from typing import Optional, Tuple

# Third-party
import numpy as np

# pixelhood internal
from pixelhood.exceptions import InvalidGridError

#: Integer luminance weights (percent) for red, green, blue.
INTENSITY_WEIGHTS = (30, 59, 11)


def intensity(rgb: np.ndarray) -> np.ndarray:
    """Compute per-pixel intensity of an RGB array.

    Parameters
    ----------
    rgb : np.ndarray
        Array whose last axis holds red, green, blue.

    Returns
    -------
    np.ndarray
        Integer intensities in ``[0, 255]``, dtype int64, shape ``rgb.shape[:-1]``.
    """
    rgb = np.asarray(rgb, dtype=np.int64)
    wr, wg, wb = INTENSITY_WEIGHTS
    return (wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2] + 50) // 100


def gray_to_rgb(gray: np.ndarray) -> np.ndarray:
    """Expand a 2D gray plane to an RGB array with ``R = G = B``."""
    gray = np.clip(np.asarray(gray), 0, 255).astype(np.uint8)
    return np.repeat(gray[..., np.newaxis], 3, axis=-1)


def with_intensity(rgb: np.ndarray, new_intensity: np.ndarray) -> np.ndarray:
    """Replace the intensity of RGB pixels while keeping their chroma.

    Each channel is scaled by ``new / old``. Pixels whose old intensity is
    zero carry no chroma and become gray at the new intensity.

    Parameters
    ----------
    rgb : np.ndarray
        ``(..., 3)`` RGB array.
    new_intensity : np.ndarray
        Target intensities, shape ``rgb.shape[:-1]``.

    Returns
    -------
    np.ndarray
        ``uint8`` RGB array, same shape as *rgb*.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    new = np.asarray(new_intensity, dtype=np.float64)
    old = intensity(rgb.astype(np.int64)).astype(np.float64)
    scale = np.divide(new, old, out=np.zeros_like(new), where=old > 0)
    out = np.where(
        (old == 0)[..., np.newaxis],
        new[..., np.newaxis],
        rgb * scale[..., np.newaxis],
    )
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


class Pixel:
    """Live view onto one cell of a :class:`PixelGrid`.

    Reading a property reads the grid; setting one writes the grid.

    Parameters
    ----------
    grid : PixelGrid
        Owning grid.
    row, col : int
        Cell address.
    """

    __slots__ = ('_grid', 'row', 'col')

    def __init__(self, grid: 'PixelGrid', row: int, col: int) -> None:
        self._grid = grid
        self.row = row
        self.col = col

    def _cell(self) -> np.ndarray:
        return self._grid.data[self.row, self.col]

    @property
    def red(self) -> int:
        return int(self._cell()[0])

    @red.setter
    def red(self, value: int) -> None:
        self._cell()[0] = _to_byte(value)

    @property
    def green(self) -> int:
        return int(self._cell()[1])

    @green.setter
    def green(self, value: int) -> None:
        self._cell()[1] = _to_byte(value)

    @property
    def blue(self) -> int:
        return int(self._cell()[2])

    @blue.setter
    def blue(self, value: int) -> None:
        self._cell()[2] = _to_byte(value)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        r, g, b = (int(v) for v in self._cell())
        return r, g, b

    @property
    def intensity(self) -> int:
        return int(intensity(self._cell()))

    #: Gray value and intensity are the same derived scalar.
    gray = intensity

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        self._cell()[:] = (_to_byte(red), _to_byte(green), _to_byte(blue))

    def set_gray(self, value: int) -> None:
        """Write ``value`` to all three channels."""
        v = _to_byte(value)
        self._cell()[:] = (v, v, v)

    def set_intensity(self, value: int) -> None:
        """Change the intensity to ``value`` keeping the pixel's chroma."""
        self._cell()[:] = with_intensity(self._cell(), np.int64(value))

    def __repr__(self) -> str:
        return (
            f"Pixel(row={self.row}, col={self.col}, "
            f"rgb={self.rgb})"
        )


def _to_byte(value: int) -> int:
    return int(min(255, max(0, int(value))))


class PixelGrid:
    """Fixed-size 2D grid of RGB pixels.

    Parameters
    ----------
    data : np.ndarray, optional
        ``(rows, cols, 3)`` RGB or ``(rows, cols)`` gray array with values
        in ``[0, 255]``. ``uint8`` RGB input is wrapped without copying;
        anything else is converted. Omit to build a null grid.

    Raises
    ------
    InvalidGridError
        If *data* has the wrong shape, values outside ``[0, 255]``, or is
        a read-only ``uint8`` RGB array (a grid is filtered in place).

    Examples
    --------
    >>> import numpy as np
    >>> from pixelhood.grid import PixelGrid
    >>> grid = PixelGrid(np.zeros((4, 6, 3), dtype=np.uint8))
    >>> grid.width, grid.height
    (6, 4)
    >>> grid[1, 2].set_gray(200)
    >>> grid[1, 2].intensity
    200
    """

    def __init__(self, data: Optional[np.ndarray] = None) -> None:
        if data is None:
            self._data: Optional[np.ndarray] = None
            return

        arr = np.asarray(data)
        if arr.ndim == 2:
            arr = arr[..., np.newaxis].repeat(3, axis=-1)
        if arr.ndim != 3 or arr.shape[-1] != 3:
            raise InvalidGridError(
                f"Expected (rows, cols, 3) or (rows, cols) array, "
                f"got shape {np.shape(data)}"
            )
        if arr.dtype != np.uint8:
            if arr.size and (arr.min() < 0 or arr.max() > 255):
                raise InvalidGridError(
                    "Pixel values must lie in [0, 255]"
                )
            arr = arr.astype(np.uint8)
        if not arr.flags.writeable:
            raise InvalidGridError(
                "Pixel array is read-only; pass a writeable array or a copy"
            )
        self._data = arr

    @classmethod
    def blank(cls, width: int, height: int, value: int = 0) -> 'PixelGrid':
        """Create a ``width`` x ``height`` grid filled with gray ``value``."""
        return cls(np.full((height, width, 3), _to_byte(value), dtype=np.uint8))

    @classmethod
    def null(cls) -> 'PixelGrid':
        """Create a null grid."""
        return cls()

    @property
    def is_null(self) -> bool:
        """True when the grid holds no pixels."""
        return self._data is None or self._data.size == 0

    @property
    def data(self) -> np.ndarray:
        """The backing ``(rows, cols, 3)`` ``uint8`` array.

        Raises
        ------
        InvalidGridError
            If the grid is null.
        """
        if self._data is None:
            raise InvalidGridError("Grid is null")
        return self._data

    @property
    def width(self) -> int:
        return 0 if self._data is None else self._data.shape[1]

    @property
    def height(self) -> int:
        return 0 if self._data is None else self._data.shape[0]

    def intensity(self) -> np.ndarray:
        """Intensity plane of the grid, shape ``(rows, cols)``, int64."""
        return intensity(self.data)

    def copy(self) -> 'PixelGrid':
        """Deep copy of the grid (a null grid copies to a null grid)."""
        if self._data is None:
            return PixelGrid()
        return PixelGrid(self._data.copy())

    def assign(self, values: np.ndarray) -> None:
        """Overwrite every pixel in place with *values*.

        Parameters
        ----------
        values : np.ndarray
            ``(rows, cols, 3)`` array matching the grid's shape.

        Raises
        ------
        InvalidGridError
            If the grid is null or *values* has a different shape,
            or its backing array has been made read-only.
        """
        data = self.data
        if values.shape != data.shape:
            raise InvalidGridError(
                f"Cannot assign shape {values.shape} into grid of "
                f"shape {data.shape}"
            )
        if not data.flags.writeable:
            raise InvalidGridError("Grid pixel array is read-only")
        data[...] = np.clip(values, 0, 255)

    def __getitem__(self, index: Tuple[int, int]) -> Pixel:
        row, col = index
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"Pixel ({row}, {col}) outside {self.height}x{self.width} grid"
            )
        return Pixel(self, row, col)

    def __repr__(self) -> str:
        if self.is_null:
            return "PixelGrid(null)"
        return f"PixelGrid(width={self.width}, height={self.height})"
