"""Fixed-size 2-D intensity grids."""

from __future__ import annotations

import operator
from typing import NamedTuple, Protocol

import numpy as np

DEFAULT_DTYPE = np.uint64


class OutOfBoundsError(IndexError):
    """Raised when a grid coordinate lies outside ``[0, W) x [0, H)``."""


class Size(NamedTuple):
    width: int
    height: int


class Grid(Protocol):
    """Minimal protocol implemented by grid variants."""

    def size(self) -> Size:
        """Return the fixed ``(width, height)``."""

    def get(self, x: int, y: int) -> int:
        """Return the intensity stored at ``(x, y)``."""

    def set(self, x: int, y: int, value: int) -> None:
        """Overwrite the intensity stored at ``(x, y)``."""


def _check_dtype(dtype) -> np.dtype:
    dt = np.dtype(dtype)
    if dt.kind != "u":
        raise ValueError(f"grid dtype must be an unsigned integer type, got {dt}")
    return dt


def check_value(value: int, dtype) -> int:
    """Validate that ``value`` fits an unsigned ``dtype`` and return it as int."""
    try:
        val = operator.index(value)
    except TypeError:
        raise ValueError(f"value {value!r} is not an integer") from None
    vmax = int(np.iinfo(dtype).max)
    if val < 0 or val > vmax:
        raise ValueError(f"value {val} outside representable range [0, {vmax}]")
    return val


def check_array(values: np.ndarray, dtype) -> np.ndarray:
    """Validate that an integer array fits an unsigned ``dtype``."""
    arr = np.asarray(values)
    if arr.dtype.kind not in "ui":
        raise ValueError(f"expected an integer array, got dtype {arr.dtype}")
    vmax = int(np.iinfo(dtype).max)
    if arr.size and (int(arr.min()) < 0 or int(arr.max()) > vmax):
        raise ValueError(f"array values outside representable range [0, {vmax}]")
    return arr


class ArrayGrid:
    """Grid backed by one contiguous array, row-major (index ``x + y * width``)."""

    def __init__(self, width: int, height: int, *, dtype=DEFAULT_DTYPE):
        width = int(width)
        height = int(height)
        if width < 1 or height < 1:
            raise ValueError("grid requires width >= 1 and height >= 1")
        self._size = Size(width, height)
        self._stride = width
        self._data = np.zeros(width * height, dtype=_check_dtype(dtype))

    @classmethod
    def from_array(cls, values: np.ndarray, *, dtype=DEFAULT_DTYPE) -> "ArrayGrid":
        """Build a grid from a 2-D array of shape ``(height, width)``."""
        arr = np.asarray(values)
        if arr.ndim != 2:
            raise ValueError(f"expected a 2-D array, got shape {arr.shape}")
        check_array(arr, dtype)
        grid = cls(arr.shape[1], arr.shape[0], dtype=dtype)
        grid._data[:] = arr.reshape(-1)
        return grid

    def _index(self, x: int, y: int) -> int:
        width, height = self._size
        if not (0 <= x < width and 0 <= y < height):
            raise OutOfBoundsError(
                f"coordinate ({x}, {y}) outside grid of size {width} x {height}"
            )
        return x + y * self._stride

    def size(self) -> Size:
        return self._size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def values(self) -> np.ndarray:
        """Read-only ``(height, width)`` view of the backing storage."""
        view = self._data.reshape(self._size.height, self._size.width)
        view.flags.writeable = False
        return view

    def get(self, x: int, y: int) -> int:
        return int(self._data[self._index(x, y)])

    def set(self, x: int, y: int, value: int) -> None:
        self._data[self._index(x, y)] = check_value(value, self._data.dtype)

    def fill(self, value: int) -> None:
        self._data.fill(check_value(value, self._data.dtype))

    def copy(self) -> "ArrayGrid":
        out = ArrayGrid(self._size.width, self._size.height, dtype=self._data.dtype)
        out._data[:] = self._data
        return out

    def write_values(self, values: np.ndarray) -> None:
        """Overwrite every cell from a ``(height, width)`` array."""
        arr = np.asarray(values)
        expected = (self._size.height, self._size.width)
        if arr.shape != expected:
            raise ValueError(f"expected shape {expected}, got {arr.shape}")
        check_array(arr, self._data.dtype)
        self._data[:] = arr.reshape(-1)

    def __repr__(self) -> str:
        return f"ArrayGrid(width={self._size.width}, height={self._size.height})"


def make_zero_grid(width: int, height: int, *, dtype=DEFAULT_DTYPE) -> ArrayGrid:
    """Allocate a zero-initialized array grid."""
    return ArrayGrid(width, height, dtype=dtype)


def grid_values(grid: Grid) -> np.ndarray:
    """Return a writable ``(height, width)`` copy of any grid's contents."""
    values = getattr(grid, "values", None)
    if values is not None:
        return np.array(values, copy=True)
    width, height = grid.size()
    return np.array(
        [[grid.get(x, y) for x in range(width)] for y in range(height)],
        dtype=DEFAULT_DTYPE,
    )
