"""Double-buffered grid with synchronous (Jacobi-style) update sweeps."""

from __future__ import annotations

import logging

import numpy as np

from .grid import DEFAULT_DTYPE, ArrayGrid, Grid, Size, check_value, grid_values
from .rules import UpdateRule

logger = logging.getLogger(__name__)


class DimensionMismatchError(ValueError):
    """Raised when the two grids of a buffer differ in size."""


def neighbor_stack(values: np.ndarray, boundary: int) -> np.ndarray:
    """Gather the four cardinal neighbors of every cell.

    Args:
        values: Grid snapshot of shape ``(height, width)``.
        boundary: Value substituted for neighbors outside the grid.

    Returns:
        np.ndarray: Array of shape ``(4, height, width)`` holding the left,
        right, up and down neighbor of each cell, in that order.
    """
    padded = np.pad(values, 1, mode="constant", constant_values=boundary)
    left = padded[1:-1, :-2]
    right = padded[1:-1, 2:]
    up = padded[:-2, 1:-1]
    down = padded[2:, 1:-1]
    return np.stack([left, right, up, down])


def _store(grid: Grid, values: np.ndarray) -> None:
    write_values = getattr(grid, "write_values", None)
    if write_values is not None:
        write_values(values)
        return
    height, width = values.shape
    for y in range(height):
        for x in range(width):
            grid.set(x, y, int(values[y, x]))


class DoubleBuffer:
    """Two equally sized grids with toggled "current" and "scratch" roles.

    The buffer holds both grids in fixed slots and a one-bit index naming
    the current slot. A grid obtained from :meth:`current` before a swap
    becomes the scratch grid afterwards and must not be read as fresh state.
    """

    def __init__(self, width: int, height: int, *, dtype=DEFAULT_DTYPE):
        self._slots: tuple[Grid, Grid] = (
            ArrayGrid(width, height, dtype=dtype),
            ArrayGrid(width, height, dtype=dtype),
        )
        self._front = 0

    @classmethod
    def from_grids(cls, current: Grid, scratch: Grid) -> "DoubleBuffer":
        """Wrap two existing grids; ``current`` becomes the readable state."""
        if current is scratch:
            raise ValueError("current and scratch must be distinct grids")
        if tuple(current.size()) != tuple(scratch.size()):
            raise DimensionMismatchError(
                f"grid sizes differ: {tuple(current.size())} vs {tuple(scratch.size())}"
            )
        current_dtype = np.dtype(getattr(current, "dtype", DEFAULT_DTYPE))
        scratch_dtype = np.dtype(getattr(scratch, "dtype", DEFAULT_DTYPE))
        if current_dtype != scratch_dtype:
            raise ValueError(f"grid dtypes differ: {current_dtype} vs {scratch_dtype}")
        buf = cls.__new__(cls)
        buf._slots = (current, scratch)
        buf._front = 0
        return buf

    def size(self) -> Size:
        return self._slots[0].size()

    def current(self) -> Grid:
        return self._slots[self._front]

    def scratch(self) -> Grid:
        return self._slots[1 - self._front]

    def swap(self) -> None:
        self._front = 1 - self._front

    def apply(self, rule: UpdateRule, boundary: int) -> int:
        """Run one synchronous update step and swap.

        Every neighbor value is read from the pre-step snapshot of the
        current grid, so cells updated earlier in the sweep never feed
        into later cells.

        Args:
            rule: Callable ``rule(value, (left, right, up, down)) -> value``.
            boundary: Neighbor value used outside the grid edges.

        Returns:
            int: Number of cells whose value changed.
        """
        src = self.current()
        dst = self.scratch()
        dtype = getattr(src, "dtype", DEFAULT_DTYPE)
        out_dtype = getattr(dst, "dtype", DEFAULT_DTYPE)
        boundary = check_value(boundary, dtype)

        values = grid_values(src)
        neighbors = neighbor_stack(values, boundary)
        height, width = values.shape

        out = np.empty_like(values)
        for y in range(height):
            for x in range(width):
                nb = tuple(int(v) for v in neighbors[:, y, x])
                out[y, x] = check_value(rule(int(values[y, x]), nb), out_dtype)

        _store(dst, out)
        self.swap()

        changed = int(np.count_nonzero(out != values))
        logger.debug(
            "apply: %d of %d cells changed (boundary=%d)",
            changed,
            width * height,
            boundary,
        )
        return changed
