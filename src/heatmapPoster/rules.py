"""Per-cell update rules for :class:`~heatmapPoster.buffer.DoubleBuffer`."""

from __future__ import annotations

from typing import Protocol, Sequence

# Neighbor order passed to every rule.
LEFT, RIGHT, UP, DOWN = range(4)


class UpdateRule(Protocol):
    """Pure function mapping a cell and its neighbors to the next value."""

    def __call__(self, value: int, neighbors: Sequence[int]) -> int:
        """Return the new value for a cell.

        Args:
            value: Current value of the cell.
            neighbors: ``(left, right, up, down)`` with the boundary value
                substituted for neighbors outside the grid.
        """


def spread_action(value: int, neighbors: Sequence[int]) -> int:
    """Copy the first nonzero neighbor into the cell.

    Neighbors are scanned left, right, up, down and the first nonzero one
    wins; nonzero neighbors are never combined. A cell with no nonzero
    neighbor keeps its value.

    Example:
        >>> spread_action(0, (0, 7, 3, 0))
        7
        >>> spread_action(5, (0, 0, 0, 0))
        5
    """
    for v in neighbors:
        if v != 0:
            return v
    return value
