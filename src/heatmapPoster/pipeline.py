"""One-step propagate-and-render pipeline."""

from __future__ import annotations

from .buffer import DoubleBuffer
from .grid import DEFAULT_DTYPE
from .render import Raster, render
from .rules import UpdateRule, spread_action


def make_poster(
    width: int,
    height: int,
    boundary: int = 255,
    *,
    rule: UpdateRule = spread_action,
    dtype=DEFAULT_DTYPE,
) -> Raster:
    """Run exactly one update step on a zero grid and render the result.

    With the default spread rule and a nonzero boundary, every edge cell
    picks up the boundary value and the interior stays zero.

    Args:
        width: Grid width in cells.
        height: Grid height in cells.
        boundary: Neighbor value used outside the grid edges.
        rule: Per-cell update rule.
        dtype: Unsigned integer storage type for both grids.

    Returns:
        Raster: Rendered grayscale image of size ``width x height``.
    """
    buf = DoubleBuffer(width, height, dtype=dtype)
    buf.apply(rule, boundary)
    return render(buf.current())
