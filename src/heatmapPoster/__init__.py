from .buffer import DimensionMismatchError, DoubleBuffer, neighbor_stack
from .config import PosterConfig, load_config, load_config_file
from .grid import ArrayGrid, Grid, OutOfBoundsError, Size, make_zero_grid
from .pipeline import make_poster
from .render import Raster, render
from .rules import UpdateRule, spread_action

__all__ = [
    "ArrayGrid",
    "DimensionMismatchError",
    "DoubleBuffer",
    "Grid",
    "OutOfBoundsError",
    "PosterConfig",
    "Raster",
    "Size",
    "UpdateRule",
    "load_config",
    "load_config_file",
    "make_poster",
    "make_zero_grid",
    "neighbor_stack",
    "render",
    "spread_action",
]
