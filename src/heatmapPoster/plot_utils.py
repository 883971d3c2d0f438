from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import imageio.v2 as imageio
import matplotlib.pyplot as plt
import numpy as np

from .render import Raster

logger = logging.getLogger(__name__)


def save_png(raster: Raster, path: str | Path) -> Path:
    """Write a raster to ``path`` as an RGBA PNG."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    imageio.imwrite(str(path), raster.pixels)
    logger.info("Saved %d x %d PNG to %s", raster.width, raster.height, path)
    return path


def load_png(path: str | Path) -> np.ndarray:
    """Read a PNG back as a ``(height, width, channels)`` uint8 array."""
    return np.asarray(imageio.imread(str(path)))


def plot_raster(
    raster: Raster,
    title: str = "",
    *,
    ax: Optional[plt.Axes] = None,
    show: bool = True,
) -> plt.Axes:
    """Show the gray channel of a raster with matplotlib."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8 * raster.height / max(1, raster.width)))
    ax.imshow(
        raster.pixels[..., 0],
        cmap="gray",
        vmin=0,
        vmax=255,
        interpolation="nearest",
    )
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title or f"average brightness {raster.average_brightness:.1f}")
    if show:
        plt.show()
    return ax
