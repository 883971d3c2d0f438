"""Grayscale rendering of grids."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .grid import Grid, grid_values

logger = logging.getLogger(__name__)

OPAQUE = 255


@dataclass(frozen=True)
class Raster:
    """Rendered RGBA image.

    Attributes:
        pixels: ``(height, width, 4)`` uint8 array, gray in R, G and B.
        average_brightness: Mean of the 8-bit gray values.
    """

    pixels: np.ndarray
    average_brightness: float

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def at(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)


def render(grid: Grid) -> Raster:
    """Render a grid as an opaque grayscale raster.

    Each intensity keeps only its low 8 bits, so values above 255 alias
    (300 renders as 44). The grid is not modified.
    """
    width, height = grid.size()
    logger.info("Making image %d x %d", width, height)

    gray = (grid_values(grid) & 0xFF).astype(np.uint8)
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., :3] = gray[..., None]
    pixels[..., 3] = OPAQUE

    average = float(gray.mean(dtype=np.float64))
    logger.info("Average brightness %.2f", average)
    return Raster(pixels=pixels, average_brightness=average)
