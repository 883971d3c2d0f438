from __future__ import annotations

import numpy as np

from heatmapPoster.grid import ArrayGrid, make_zero_grid
from heatmapPoster.render import render


def test_uniform_grid_renders_uniform_gray() -> None:
    grid = make_zero_grid(5, 4)
    grid.fill(128)
    raster = render(grid)

    assert raster.pixels.shape == (4, 5, 4)
    assert raster.pixels.dtype == np.uint8
    assert np.all(raster.pixels[..., :3] == 128)
    assert np.all(raster.pixels[..., 3] == 255)
    assert raster.average_brightness == 128.0


def test_values_above_255_alias_to_low_byte() -> None:
    grid = make_zero_grid(2, 1)
    grid.set(0, 0, 300)
    grid.set(1, 0, 256)
    raster = render(grid)

    assert raster.at(0, 0) == (44, 44, 44, 255)
    assert raster.at(1, 0) == (0, 0, 0, 255)
    assert raster.average_brightness == 22.0


def test_render_keeps_orientation() -> None:
    grid = ArrayGrid.from_array(np.array([[1, 2, 3], [4, 5, 6]]))
    raster = render(grid)
    assert (raster.width, raster.height) == (3, 2)
    assert raster.at(2, 0)[0] == 3
    assert raster.at(0, 1)[0] == 4


def test_render_does_not_mutate_grid() -> None:
    grid = make_zero_grid(3, 3)
    grid.set(1, 1, 300)
    before = np.array(grid.values)
    render(grid)
    np.testing.assert_array_equal(grid.values, before)
