from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from heatmapPoster.config import PosterConfig, load_config, load_config_file


def test_defaults() -> None:
    cfg = load_config(None)
    assert cfg == PosterConfig()
    assert (cfg.width, cfg.height, cfg.boundary) == (300, 200, 255)
    assert cfg.output == Path("poster.png")
    assert cfg.dtype == np.dtype(np.uint64)


def test_overrides() -> None:
    cfg = load_config({"width": 8, "height": 2, "boundary": 7, "dtype": "uint8"})
    assert (cfg.width, cfg.height, cfg.boundary) == (8, 2, 7)
    assert cfg.dtype == np.dtype(np.uint8)


@pytest.mark.parametrize(
    "bad",
    [
        {"width": 0},
        {"height": -2},
        {"boundary": -1},
        {"boundary": 256, "dtype": "uint8"},
        {"dtype": "int32"},
        {"colour": "red"},
    ],
)
def test_invalid_config_rejected(bad: dict) -> None:
    with pytest.raises(ValueError):
        load_config(bad)


def test_load_config_file(tmp_path) -> None:
    path = tmp_path / "poster.json"
    path.write_text(json.dumps({"width": 10, "output": "img/a.png"}), encoding="utf-8")
    cfg = load_config_file(path)
    assert cfg.width == 10
    assert cfg.height == 200
    assert cfg.output == Path("img/a.png")


def test_load_config_file_requires_object(tmp_path) -> None:
    path = tmp_path / "poster.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config_file(path)
