"""Configuration parsing for poster runs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import numpy as np

from .grid import DEFAULT_DTYPE

_KNOWN_KEYS = {"width", "height", "boundary", "output", "dtype"}


@dataclass(frozen=True)
class PosterConfig:
    """Parameters wiring the grid pipeline to an output file."""

    width: int = 300
    height: int = 200
    boundary: int = 255
    output: Path = Path("poster.png")
    dtype: np.dtype = np.dtype(DEFAULT_DTYPE)


def load_config(config: Mapping[str, Any] | None) -> PosterConfig:
    """Parse a config mapping into an immutable :class:`PosterConfig`."""
    cfg = dict(config or {})
    unknown = set(cfg) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    width = int(cfg.get("width", 300))
    height = int(cfg.get("height", 200))
    if width < 1 or height < 1:
        raise ValueError("config requires width >= 1 and height >= 1")

    dtype = np.dtype(cfg.get("dtype", DEFAULT_DTYPE))
    if dtype.kind != "u":
        raise ValueError("dtype must be an unsigned integer type")

    boundary = int(cfg.get("boundary", 255))
    if boundary < 0 or boundary > np.iinfo(dtype).max:
        raise ValueError(f"boundary must be in [0, {np.iinfo(dtype).max}]")

    output = Path(cfg.get("output", "poster.png"))

    return PosterConfig(
        width=width,
        height=height,
        boundary=boundary,
        output=output,
        dtype=dtype,
    )


def load_config_file(path: str | Path) -> PosterConfig:
    """Load a JSON config file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, Mapping):
        raise ValueError(f"{path}: config file must contain a JSON object")
    return load_config(raw)
