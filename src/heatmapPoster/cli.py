"""CLI entry point for rendering a one-step spread poster."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import PosterConfig, load_config, load_config_file
from .pipeline import make_poster
from .plot_utils import plot_raster, save_png

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a one-step spread heatmap poster")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--boundary", type=int, default=None)
    parser.add_argument("--output", type=str, default=None)
    parser.add_argument("--show", action="store_true", help="preview with matplotlib")
    parser.add_argument("--verbose", action="store_true")
    return parser


def _resolve_config(args: argparse.Namespace) -> PosterConfig:
    cfg = load_config_file(args.config) if args.config else load_config(None)
    overrides = {
        key: getattr(args, key)
        for key in ("width", "height", "boundary", "output")
        if getattr(args, key) is not None
    }
    if not overrides:
        return cfg
    # Re-validate so flag values go through the same range checks.
    merged = {
        "width": cfg.width,
        "height": cfg.height,
        "boundary": cfg.boundary,
        "output": cfg.output,
        "dtype": cfg.dtype.name,
    }
    merged.update(overrides)
    return load_config(merged)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the poster pipeline from the command line."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = _resolve_config(args)
    logger.debug("resolved config: %s", cfg)

    print(f"Making image {cfg.width} x {cfg.height}")
    raster = make_poster(cfg.width, cfg.height, cfg.boundary, dtype=cfg.dtype)
    print(f"Average brightness {raster.average_brightness:.2f}")
    print(f"Bounds: (0,0)-({raster.width},{raster.height})")
    if raster.width > 20 and raster.height > 20:
        print(f"Pixel (20, 20): {raster.at(20, 20)}")

    path = save_png(raster, Path(cfg.output))
    print(f"Saved image to {path}")

    if args.show:
        plot_raster(raster)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
