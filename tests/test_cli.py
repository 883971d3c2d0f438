from __future__ import annotations

import json

import numpy as np

from heatmapPoster.cli import main
from heatmapPoster.plot_utils import load_png


def test_cli_writes_png(tmp_path, capsys) -> None:
    out = tmp_path / "poster.png"
    code = main(["--width", "30", "--height", "25", "--boundary", "255", "--output", str(out)])

    assert code == 0
    assert out.exists()
    img = load_png(out)
    assert img.shape == (25, 30, 4)
    assert int(img[0, 0, 0]) == 255
    assert int(img[12, 15, 0]) == 0

    printed = capsys.readouterr().out
    assert "Making image 30 x 25" in printed
    assert "Pixel (20, 20): (0, 0, 0, 255)" in printed


def test_cli_flags_override_config_file(tmp_path) -> None:
    cfg_path = tmp_path / "cfg.json"
    out = tmp_path / "from_cfg.png"
    cfg_path.write_text(
        json.dumps({"width": 3, "height": 2, "boundary": 9, "output": str(out)}),
        encoding="utf-8",
    )

    main(["--config", str(cfg_path), "--boundary", "40"])

    img = load_png(out)
    assert img.shape == (2, 3, 4)
    np.testing.assert_array_equal(img[..., 0], np.full((2, 3), 40, dtype=np.uint8))
