"""Tests for drawing the grid and recording GIFs."""

import random

import numpy as np
from PIL import Image

from honeycomb.__main__ import main
from honeycomb.canvas import Canvas
from honeycomb.manager import HexagonManager
from honeycomb.record import canvas_to_image, record_gif
from honeycomb.render import draw_grid

BACKGROUND = (14, 17, 28)


class TestDrawGrid:
    """Test painting visible cells onto the canvas."""

    def test_nothing_visible(self, config, quiet_settings, rng):
        manager = HexagonManager(config, quiet_settings, rng)
        canvas = Canvas(config.width, config.height)
        assert draw_grid(canvas, manager, BACKGROUND) == 0
        assert (canvas.pixels == BACKGROUND).all()

    def test_visible_cell_is_drawn(self, config, quiet_settings, rng):
        manager = HexagonManager(config, quiet_settings, rng)
        manager.cell_at(2, 2).opacity = 1.0
        canvas = Canvas(config.width, config.height)
        assert draw_grid(canvas, manager, BACKGROUND) == 1
        changed = (canvas.pixels != BACKGROUND).any(axis=2)
        assert changed.any()
        ys, xs = np.nonzero(changed)
        # Outline stays within the shrunken cell around (260, 236)
        assert xs.min() >= 260 - 46 and xs.max() <= 260 + 46
        assert ys.min() >= 236 - 50 and ys.max() <= 236 + 50

    def test_parallax_moves_cells_off_screen(self, config, quiet_settings, rng):
        manager = HexagonManager(config, quiet_settings, rng)
        manager.cell_at(2, 2).opacity = 1.0
        manager.parallax.offset = 2000
        canvas = Canvas(config.width, config.height)
        assert draw_grid(canvas, manager, BACKGROUND) == 0


class TestRecord:
    """Test headless GIF output."""

    def test_canvas_to_image(self):
        canvas = Canvas(8, 4)
        canvas.set(1, 1, (255, 0, 0))
        img = canvas_to_image(canvas, scale=2)
        assert img.size == (16, 8)

    def test_record_gif(self, tmp_path, capsys):
        out = tmp_path / "media" / "honeycomb.gif"
        frames = record_gif(out, seconds=0.5, fps=10, width=160, height=120,
                            warmup=0.5, rng=random.Random(3))
        assert frames == 5
        with Image.open(out) as img:
            assert img.format == "GIF"
            assert img.size == (160, 120)
        assert "[record] Saved" in capsys.readouterr().out

    def test_cli_record(self, tmp_path):
        out = tmp_path / "cli.gif"
        assert main(["--record", str(out), "--seconds", "0.2", "--width", "120", "--height", "90"]) == 0
        assert out.exists()

    def test_cli_bad_settings(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        assert main(["--settings", str(path)]) == 1
        assert "Failed to parse" in capsys.readouterr().out
