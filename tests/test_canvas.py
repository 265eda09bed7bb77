"""Tests for the pixel buffer and its blended primitives."""

import numpy as np

from honeycomb.canvas import Canvas
from honeycomb.geometry import hexagon_points


class TestPixels:
    def test_set_get(self):
        canvas = Canvas(16, 8)
        canvas.set(3, 2, (10, 20, 30))
        assert canvas.get(3, 2) == (10, 20, 30)
        assert tuple(canvas.pixels[2, 3]) == (10, 20, 30)

    def test_out_of_bounds_ignored(self):
        canvas = Canvas(16, 8)
        canvas.set(16, 0, (255, 0, 0))
        canvas.set(-1, 0, (255, 0, 0))
        assert canvas.get(16, 0) == (0, 0, 0)
        assert not canvas.pixels.any()

    def test_clear(self):
        canvas = Canvas(4, 4)
        canvas.clear((5, 6, 7))
        assert canvas.get(3, 3) == (5, 6, 7)
        canvas.clear()
        assert not canvas.pixels.any()

    def test_resize(self):
        canvas = Canvas(4, 4)
        canvas.resize(10, 5)
        assert canvas.pixels.shape == (5, 10, 3)
        assert len(canvas.get_buffer()) == 150


class TestDrawing:
    def test_opaque_line(self):
        canvas = Canvas(10, 10)
        canvas.line(1, 4, 8, 4, (255, 255, 255))
        for x in range(1, 9):
            assert canvas.get(x, 4) == (255, 255, 255)
        assert canvas.get(0, 4) == (0, 0, 0)
        assert canvas.get(9, 4) == (0, 0, 0)

    def test_blended_line(self):
        canvas = Canvas(10, 10)
        canvas.line(0, 0, 0, 9, (200, 100, 0), alpha=0.5)
        assert canvas.get(0, 5) == (100, 50, 0)

    def test_line_clipped(self):
        canvas = Canvas(10, 10)
        canvas.line(-20, 5, 30, 5, (255, 0, 0))
        assert canvas.get(0, 5) == (255, 0, 0)
        assert canvas.get(9, 5) == (255, 0, 0)

    def test_filled_polygon(self):
        canvas = Canvas(10, 10)
        canvas.polygon([(2, 2), (8, 2), (8, 8), (2, 8)], (255, 255, 255), filled=True)
        assert canvas.get(2, 2) == (255, 255, 255)
        assert canvas.get(7, 7) == (255, 255, 255)
        assert canvas.get(8, 8) == (0, 0, 0)
        assert canvas.get(1, 5) == (0, 0, 0)
        assert int((canvas.pixels[:, :, 0] > 0).sum()) == 36

    def test_hexagon_outline(self):
        canvas = Canvas(100, 100)
        canvas.polygon(hexagon_points(50, 50, 40, 40), (255, 255, 255))
        assert canvas.get(50, 30) == (255, 255, 255)
        assert canvas.get(50, 50) == (0, 0, 0)

    def test_zero_alpha_draws_nothing(self):
        canvas = Canvas(10, 10)
        canvas.polygon([(2, 2), (8, 2), (8, 8)], (255, 255, 255), alpha=0.0, filled=True)
        assert not np.any(canvas.pixels)
