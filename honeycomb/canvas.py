"""RGB pixel buffer with alpha-blended drawing primitives."""

import math

import numpy as np

# Type alias for RGB tuples
Color = tuple[int, int, int]


class Canvas:
    """Full-window RGB pixel buffer.

    Pixels are stored as a flat bytearray in RGB order: [R0,G0,B0, R1,G1,B1, ...]
    Row-major: pixel (x, y) is at index (y * width + x) * 3. `pixels` is a
    writable (height, width, 3) NumPy view of the same memory.
    """

    def __init__(self, width: int = 1280, height: int = 720):
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height * 3)

    @property
    def pixels(self) -> np.ndarray:
        return np.frombuffer(self.buffer, dtype=np.uint8).reshape(self.height, self.width, 3)

    def resize(self, width: int, height: int) -> None:
        """Reallocate for a new size. Contents are cleared."""
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height * 3)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        if color == (0, 0, 0):
            self.buffer[:] = b'\x00' * len(self.buffer)
        else:
            self.pixels[:, :] = color

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-bounds writes are silently ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 3
            self.buffer[idx] = color[0]
            self.buffer[idx + 1] = color[1]
            self.buffer[idx + 2] = color[2]

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 3
            return (self.buffer[idx], self.buffer[idx + 1], self.buffer[idx + 2])
        return (0, 0, 0)

    def line(self, x0: float, y0: float, x1: float, y1: float, color: Color,
             alpha: float = 1.0) -> None:
        """Draw a 1px line, blended over the existing pixels."""
        if alpha <= 0:
            return
        steps = int(max(abs(x1 - x0), abs(y1 - y0))) + 1
        xs = np.rint(np.linspace(x0, x1, steps + 1)).astype(np.int64)
        ys = np.rint(np.linspace(y0, y1, steps + 1)).astype(np.int64)
        inside = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        if not inside.any():
            return
        # Dedupe so shared pixels are not blended twice
        flat = np.unique(ys[inside] * self.width + xs[inside])
        px = self.pixels.reshape(-1, 3)
        px[flat] = _blend(px[flat], color, alpha)

    def polygon(self, points: list[tuple[float, float]], color: Color,
                alpha: float = 1.0, filled: bool = False) -> None:
        """Draw a closed polygon. Filled polygons use even-odd scanlines."""
        if alpha <= 0 or len(points) < 3:
            return
        if not filled:
            for (ax, ay), (bx, by) in zip(points, points[1:] + points[:1]):
                self.line(ax, ay, bx, by, color, alpha)
            return

        top = max(0, math.ceil(min(y for _, y in points) - 0.5))
        bottom = min(self.height - 1, math.floor(max(y for _, y in points) - 0.5))
        edges = list(zip(points, points[1:] + points[:1]))
        px = self.pixels
        for y in range(top, bottom + 1):
            sy = y + 0.5
            crossings = []
            for (ax, ay), (bx, by) in edges:
                if (ay <= sy < by) or (by <= sy < ay):
                    crossings.append(ax + (sy - ay) * (bx - ax) / (by - ay))
            crossings.sort()
            for left, right in zip(crossings[::2], crossings[1::2]):
                x0 = max(0, math.ceil(left - 0.5))
                x1 = min(self.width, math.floor(right - 0.5) + 1)
                if x0 < x1:
                    px[y, x0:x1] = _blend(px[y, x0:x1], color, alpha)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return bytes(self.buffer)


def _blend(region: np.ndarray, color: Color, alpha: float) -> np.ndarray:
    alpha = min(1.0, alpha)
    mixed = region * (1.0 - alpha) + np.asarray(color, dtype=np.float64) * alpha
    return np.rint(mixed).astype(np.uint8)
