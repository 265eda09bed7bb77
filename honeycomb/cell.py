"""One hexagon of the honeycomb and its fade in / fade out state machine."""

import random

from honeycomb.geometry import GridConfig, position_of
from honeycomb.scheduler import Scheduler

FRAME_MS = 1000 / 60  # One tick at 60fps

VISIBLE_THRESHOLD = 0.1  # Lifespan only counts down above this opacity
DRAWN_THRESHOLD = 0.01   # update() reports "still visible" above this
SNAP_EPSILON = 0.001

HIDE_SPEED = 0.01  # Slow fade-out, roughly a second

# Hover pulse: flash in fast, start fading after a short delay even if still hovered
HOVER_LIFESPAN = 400
HOVER_SHOW_SPEED = 0.1
HOVER_HIDE_SPEED = 0.05
HOVER_PULSE_MS = 200


class Cell:
    """A single grid position: identity, pixel position and visibility."""

    def __init__(self, row: int, col: int, config: GridConfig, scheduler: Scheduler):
        self.row = row
        self.col = col
        self.scheduler = scheduler
        self.x, self.y = position_of(row, col, config)

        self.opacity = 0.0
        self.target_opacity = 0.0
        self.show_speed = random.uniform(0.01, 0.02)
        self.hide_speed = HIDE_SPEED
        self.lifespan = random.uniform(1000, 2000)
        self.born_at = scheduler.now
        self.is_hovered = False

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, opacity={self.opacity:.3f})"

    @property
    def coord(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def visible(self) -> bool:
        return self.opacity > VISIBLE_THRESHOLD

    def update_position(self, config: GridConfig) -> None:
        """Recompute x/y after the cell size changed."""
        self.x, self.y = position_of(self.row, self.col, config)

    def show(self) -> None:
        """Start fading in with a fresh random lifespan and speed."""
        self.target_opacity = 1.0
        self.lifespan = random.uniform(1500, 3000)
        self.show_speed = random.uniform(0.01, 0.02)
        self.hide_speed = HIDE_SPEED
        self.born_at = self.scheduler.now

    def hide(self) -> None:
        """Start the slow fade-out, regardless of how the cell was shown."""
        self.target_opacity = 0.0
        self.hide_speed = HIDE_SPEED

    def update(self, dt: float = FRAME_MS) -> bool:
        """Advance one tick. Returns True while the cell is still perceptibly visible."""
        if self.target_opacity > self.opacity:
            rate = self.show_speed
        else:
            rate = self.hide_speed
        self.opacity += (self.target_opacity - self.opacity) * rate

        if self.opacity > VISIBLE_THRESHOLD and self.lifespan > 0:
            self.lifespan -= dt
            if self.lifespan <= 0 and not self.is_hovered:
                self.target_opacity = 0.0

        if abs(self.opacity - self.target_opacity) < SNAP_EPSILON:
            self.opacity = self.target_opacity
        self.opacity = min(1.0, max(0.0, self.opacity))

        return self.opacity > DRAWN_THRESHOLD

    def set_hovered(self, hovered: bool) -> None:
        """Track the pointer. Entering the cell triggers a short pulse, not a steady highlight."""
        if hovered and not self.is_hovered:
            self.target_opacity = 1.0
            self.lifespan = HOVER_LIFESPAN
            self.show_speed = HOVER_SHOW_SPEED
            self.hide_speed = HOVER_HIDE_SPEED
            self.born_at = self.scheduler.now
            self.scheduler.call_later(HOVER_PULSE_MS, self._end_pulse)
        self.is_hovered = hovered

    def _end_pulse(self) -> None:
        if self.is_hovered:
            self.target_opacity = 0.0
