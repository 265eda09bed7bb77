"""HexagonManager - owns the grid and runs one animation tick at a time."""

import math
import random
from dataclasses import replace
from typing import Optional

from honeycomb.cell import FRAME_MS, Cell
from honeycomb.geometry import GridConfig
from honeycomb.grid import CellGrid
from honeycomb.parallax import ScrollParallax
from honeycomb.ripple import ContinuousRipple, RippleEngine
from honeycomb.scheduler import Scheduler
from honeycomb.settings import DEFAULT_SETTINGS, RippleSettings

RESIZE_THRESHOLD = 1.0  # px of cell size change before a rebuild is considered


class HexagonManager:
    """The honeycomb background: cells, ripples, hover and parallax.

    Call start() once, then update() every frame. Drawing is left to the
    caller, which reads `cells` (or visible_cells()) and `parallax.offset`.
    """

    def __init__(self, config: GridConfig, settings: RippleSettings = DEFAULT_SETTINGS,
                 rng=random):
        self.settings = settings
        self.scheduler = Scheduler()
        self.grid = CellGrid(config, self.scheduler)
        self.engine = RippleEngine(self.grid, self.scheduler, settings, rng)
        self.continuous = ContinuousRipple(self.engine)
        self.parallax = ScrollParallax(settings.parallax_factor, settings.scroll_easing)
        self.pointer: Optional[tuple[float, float]] = None

    @property
    def config(self) -> GridConfig:
        return self.grid.config

    @property
    def cells(self) -> list[Cell]:
        return list(self.grid)

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        return self.grid.cell_at(row, col)

    def visible_cells(self) -> list[Cell]:
        return [cell for cell in self.grid if cell.opacity > 0]

    def start(self) -> None:
        """Kick off the continuous ripple and the first interval ripples."""
        self.continuous.start()
        for delay in self.settings.startup_delays:
            self.scheduler.call_later(delay, self.engine.launch_interval_ripple)

    def stop(self) -> None:
        """Tear down the continuous chain and every pending action.

        The interval budget is reset and lit cells fade out, since the
        releases and hides that would have done so are cancelled here.
        """
        self.continuous.stop()
        self.scheduler.clear()
        self.engine.reset()
        for cell in self.grid:
            cell.hide()

    def set_pointer(self, x: float, y: float) -> None:
        self.pointer = (x, y)

    def clear_pointer(self) -> None:
        self.pointer = None

    def find_closest(self, x: float, y: float) -> Optional[Cell]:
        """The cell nearest (x, y) within the hover radius, or None.

        (x, y) is in surface coordinates; cells are drawn shifted up by the
        parallax offset, so the pointer is shifted down to match.
        """
        config = self.config
        if x < 0 or x > config.width or y < 0 or y > config.height:
            return None

        gy = y + self.parallax.offset
        radius = config.hover_radius
        closest = None
        best = math.inf
        for cell in self.grid:
            distance = math.hypot(x - cell.x, gy - cell.y)
            if distance < best and distance <= radius:
                best = distance
                closest = cell
        return closest

    def update(self, dt: float = FRAME_MS) -> None:
        """One animation tick: fire due actions, launch ripples, hover, then step every cell."""
        self.scheduler.advance(dt)
        self.engine.tick()

        hovered = self.find_closest(*self.pointer) if self.pointer is not None else None
        for cell in self.grid:
            cell.set_hovered(cell is hovered)
            cell.update(dt)

    def resize(self, config: GridConfig) -> bool:
        """Adapt to a new viewport. Returns True if the grid was rebuilt.

        Rebuild only when the cell size moved by more than RESIZE_THRESHOLD
        and the row/column count changed; otherwise cells keep their state
        and only move. The continuous ripple restarts either way.
        """
        old = self.config
        size_changed = (abs(old.cell_width - config.cell_width) > RESIZE_THRESHOLD
                        or abs(old.cell_height - config.cell_height) > RESIZE_THRESHOLD)
        shape_changed = (old.rows, old.cols) != (config.rows, config.cols)

        rebuilt = size_changed and shape_changed
        if rebuilt:
            self.grid.rebuild(config)
            print(f"[grid] Rebuilt grid: {config.rows}x{config.cols} cells")
        else:
            self.grid.reposition(replace(config, rows=old.rows, cols=old.cols))

        self.continuous.restart()
        return rebuilt
