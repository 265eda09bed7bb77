"""Ripple waves: concentric reveals spreading out from a center cell.

Two drivers share `RippleEngine.expand_ripple`:

- interval ripples, launched on a fixed cadence and topped up whenever fewer
  than `max_active_ripples` are running;
- the continuous ripple, a single chain that reseeds itself at the last cell
  of each ripple for as long as it runs.

All timing goes through the shared Scheduler; nothing here sleeps.
"""

import random
from functools import partial
from typing import Callable, Iterable, Optional

from honeycomb.cell import VISIBLE_THRESHOLD, Cell
from honeycomb.geometry import Coord, are_adjacent, hex_distance
from honeycomb.grid import CellGrid
from honeycomb.scheduler import Scheduler, Timer
from honeycomb.settings import DEFAULT_SETTINGS, RippleSettings

# Callback type: fn(row, col) of the ripple's final cell
OnComplete = Callable[[int, int], None]


def cells_at_distance(grid: CellGrid, center_row: int, center_col: int,
                      distance: int, visited: set[Coord]) -> list[Cell]:
    """Unvisited in-bounds cells exactly `distance` away. Marks them visited."""
    result = []
    for cell in grid.in_bounds():
        if cell.coord in visited:
            continue
        if hex_distance(center_row, center_col, cell.row, cell.col) == distance:
            result.append(cell)
            visited.add(cell.coord)
    return result


def connected_subgroup(cells: list[Cell], limit: int, rng=random) -> list[Cell]:
    """Up to `limit` cells of `cells` forming one contiguous patch.

    Breadth-first from a random seed, only stepping between cells of the
    same wave, so a wave lights up as a strip rather than scattered dots.
    """
    if limit <= 0:
        return []
    if len(cells) <= limit:
        return list(cells)

    start = rng.choice(cells)
    group = [start]
    considered = {start.coord}
    frontier = [start]
    while len(group) < limit and frontier:
        next_frontier = []
        for candidate in frontier:
            for cell in cells:
                if cell.coord in considered:
                    continue
                if are_adjacent(candidate.coord, cell.coord):
                    group.append(cell)
                    considered.add(cell.coord)
                    next_frontier.append(cell)
                    if len(group) >= limit:
                        break
            if len(group) >= limit:
                break
        frontier = next_frontier
    return group


class RippleEngine:
    """Launches ripples and keeps the interval-ripple budget."""

    def __init__(self, grid: CellGrid, scheduler: Scheduler,
                 settings: RippleSettings = DEFAULT_SETTINGS, rng=random):
        self.grid = grid
        self.scheduler = scheduler
        self.settings = settings
        self.rng = rng
        self.active_ripples = 0
        self._last_launch = float("-inf")
        self._retry: Optional[Timer] = None

    # --- Core primitive ---

    def expand_ripple(self, center_row: int, center_col: int, max_waves: int,
                      on_complete: Optional[OnComplete] = None, *,
                      wave_delay: Optional[float] = None, budgeted: bool = False) -> bool:
        """Reveal the center now, then `max_waves` rings outward on the scheduler.

        Cell i of wave w shows at w * wave_delay + i * cell_delay and hides
        hide_delay + i * hide_stagger after that. When the final cell hides,
        `on_complete(row, col)` runs and budgeted ripples may spawn a smaller
        follow-up before releasing their budget slot.

        Returns False if nothing was launched (unknown center or full budget).
        An unknown center with `on_complete` reports a random coordinate instead.
        """
        s = self.settings
        if wave_delay is None:
            wave_delay = s.continuous_wave_delay

        center = self.grid.cell_at(center_row, center_col)
        if center is None:
            if on_complete is not None:
                on_complete(*self.grid.random_coord(self.rng))
            return False

        if budgeted:
            if self.active_ripples >= s.max_active_ripples:
                return False
            self.active_ripples += 1

        center.show()
        visited = {center.coord}

        final_cell, final_index, final_at = center, 0, s.hide_delay
        for wave in range(1, max_waves + 1):
            ring = cells_at_distance(self.grid, center_row, center_col, wave, visited)
            group = connected_subgroup(ring, s.max_cells_per_wave, self.rng)
            self.rng.shuffle(group)

            base = wave * wave_delay
            for i, cell in enumerate(group):
                show_at = base + i * s.cell_delay
                hide_at = show_at + s.hide_delay + i * s.hide_stagger
                self.scheduler.call_later(show_at, cell.show)
                self.scheduler.call_later(hide_at, cell.hide)
                final_cell, final_index, final_at = cell, i, hide_at

        self.scheduler.call_later(final_at, self._finish, final_cell, final_index,
                                  on_complete, budgeted)
        return True

    def _finish(self, cell: Cell, index: int, on_complete: Optional[OnComplete],
                budgeted: bool) -> None:
        s = self.settings
        if on_complete is not None:
            on_complete(cell.row, cell.col)
        if budgeted:
            if self.rng.random() < s.continue_chance and self.active_ripples < s.max_active_ripples:
                self.scheduler.call_later(s.continue_delay + index * s.continue_stagger,
                                          self._continue_from, cell.row, cell.col)
            self.scheduler.call_later(s.release_delay, self._release)

    def _continue_from(self, row: int, col: int) -> None:
        s = self.settings
        self.expand_ripple(row, col, s.continue_waves,
                           wave_delay=s.interval_wave_delay, budgeted=True)

    def _release(self) -> None:
        self.active_ripples = max(0, self.active_ripples - 1)

    def reset(self) -> None:
        """Forget the budget, cadence and pending retry. Pair with Scheduler.clear()."""
        self.active_ripples = 0
        self._last_launch = float("-inf")
        self._retry = None

    # --- Interval ripples ---

    def tick(self) -> None:
        """Per-frame cadence check plus opportunistic top-up to the budget."""
        now = self.scheduler.now
        if now - self._last_launch > self.settings.interval:
            self.launch_interval_ripple()
            self._last_launch = now
        if self.active_ripples < self.settings.max_active_ripples:
            self.launch_interval_ripple()

    def launch_interval_ripple(self) -> bool:
        """Start a budgeted ripple at a random hidden cell away from visible ones."""
        s = self.settings
        if self.active_ripples >= s.max_active_ripples:
            return False

        hidden = [cell for cell in self.grid.in_bounds() if cell.opacity < VISIBLE_THRESHOLD]
        if not hidden:
            return False
        center = self.rng.choice(hidden)

        if self.too_close(center.row, center.col, self.grid):
            self._schedule_retry()
            return False
        return self.expand_ripple(center.row, center.col, s.interval_waves,
                                  wave_delay=s.interval_wave_delay, budgeted=True)

    def too_close(self, row: int, col: int, cells: Iterable[Cell]) -> bool:
        """True if any visible cell lies closer than `min_ripple_spacing`."""
        spacing = self.settings.min_ripple_spacing
        return any(
            cell.visible and hex_distance(row, col, cell.row, cell.col) < spacing
            for cell in cells
        )

    def _schedule_retry(self) -> None:
        # At most one pending retry; the per-frame top-up keeps trying meanwhile
        if self._retry is not None:
            return
        self._retry = self.scheduler.call_later(self.settings.retry_delay, self._run_retry)

    def _run_retry(self) -> None:
        self._retry = None
        self.launch_interval_ripple()


class ContinuousRipple:
    """The one self-reseeding ripple chain, as a stoppable task.

    Each ripple's final cell seeds the next ripple after a short pause. A
    generation number ties every pending hop to the start() that created it,
    so stop() or a restart leaves exactly one live chain.
    """

    def __init__(self, engine: RippleEngine):
        self.engine = engine
        self.running = False
        self.position: Optional[Coord] = None
        self.hops = 0
        self._generation = 0
        self._pending: Optional[Timer] = None

    def start(self, row: Optional[int] = None, col: Optional[int] = None) -> None:
        """(Re)start the chain, at a random cell unless a seed is given."""
        self.stop()
        self.running = True
        if row is None or col is None:
            row, col = self.engine.grid.random_coord(self.engine.rng)
        self._launch(self._generation, row, col)

    def restart(self) -> None:
        self.start()

    def stop(self) -> None:
        self._generation += 1
        self.running = False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _launch(self, generation: int, row: int, col: int) -> None:
        if generation != self._generation:
            return
        self._pending = None
        self.position = (row, col)
        self.hops += 1
        s = self.engine.settings
        self.engine.expand_ripple(row, col, s.continuous_waves,
                                  on_complete=partial(self._hop, generation),
                                  wave_delay=s.continuous_wave_delay)

    def _hop(self, generation: int, row: int, col: int) -> None:
        if generation != self._generation:
            return
        self._pending = self.engine.scheduler.call_later(
            self.engine.settings.continuous_pause, self._launch, generation, row, col)
