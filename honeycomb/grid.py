"""Cell storage: a 2D list covering rows/cols -1..N-1, indexed with a +1 offset."""

import random
from typing import Iterator, Optional

from honeycomb.cell import Cell
from honeycomb.geometry import Coord, GridConfig
from honeycomb.scheduler import Scheduler

OFFSET = 1  # Row/col -1 lives at index 0


class CellGrid:
    """All cells of the honeycomb. Rebuilt in place so references to the grid stay valid."""

    def __init__(self, config: GridConfig, scheduler: Scheduler):
        self.scheduler = scheduler
        self.config = config
        self._rows: list[list[Cell]] = []
        self.rebuild(config)

    def rebuild(self, config: GridConfig) -> None:
        """Discard every cell and create a fresh, invisible grid."""
        self.config = config
        self._rows = [
            [Cell(row, col, config, self.scheduler) for col in range(-OFFSET, config.cols)]
            for row in range(-OFFSET, config.rows)
        ]

    def reposition(self, config: GridConfig) -> None:
        """Keep every cell and its state, only recompute pixel positions."""
        self.config = config
        for cell in self:
            cell.update_position(config)

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        r, c = row + OFFSET, col + OFFSET
        if 0 <= r < len(self._rows) and 0 <= c < len(self._rows[r]):
            return self._rows[r][c]
        return None

    def in_bounds(self) -> Iterator[Cell]:
        """Cells ripples may use (the overflow ring excluded)."""
        for row in self._rows[OFFSET:]:
            yield from row[OFFSET:]

    def random_coord(self, rng=random) -> Coord:
        """A uniformly random in-bounds coordinate."""
        return (rng.randrange(max(1, self.config.rows)), rng.randrange(max(1, self.config.cols)))

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols) of the in-bounds region."""
        return (self.config.rows, self.config.cols)

    def __iter__(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows)
