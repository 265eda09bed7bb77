"""Honeycomb grid geometry: layout config, pixel positions, neighbors and distance.

Rows are offset (odd rows shifted right by half a spacing) and packed at 75%
of the vertical spacing so hexagons interlock. Row parity uses Python's
modulo, so the overflow row -1 counts as odd.
"""

import math
from dataclasses import dataclass

# Type alias for (row, col) grid coordinates
Coord = tuple[int, int]

BASE_CELL_WIDTH = 100
BASE_CELL_HEIGHT = 110
H_MARGIN = 4  # Extra horizontal gap per cell at scale 1.0
V_MARGIN = 8  # Extra vertical gap per cell at scale 1.0
EXTRA_CELLS = 3  # Rows/cols beyond the viewport so edges are always filled

# (max viewport width, scale factor) - first match wins
BREAKPOINTS = [
    (480, 0.5),   # Phones
    (768, 0.7),   # Tablets
    (1024, 0.85), # Small laptops
]

# Neighbor offsets (drow, dcol) for odd and even rows
_ODD_ROW_DIRECTIONS = [(-1, 0), (-1, 1), (0, -1), (0, 1), (1, 0), (1, 1)]
_EVEN_ROW_DIRECTIONS = [(-1, -1), (-1, 0), (0, -1), (0, 1), (1, -1), (1, 0)]


def scale_for_width(width: float) -> float:
    """Responsive scale factor for a viewport width."""
    for limit, scale in BREAKPOINTS:
        if width < limit:
            return scale
    return 1.0


@dataclass(frozen=True)
class GridConfig:
    """Cell size, spacing and grid dimensions for one viewport size."""

    width: int
    height: int
    cell_width: float
    cell_height: float
    spacing_x: float
    spacing_y: float
    rows: int
    cols: int

    @classmethod
    def for_viewport(cls, width: int, height: int) -> "GridConfig":
        scale = scale_for_width(width)
        cell_width = BASE_CELL_WIDTH * scale
        cell_height = BASE_CELL_HEIGHT * scale
        spacing_x = cell_width + H_MARGIN * scale
        spacing_y = cell_height + V_MARGIN * scale
        return cls(
            width=width,
            height=height,
            cell_width=cell_width,
            cell_height=cell_height,
            spacing_x=spacing_x,
            spacing_y=spacing_y,
            rows=math.ceil(height / spacing_y) + EXTRA_CELLS,
            cols=math.ceil(width / spacing_x) + EXTRA_CELLS,
        )

    @property
    def half_size(self) -> float:
        return self.cell_width / 2

    @property
    def hover_radius(self) -> float:
        return self.half_size * 1.5

    def in_bounds(self, row: int, col: int) -> bool:
        """True for coordinates ripples may touch (the -1 overflow ring excluded)."""
        return 0 <= row < self.rows and 0 <= col < self.cols


def is_odd(row: int) -> bool:
    return row % 2 == 1


def position_of(row: int, col: int, config: GridConfig) -> tuple[float, float]:
    """Pixel center of the cell at (row, col)."""
    sx = config.spacing_x
    if is_odd(row):
        x = col * sx + sx
    else:
        x = col * sx + sx / 2
    y = row * (config.spacing_y * 0.75) + config.spacing_y / 2
    return (x, y)


def neighbors_of(row: int, col: int, config: GridConfig) -> set[Coord]:
    """The (up to) 6 in-bounds cells touching (row, col)."""
    directions = _ODD_ROW_DIRECTIONS if is_odd(row) else _EVEN_ROW_DIRECTIONS
    result = set()
    for dr, dc in directions:
        r, c = row + dr, col + dc
        if config.in_bounds(r, c):
            result.add((r, c))
    return result


def hex_distance(center_row: int, center_col: int, row: int, col: int) -> int:
    """Approximate grid distance used for ripple waves and spacing checks.

    Not true hex distance: rows of equal parity use the Chebyshev distance,
    rows of different parity discount half the row difference from the
    column difference. Waves are shaped by exactly this formula.
    """
    dr = abs(row - center_row)
    dc = abs(col - center_col)
    if is_odd(center_row) == is_odd(row):
        return max(dr, dc)
    return dr + max(0, dc - dr // 2)


def are_adjacent(a: Coord, b: Coord) -> bool:
    """Strict adjacency test used to keep a wave's subgroup contiguous."""
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    if dr == 0:
        return dc == 1
    if dr == 1:
        if is_odd(a[0]) == is_odd(b[0]):
            return dc == 0
        return dc in (0, 1)
    return False


def hexagon_points(x: float, y: float, width: float, height: float) -> list[tuple[float, float]]:
    """Outline of a pointy-top hexagon centered on (x, y), clockwise from the top."""
    left = x - width / 2
    top = y - height / 2
    return [
        (left + width * 0.5, top),
        (left + width, top + height * 0.25),
        (left + width, top + height * 0.75),
        (left + width * 0.5, top + height),
        (left, top + height * 0.75),
        (left, top + height * 0.25),
    ]
