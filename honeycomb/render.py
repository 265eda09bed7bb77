"""Paints the honeycomb onto a Canvas."""

from honeycomb.canvas import Canvas, Color
from honeycomb.geometry import hexagon_points
from honeycomb.manager import HexagonManager

LAYER_ALPHA = 0.4      # Whole layer is kept faint
FILL = (0, 0, 0)
FILL_ALPHA = 0.1
STROKE = (255, 255, 255)
STROKE_ALPHA = 0.7
SHRINK = 0.9           # Drawn slightly smaller than the cell so outlines never touch


def draw_grid(canvas: Canvas, manager: HexagonManager,
              background: Color = (0, 0, 0)) -> int:
    """Clear to `background` and draw every visible cell. Returns the number drawn."""
    canvas.clear(background)
    config = manager.config
    offset = manager.parallax.offset
    width = config.cell_width * SHRINK
    height = config.cell_height * SHRINK

    drawn = 0
    for cell in manager.visible_cells():
        y = cell.y - offset
        if y + height < 0 or y - height > canvas.height:
            continue
        alpha = cell.opacity * LAYER_ALPHA
        points = hexagon_points(cell.x, y, width, height)
        canvas.polygon(points, FILL, FILL_ALPHA * alpha, filled=True)
        canvas.polygon(points, STROKE, STROKE_ALPHA * alpha)
        drawn += 1
    return drawn
