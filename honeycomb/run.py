"""Main run loop - ties together Canvas, Simulator and HexagonManager."""

from honeycomb.canvas import Canvas
from honeycomb.geometry import GridConfig
from honeycomb.manager import HexagonManager
from honeycomb.render import draw_grid
from honeycomb.settings import RippleSettings, load_settings
from honeycomb.simulator import Simulator

MAX_FRAME_MS = 100  # Clamp long stalls (window drags) so ripples don't jump ahead


def run(width: int = 1280, height: int = 720, fps: int | None = None,
        title: str = "Honeycomb", settings: RippleSettings | None = None) -> None:
    """Main entry point. Opens a window and animates the honeycomb until closed.

    Args:
        width: Initial window width in pixels.
        height: Initial window height in pixels.
        fps: Target frames per second (default from settings).
        title: Window title.
        settings: Animation settings (default: load_settings()).
    """
    settings = settings or load_settings()
    fps = fps or settings.fps

    config = GridConfig.for_viewport(width, height)
    canvas = Canvas(width, height)
    sim = Simulator(canvas, title=title, scroll_step=settings.scroll_step)
    manager = HexagonManager(config, settings)
    manager.start()
    print(f"[honeycomb] {width}x{height}, grid {config.rows}x{config.cols} cells, {fps} fps")

    dt = 1000 / fps
    try:
        while True:
            manager.parallax.step()
            manager.update(dt)
            draw_grid(canvas, manager, settings.background)

            if not sim.update():
                break

            if sim.resized is not None:
                w, h = sim.resized
                canvas.resize(w, h)
                manager.resize(GridConfig.for_viewport(w, h))
            if sim.pointer is None:
                manager.clear_pointer()
            else:
                manager.set_pointer(*sim.pointer)
            manager.parallax.set_scroll(sim.scroll)

            dt = min(sim.tick(fps), MAX_FRAME_MS)
    except KeyboardInterrupt:
        pass
    finally:
        manager.stop()
        sim.close()
