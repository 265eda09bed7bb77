"""Record the honeycomb background to an animated GIF, headlessly.

Usage: python -m honeycomb --record media/honeycomb.gif
"""

import random
from pathlib import Path

from PIL import Image

from honeycomb.canvas import Canvas
from honeycomb.cell import FRAME_MS
from honeycomb.geometry import GridConfig
from honeycomb.manager import HexagonManager
from honeycomb.render import draw_grid
from honeycomb.settings import DEFAULT_SETTINGS, RippleSettings

SIM_FPS = 60      # Cells ease per tick, so always simulate at the native rate
WARMUP_S = 3.0    # Let the first ripples spread before capturing


def canvas_to_image(canvas: Canvas, scale: float = 1.0) -> Image.Image:
    """Convert a Canvas buffer to a (optionally scaled) PIL Image."""
    img = Image.frombytes("RGB", (canvas.width, canvas.height), canvas.get_buffer())
    if scale != 1.0:
        img = img.resize(
            (max(1, int(canvas.width * scale)), max(1, int(canvas.height * scale))),
            Image.BILINEAR,
        )
    return img


def record_gif(path: Path | str, seconds: float = 6.0, fps: int = 20,
               width: int = 640, height: int = 360,
               settings: RippleSettings = DEFAULT_SETTINGS, scale: float = 1.0,
               warmup: float = WARMUP_S, rng=random) -> int:
    """Render `seconds` of animation and save it as a looping GIF. Returns the frame count."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    canvas = Canvas(width, height)
    manager = HexagonManager(GridConfig.for_viewport(width, height), settings, rng)
    manager.start()

    for _ in range(int(warmup * SIM_FPS)):
        manager.update(FRAME_MS)

    ticks_per_frame = max(1, round(SIM_FPS / fps))
    n_frames = max(1, int(seconds * fps))
    frames = []
    for _ in range(n_frames):
        for _ in range(ticks_per_frame):
            manager.parallax.step()
            manager.update(FRAME_MS)
        draw_grid(canvas, manager, settings.background)
        frames.append(canvas_to_image(canvas, scale))
    manager.stop()

    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {seconds}s)")
    return len(frames)
