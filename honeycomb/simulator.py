"""Pygame window that shows the Canvas and collects pointer, scroll and resize input."""

from typing import Optional

import pygame

from honeycomb.canvas import Canvas


class Simulator:
    """Opens a resizable window that displays the Canvas contents.

    After each update(), `pointer` holds the latest mouse position (None once
    the mouse leaves the window), `scroll` the accumulated wheel scroll in
    pixels, and `resized` the new (width, height) if the window changed size.
    """

    def __init__(self, canvas: Canvas, title: str = "Honeycomb", scroll_step: float = 120):
        self.canvas = canvas
        self.scroll_step = scroll_step
        self.pointer: Optional[tuple[int, int]] = None
        self.scroll = 0.0
        self.resized: Optional[tuple[int, int]] = None

        pygame.init()
        self.screen = pygame.display.set_mode((canvas.width, canvas.height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def update(self) -> bool:
        """Handle events and blit canvas to screen. Returns False if window was closed."""
        self.resized = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.MOUSEMOTION:
                self.pointer = event.pos
            elif event.type == pygame.WINDOWLEAVE:
                self.pointer = None
            elif event.type == pygame.MOUSEWHEEL:
                # Wheel up scrolls toward the top of the "page"
                self.scroll = max(0.0, self.scroll - event.y * self.scroll_step)
            elif event.type == pygame.VIDEORESIZE:
                self.resized = (event.w, event.h)

        frame = pygame.image.frombuffer(
            self.canvas.buffer, (self.canvas.width, self.canvas.height), "RGB")
        self.screen.blit(frame, (0, 0))
        pygame.display.flip()
        return True

    def tick(self, fps: int = 60) -> int:
        """Limit framerate. Returns milliseconds since the previous tick."""
        return self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
