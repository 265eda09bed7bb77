"""Scroll-linked parallax: the grid drifts a fraction of the scroll distance, eased."""


class ScrollParallax:
    def __init__(self, factor: float = 0.08, easing: float = 0.03):
        self.factor = factor
        self.easing = easing
        self.offset = 0.0
        self.target = 0.0

    def set_scroll(self, position: float) -> None:
        self.target = position * self.factor

    def step(self) -> float:
        """Ease the offset one frame toward the target and return it."""
        self.offset += (self.target - self.offset) * self.easing
        return self.offset
