"""Tunable animation constants, optionally overridden by a JSON settings file."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

SETTINGS_ENV = "HONEYCOMB_SETTINGS"


@dataclass(frozen=True)
class RippleSettings:
    # Interval ripples
    interval: float = 1500           # ms between scheduled launches
    max_active_ripples: int = 2
    min_ripple_spacing: int = 3      # reject centers closer than this to a visible cell
    retry_delay: float = 500
    interval_waves: int = 4
    interval_wave_delay: float = 2000
    continue_chance: float = 0.25    # chance the final cell seeds a smaller ripple
    continue_waves: int = 2
    continue_delay: float = 2000
    continue_stagger: float = 300
    release_delay: float = 2500      # budget slot freed this long after the final hide

    # Per wave
    max_cells_per_wave: int = 8
    cell_delay: float = 500
    hide_delay: float = 3000
    hide_stagger: float = 500

    # Continuous ripple
    continuous_waves: int = 3
    continuous_wave_delay: float = 1000
    continuous_pause: float = 500

    # Startup interval ripples (ms after start)
    startup_delays: tuple = (500, 1000)

    # Parallax
    parallax_factor: float = 0.08
    scroll_easing: float = 0.03
    scroll_step: float = 120         # virtual scroll pixels per mouse wheel notch

    # Display
    fps: int = 60
    background: tuple = (14, 17, 28)

    def __post_init__(self):
        for name in ("max_active_ripples", "min_ripple_spacing", "interval_waves",
                     "continue_waves", "max_cells_per_wave", "continuous_waves"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if not 0.0 <= self.continue_chance <= 1.0:
            raise ValueError(f"continue_chance must be within [0, 1], got {self.continue_chance}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = RippleSettings()


def load_settings(settings_path: Path | str | None = None) -> RippleSettings:
    """Load the settings file if one is given (or named by $HONEYCOMB_SETTINGS).

    Missing files fall back to defaults. Unknown keys are reported and ignored.
    """
    if settings_path is None:
        settings_path = os.environ.get(SETTINGS_ENV) or None
    if settings_path is None:
        return DEFAULT_SETTINGS

    path = Path(settings_path)
    if not path.exists():
        print(f"[config] Settings file {path} not found, using defaults")
        return DEFAULT_SETTINGS
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Failed to parse settings file {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise RuntimeError(f"Settings file {path} must contain a JSON object")

    known = {f.name for f in fields(RippleSettings)}
    unknown = sorted(set(loaded) - known)
    if unknown:
        print(f"[config] Ignoring unknown keys: {', '.join(unknown)}")

    overrides = {}
    for key, value in loaded.items():
        if key not in known:
            continue
        # JSON has no tuples
        if isinstance(value, list):
            value = tuple(value)
        overrides[key] = value
    print(f"[config] Loaded settings from {path}")
    return replace(DEFAULT_SETTINGS, **overrides)


__all__ = ["DEFAULT_SETTINGS", "RippleSettings", "SETTINGS_ENV", "load_settings"]
