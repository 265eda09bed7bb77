"""Animated honeycomb background: rippling hexagon grid with hover pulses and parallax."""

from honeycomb.canvas import Canvas
from honeycomb.geometry import GridConfig
from honeycomb.manager import HexagonManager
from honeycomb.run import run
from honeycomb.settings import RippleSettings, load_settings

__all__ = ["Canvas", "GridConfig", "HexagonManager", "RippleSettings", "load_settings", "run"]
