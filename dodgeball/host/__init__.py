"""
Host module - The render/input boundary.

The engine draws through a HostAdapter and schedules its timers on it.
Colours are a projection of state, never read back.
"""

from .adapter import HostAdapter, Color, BALL_GLYPH
from .scheduler import FrameScheduler
from .projection import GridProjection, CellAppearance, cell_appearance
from .text_host import TextHost

__all__ = [
    "HostAdapter",
    "Color",
    "BALL_GLYPH",
    "FrameScheduler",
    "GridProjection",
    "CellAppearance",
    "cell_appearance",
    "TextHost",
]
