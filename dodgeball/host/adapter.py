"""
Host Adapter - The render/input substrate the engine draws through.

The engine only ever calls into the host:
- Grid setup, cell colours and glyphs
- The status line
- Periodic timers (enemy cadence, ball flight)
- Randomness for the enemy's idle wandering

The host never feeds rendered state back into the engine.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable


class Color(str, Enum):
    """Cell and glyph colours."""
    FLOOR = "white"
    WALL = "gray"
    PLAYER = "green"
    ENEMY = "black"
    BALL = "red"


BALL_GLYPH = "o"

TimerCallback = Callable[[], None]


class HostAdapter(ABC):
    """
    Abstract rendering/scheduling host.

    Implementations: TextHost (in-memory, terminal rendering).
    """

    @abstractmethod
    def set_grid_dimensions(self, width: int, height: int) -> None:
        pass

    @abstractmethod
    def set_cell_color(self, x: int, y: int, color: Color) -> None:
        pass

    @abstractmethod
    def set_cell_glyph(self, x: int, y: int, text: str) -> None:
        pass

    @abstractmethod
    def set_glyph_color(self, x: int, y: int, color: Color) -> None:
        pass

    @abstractmethod
    def set_status_text(self, text: str) -> None:
        pass

    @abstractmethod
    def start_periodic(self, interval: int, callback: TimerCallback) -> int:
        """Call `callback` every `interval` frames; returns a handle."""
        pass

    @abstractmethod
    def stop_periodic(self, handle: int) -> None:
        """Cancel a periodic callback. Unknown handles are ignored."""
        pass

    @abstractmethod
    def random_int(self, n: int) -> int:
        """Uniform random integer in 1..n."""
        pass
