"""
Text Host - In-memory host that renders the grid as text.

Backs the CLI and the tests. Holds the cell grid, the status line,
a FrameScheduler and a seeded random generator.
"""

from __future__ import annotations
import random
from dataclasses import dataclass

from .adapter import HostAdapter, Color, TimerCallback
from .scheduler import FrameScheduler


# Cell colour -> character when no glyph is drawn
CELL_CHARS = {
    Color.FLOOR: ".",
    Color.WALL: "#",
    Color.PLAYER: "P",
    Color.ENEMY: "E",
}

# Ball glyph drawn over an agent
CARRIED_CHARS = {
    Color.PLAYER: "p",
    Color.ENEMY: "e",
}


@dataclass
class Cell:
    color: Color = Color.FLOOR
    glyph: str = ""
    glyph_color: Color | None = None


class TextHost(HostAdapter):
    """
    Host whose grid lives in memory.

    advance() runs the scheduler; render() draws the grid as lines of text.
    """

    def __init__(self, seed: int | None = None):
        self.width = 0
        self.height = 0
        self.cells: list[list[Cell]] = []
        self.status_text = ""
        self.scheduler = FrameScheduler()
        self.rng = random.Random(seed)

    def set_grid_dimensions(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def set_cell_color(self, x: int, y: int, color: Color) -> None:
        self.cells[y][x].color = color

    def set_cell_glyph(self, x: int, y: int, text: str) -> None:
        cell = self.cells[y][x]
        cell.glyph = text
        if not text:
            cell.glyph_color = None

    def set_glyph_color(self, x: int, y: int, color: Color) -> None:
        self.cells[y][x].glyph_color = color

    def set_status_text(self, text: str) -> None:
        self.status_text = text

    def start_periodic(self, interval: int, callback: TimerCallback) -> int:
        return self.scheduler.start(interval, callback)

    def stop_periodic(self, handle: int) -> None:
        self.scheduler.stop(handle)

    def random_int(self, n: int) -> int:
        return self.rng.randint(1, n)

    def advance(self, frames: int = 1) -> None:
        self.scheduler.advance(frames)

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def render(self) -> str:
        """Grid as text, one row per line, followed by the status line."""
        lines = []
        for row in self.cells:
            chars = []
            for cell in row:
                if cell.glyph:
                    chars.append(CARRIED_CHARS.get(cell.color, cell.glyph))
                else:
                    chars.append(CELL_CHARS.get(cell.color, "?"))
            lines.append(" ".join(chars))
        if self.status_text:
            lines.append(self.status_text)
        return "\n".join(lines)
