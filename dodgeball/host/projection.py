"""
Grid Projection - Derives cell appearance from the game state.

Colours on the host grid are output only. After every transition
the projection recomputes what each cell should look like and pushes
the cells that changed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine_core.state import WIDTH, HEIGHT, Position, Side
from .adapter import Color, BALL_GLYPH

if TYPE_CHECKING:
    from ..engine_core.state import GameState
    from .adapter import HostAdapter


@dataclass(frozen=True)
class CellAppearance:
    color: Color
    glyph: str = ""
    glyph_color: Color | None = None


def cell_appearance(state: GameState, pos: Position) -> CellAppearance:
    """What a single cell should look like."""
    occupant = state.occupant(pos)
    if occupant is Side.PLAYER:
        color = Color.PLAYER
    elif occupant is Side.ENEMY:
        color = Color.ENEMY
    elif pos.is_wall:
        color = Color.WALL
    else:
        color = Color.FLOOR

    if state.ball_position == pos:
        return CellAppearance(color=color, glyph=BALL_GLYPH, glyph_color=Color.BALL)
    return CellAppearance(color=color)


class GridProjection:
    """Pushes state-derived appearance to a host, one diff at a time."""

    def __init__(self, host: HostAdapter):
        self.host = host
        self._drawn: dict[Position, CellAppearance] = {}

    def reset(self) -> None:
        """Forget what was drawn; the next sync redraws every cell."""
        self._drawn.clear()

    def sync(self, state: GameState) -> int:
        """Draw changed cells. Returns how many cells were redrawn."""
        redrawn = 0
        for y in range(HEIGHT):
            for x in range(WIDTH):
                pos = Position(x, y)
                look = cell_appearance(state, pos)
                if self._drawn.get(pos) == look:
                    continue
                self.host.set_cell_color(x, y, look.color)
                self.host.set_cell_glyph(x, y, look.glyph)
                if look.glyph_color is not None:
                    self.host.set_glyph_color(x, y, look.glyph_color)
                self._drawn[pos] = look
                redrawn += 1
        return redrawn
