"""
Engine Core - Deterministic dodgeball state management.

The engine is the runtime that:
1. Creates the initial GameState
2. Validates moves, throws and flight ticks
3. Applies them via the reducer
4. Decides hits, pickups and the winner
"""

from .state import (
    GameState,
    GamePhase,
    Agent,
    Flight,
    Position,
    Side,
    WIDTH,
    HEIGHT,
    WALL_X,
    WINNING_SCORE,
)
from .action import Action, ActionType, ActionPayload, ActionResult, ErrorCode
from .reducer import Reducer, apply_action, status_text, outcome_text

__all__ = [
    "GameState",
    "GamePhase",
    "Agent",
    "Flight",
    "Position",
    "Side",
    "WIDTH",
    "HEIGHT",
    "WALL_X",
    "WINNING_SCORE",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "ErrorCode",
    "Reducer",
    "apply_action",
    "status_text",
    "outcome_text",
]
