"""
Action System - Actions, payloads, and results.

Actions represent:
1. Agent moves (keyboard input for the player, the policy for the enemy)
2. Throws
3. Flight ticks (one ball step per scheduler tick)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import Side


class ActionType(Enum):
    """Types of actions in the system."""
    MOVE = "move"
    THROW = "throw"
    ADVANCE_BALL = "advance_ball"


class ErrorCode(str, Enum):
    """Why a transition was rejected."""
    GAME_OVER = "GAME_OVER"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    WALL = "WALL"
    NO_BALL = "NO_BALL"
    BALL_IN_FLIGHT = "BALL_IN_FLIGHT"
    NO_FLIGHT = "NO_FLIGHT"
    INVALID_STEP = "INVALID_STEP"
    NO_HANDLER = "NO_HANDLER"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields; validation
    happens in the reducer.
    """
    side: Side | None = None
    dx: int = 0
    dy: int = 0


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Actions are validated, then applied atomically by the reducer.
    """
    action_type: ActionType
    payload: ActionPayload

    @classmethod
    def move(cls, side: Side, dx: int, dy: int) -> Action:
        """Factory for a one-cell move (a zero step holds position)."""
        return cls(
            action_type=ActionType.MOVE,
            payload=ActionPayload(side=side, dx=dx, dy=dy),
        )

    @classmethod
    def throw(cls, side: Side) -> Action:
        """Factory for a throw."""
        return cls(
            action_type=ActionType.THROW,
            payload=ActionPayload(side=side),
        )

    @classmethod
    def advance_ball(cls) -> Action:
        """Factory for one flight tick."""
        return cls(action_type=ActionType.ADVANCE_BALL, payload=ActionPayload())


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error and code (if rejected)
    - What happened, for logs and the status line
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: ErrorCode | None = None

    # Human-readable changes
    state_changes: list[str] = field(default_factory=list)

    # Flight outcome for ADVANCE_BALL
    hit: bool = False
    landed: bool = False
    picked_up: bool = False

    @classmethod
    def failure(cls, error: str, error_code: ErrorCode | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
        **flags: bool,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
            **flags,
        )
