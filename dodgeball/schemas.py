"""
Pydantic Schemas - JSON view of a running session.

Used by the CLI's --json output. These are read-only views built
from the authoritative GameState.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .engine_core.state import Agent, GameState


class SessionPhase(str, Enum):
    """Session phase values."""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    GAME_OVER = "game_over"


class AgentInfo(BaseModel):
    """One agent's position, possession and score."""
    side: str
    x: int
    y: int
    has_ball: bool
    can_pick_up: bool
    score: int = Field(ge=0)


class BallInfo(BaseModel):
    """Where the ball is and whether it is flying."""
    x: int
    y: int
    in_flight: bool = False
    direction: Optional[int] = None


class SessionSnapshot(BaseModel):
    """Full session view."""
    session_id: Optional[str] = None
    phase: SessionPhase
    game_over: bool
    winner: Optional[str] = None
    status_text: str = ""
    frame: int = 0
    player: AgentInfo
    enemy: AgentInfo
    ball: BallInfo


def agent_info(agent: "Agent") -> AgentInfo:
    return AgentInfo(
        side=agent.side.value,
        x=agent.position.x,
        y=agent.position.y,
        has_ball=agent.has_ball,
        can_pick_up=agent.can_pick_up,
        score=agent.score,
    )


def snapshot_state(
    state: "GameState",
    session_id: Optional[str] = None,
    status_text: str = "",
    frame: int = 0,
) -> SessionSnapshot:
    """Build a snapshot from a game state."""
    ball = state.ball_position
    return SessionSnapshot(
        session_id=session_id,
        phase=SessionPhase(state.phase.value),
        game_over=state.game_over,
        winner=state.winner.value if state.winner else None,
        status_text=status_text,
        frame=frame,
        player=agent_info(state.player),
        enemy=agent_info(state.enemy),
        ball=BallInfo(
            x=ball.x,
            y=ball.y,
            in_flight=state.flight is not None,
            direction=state.flight.direction if state.flight else None,
        ),
    )
