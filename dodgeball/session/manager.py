"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. create_session() builds a host and a GameLoop and starts it
2. Input and host timers drive the loop
3. The game ends when a side reaches 3 hits
4. end_session() cancels timers and forgets the session

Sessions are in-memory only; nothing is persisted.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import GameConfig
from ..host.text_host import TextHost
from ..schemas import SessionSnapshot, snapshot_state
from .game_loop import GameLoop

if TYPE_CHECKING:
    from ..bots.policy import BotPolicy
    from ..host.adapter import HostAdapter

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One play-through.

    Contains the host it renders to and the loop that owns the state.
    """
    session_id: str
    host: HostAdapter
    loop: GameLoop
    created_at: float

    def is_active(self) -> bool:
        """Check if the game is still running."""
        return not self.loop.game_over

    def snapshot(self) -> SessionSnapshot:
        """JSON-ready view of the session."""
        scheduler = getattr(self.host, "scheduler", None)
        return snapshot_state(
            self.loop.state,
            session_id=self.session_id,
            status_text=getattr(self.host, "status_text", ""),
            frame=scheduler.frame if scheduler else 0,
        )


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create and start sessions
    - Track active sessions
    - Clean up finished sessions
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        config: GameConfig | None = None,
        host: HostAdapter | None = None,
        enemy_policy: BotPolicy | None = None,
    ) -> Session:
        """
        Create and start a new game session.

        Args:
            config: Timer cadence and seed (defaults from GameConfig())
            host: Host to render to (a seeded TextHost if omitted)
            enemy_policy: Override for the enemy's decision policy

        Returns:
            Running Session
        """
        config = config or GameConfig()
        host = host or TextHost(seed=config.seed)
        loop = GameLoop(host, config=config, enemy_policy=enemy_policy)

        session = Session(
            session_id=str(uuid.uuid4()),
            host=host,
            loop=loop,
            created_at=time.time(),
        )
        loop.init_session()

        self._sessions[session.session_id] = session
        logger.info("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and clean up.

        Timers are cancelled and the session is removed from memory.
        Returns False if the session was unknown.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False
        session.loop.stop()
        logger.info("Ended session %s", session_id)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions whose game is still running."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_finished_sessions(self) -> int:
        """Remove sessions whose game is over. Returns how many were removed."""
        finished = [
            sid for sid, session in self._sessions.items()
            if not session.is_active()
        ]
        for session_id in finished:
            self.end_session(session_id)
        return len(finished)
