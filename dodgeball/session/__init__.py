"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when the player starts a game
- Holds the game loop and its host
- Destroyed when the game ends or the player quits

Sessions are EPHEMERAL: no persistence.
"""

from .manager import SessionManager, Session
from .game_loop import GameLoop, MOVE_KEYS, THROW_KEYS, WELCOME_TEXT

__all__ = [
    "SessionManager",
    "Session",
    "GameLoop",
    "MOVE_KEYS",
    "THROW_KEYS",
    "WELCOME_TEXT",
]
