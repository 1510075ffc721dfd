"""
Pytest fixtures for Dodgeball tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core.state import GameState, Agent, Position, Side
from ..host.text_host import TextHost
from ..session.game_loop import GameLoop


def make_state(
    player=(1, 4),
    enemy=(7, 4),
    holder=Side.ENEMY,
    ball=None,
) -> GameState:
    """Build a state with agents placed and the ball held (or resting)."""
    player_pos = Position(*player)
    enemy_pos = Position(*enemy)
    if holder is Side.PLAYER:
        ball_pos = player_pos
    elif holder is Side.ENEMY:
        ball_pos = enemy_pos
    else:
        ball_pos = Position(*ball)
    return GameState(
        player=Agent(side=Side.PLAYER, position=player_pos, has_ball=holder is Side.PLAYER),
        enemy=Agent(side=Side.ENEMY, position=enemy_pos, has_ball=holder is Side.ENEMY),
        ball=ball_pos,
    )


class ScriptedPolicy:
    """Enemy policy stand-in that never moves."""

    def __init__(self, side=Side.ENEMY):
        self.side = side
        self.calls = 0

    def select_move(self, state):
        from ..bots.policy import BotDecision
        self.calls += 1
        return BotDecision(explanation="hold")


@pytest.fixture
def initial_state() -> GameState:
    """Fresh game state."""
    return GameState.create()


@pytest.fixture
def host() -> TextHost:
    """Seeded in-memory host."""
    return TextHost(seed=7)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(seed=7)


@pytest.fixture
def loop(host, config) -> GameLoop:
    """Started game loop on a text host."""
    game = GameLoop(host, config=config)
    game.init_session()
    return game


@pytest.fixture
def still_loop(host, config) -> GameLoop:
    """Started game loop whose enemy never moves on its own."""
    game = GameLoop(host, config=config, enemy_policy=ScriptedPolicy())
    game.init_session()
    return game
