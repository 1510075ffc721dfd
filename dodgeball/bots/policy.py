"""
Bot Policy - Interface for agent decision-making.

A BotPolicy looks at the game state and returns a decision:
- Which step to take (dx, dy)
- Whether to throw
- An explanation for logs
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from ..engine_core.state import Side

if TYPE_CHECKING:
    from ..engine_core.state import GameState


# Host randomness: uniform integer in 1..n
RandomInt = Callable[[int], int]

# random_int(5) outcomes; 5 means stand still
RANDOM_STEPS = {
    1: (0, -1),
    2: (0, 1),
    3: (-1, 0),
    4: (1, 0),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    A zero step means hold position.
    """
    dx: int = 0
    dy: int = 0
    throw: bool = False
    explanation: str = ""


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy decides for one side how it moves each tick.
    """

    def __init__(self, side: Side):
        self.side = side

    @abstractmethod
    def select_move(self, state: GameState) -> BotDecision:
        """
        Select a step for this policy's side.

        Args:
            state: Current game state

        Returns:
            BotDecision with the step to take
        """
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class ReactiveEnemyPolicy(BotPolicy):
    """
    The enemy's reactive heuristic, evaluated in strict priority order:

    1. Holding the ball: line up with the player's row, then step toward the wall.
    2. Player holds the ball: get off the player's row, then back away.
    3. Dead ball on our side: walk to it, columns first.
    4. Otherwise wander randomly (or stand still).
    """

    def __init__(self, random_int: RandomInt, side: Side = Side.ENEMY):
        super().__init__(side)
        self.random_int = random_int

    def select_move(self, state: GameState) -> BotDecision:
        me = state.agent(self.side)
        other = state.opponent(self.side)
        row_gap = _sign(other.position.y - me.position.y)

        if me.has_ball:
            if row_gap:
                return BotDecision(dy=row_gap, explanation="line up with opponent")
            return BotDecision(dx=-1, explanation="step into throwing lane")

        if other.has_ball:
            if row_gap:
                return BotDecision(dy=-row_gap, explanation="dodge off opponent's row")
            return BotDecision(dx=1, explanation="back away")

        if me.can_pick_up:
            ball = state.ball
            if ball.x != me.position.x:
                return BotDecision(dx=_sign(ball.x - me.position.x), explanation="go get ball")
            return BotDecision(dy=_sign(ball.y - me.position.y), explanation="go get ball")

        dx, dy = RANDOM_STEPS.get(self.random_int(5), (0, 0))
        return BotDecision(dx=dx, dy=dy, explanation="wander")


class RandomWalkPolicy(BotPolicy):
    """
    Random-walk policy that throws whenever it holds the ball.

    Used for:
    - Headless simulation of the player side
    - Testing
    """

    def __init__(self, side: Side = Side.PLAYER, seed: int | None = None):
        super().__init__(side)
        import random
        self.rng = random.Random(seed)

    def select_move(self, state: GameState) -> BotDecision:
        me = state.agent(self.side)
        if me.has_ball:
            return BotDecision(throw=True, explanation="throw")

        if me.can_pick_up:
            ball = state.ball
            if ball.y != me.position.y:
                return BotDecision(dy=_sign(ball.y - me.position.y), explanation="go get ball")
            return BotDecision(dx=_sign(ball.x - me.position.x), explanation="go get ball")

        dx, dy = self.rng.choice(list(RANDOM_STEPS.values()))
        return BotDecision(dx=dx, dy=dy, explanation="wander")
