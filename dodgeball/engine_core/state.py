"""
Game State - The authoritative dodgeball state.

Design principles:
- Immutable-friendly: the reducer clones before mutating
- Authoritative: positions here decide walls, hits and pickups;
  rendered colours are only a projection of this state
- Serializable: plain dataclasses, snapshot-able for the CLI
"""

from __future__ import annotations
from dataclasses import dataclass
from copy import deepcopy
from enum import Enum


# Fixed rules - the grid never changes size during a session
WIDTH = 9
HEIGHT = 9
WALL_X = WIDTH // 2
WINNING_SCORE = 3

PLAYER_START = (1, 4)
ENEMY_START = (7, 4)


class GamePhase(Enum):
    """High-level session phases."""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    GAME_OVER = "game_over"


class Side(Enum):
    """The two agents on the grid."""
    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def opponent(self) -> Side:
        return Side.ENEMY if self is Side.PLAYER else Side.PLAYER

    @property
    def throw_direction(self) -> int:
        """Player throws toward +x, enemy toward -x."""
        return 1 if self is Side.PLAYER else -1


@dataclass(frozen=True)
class Position:
    """Grid coordinate (x is the column, y the row, origin top-left)."""
    x: int
    y: int

    def step(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.x < WIDTH and 0 <= self.y < HEIGHT

    @property
    def is_wall(self) -> bool:
        return self.x == WALL_X


@dataclass
class Agent:
    """
    One side of the game.

    can_pick_up is set when a dead ball has landed on this agent's
    side and is waiting to be collected.
    """
    side: Side
    position: Position
    has_ball: bool = False
    can_pick_up: bool = False
    score: int = 0


@dataclass
class Flight:
    """A thrown ball travelling one column per tick along a fixed row."""
    thrower: Side
    direction: int
    x: int
    y: int

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def next_position(self) -> Position:
        return Position(self.x + self.direction, self.y)


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    All state changes go through the reducer.
    """
    player: Agent
    enemy: Agent
    ball: Position
    flight: Flight | None = None
    game_over: bool = False
    winner: Side | None = None

    # Count of successful actions, for logging/debugging
    turn_number: int = 0

    @classmethod
    def create(cls) -> GameState:
        """Fresh session: player empty-handed on the left, enemy holding the ball."""
        enemy_pos = Position(*ENEMY_START)
        return cls(
            player=Agent(side=Side.PLAYER, position=Position(*PLAYER_START)),
            enemy=Agent(side=Side.ENEMY, position=enemy_pos, has_ball=True),
            ball=enemy_pos,
        )

    @property
    def phase(self) -> GamePhase:
        if self.game_over:
            return GamePhase.GAME_OVER
        if self.flight is not None:
            return GamePhase.IN_FLIGHT
        return GamePhase.IDLE

    @property
    def ball_position(self) -> Position:
        """Where the ball is right now, in flight or not."""
        if self.flight is not None:
            return self.flight.position
        return self.ball

    @property
    def holder(self) -> Side | None:
        """Which side holds the ball, if any."""
        if self.player.has_ball:
            return Side.PLAYER
        if self.enemy.has_ball:
            return Side.ENEMY
        return None

    def agent(self, side: Side) -> Agent:
        return self.player if side is Side.PLAYER else self.enemy

    def opponent(self, side: Side) -> Agent:
        return self.agent(side.opponent)

    def occupant(self, pos: Position) -> Side | None:
        """Which agent stands on a cell."""
        for agent in (self.player, self.enemy):
            if agent.position == pos:
                return agent.side
        return None

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
