"""
Game Loop - Wires the engine to a host.

The loop:
1. init_session() draws the grid and starts the enemy timers
2. Keyboard input moves the player or throws
3. The enemy-move timer asks the policy for a step
4. The enemy-throw timer throws whenever the enemy holds the ball
5. Each throw runs a flight timer, one ball step per tick
6. A third hit ends the game and cancels every timer

Every transition goes through the reducer; rejected ones are no-ops.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from ..config import GameConfig
from ..engine_core.state import GameState, GamePhase, Side, WIDTH, HEIGHT
from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.reducer import Reducer, status_text, outcome_text
from ..bots.policy import ReactiveEnemyPolicy
from ..host.projection import GridProjection

if TYPE_CHECKING:
    from ..bots.policy import BotPolicy
    from ..host.adapter import HostAdapter

logger = logging.getLogger(__name__)


WELCOME_TEXT = "Press Space to throw a dodgeball!"

# Key name -> (dx, dy); arrows and WASD, either case
MOVE_KEYS = {
    "up": (0, -1),
    "w": (0, -1),
    "down": (0, 1),
    "s": (0, 1),
    "left": (-1, 0),
    "a": (-1, 0),
    "right": (1, 0),
    "d": (1, 0),
}
THROW_KEYS = {" ", "space"}


class GameLoop:
    """
    The dodgeball state machine bound to a host.

    Usage:
        host = TextHost(seed=1)
        loop = GameLoop(host)
        loop.init_session()

        loop.handle_key("d")      # player steps right
        loop.handle_key("space")  # player throws (if holding the ball)
        host.advance(60)          # enemy timers and flights run
    """

    def __init__(
        self,
        host: HostAdapter,
        config: GameConfig | None = None,
        enemy_policy: BotPolicy | None = None,
    ):
        self.host = host
        self.config = config or GameConfig()
        self.reducer = Reducer()
        self.state = GameState.create()
        self.projection = GridProjection(host)
        self.enemy_policy = enemy_policy or ReactiveEnemyPolicy(host.random_int)

        # Timer handles
        self.move_timer: int | None = None
        self.throw_timer: int | None = None
        self.flight_timer: int | None = None

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def init_session(self) -> None:
        """
        Draw the starting grid and start the enemy's timers.

        Calling it again restarts the game; timers from the previous
        run, including an active flight, are cancelled first.
        """
        self.stop()
        self.state = GameState.create()
        self.host.set_grid_dimensions(WIDTH, HEIGHT)
        self.projection.reset()
        self.projection.sync(self.state)
        self.host.set_status_text(WELCOME_TEXT)

        self.move_timer = self.host.start_periodic(
            self.config.enemy_move_interval, self.move_enemy
        )
        self.throw_timer = self.host.start_periodic(
            self.config.enemy_throw_interval, self.enemy_throw
        )
        logger.info("Session started")

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> ActionResult | None:
        """
        Map a key to a move or a throw.

        Unbound keys and any input after game over are ignored (None).
        """
        if self.state.game_over:
            return None
        name = key if key == " " else key.strip().lower()
        if name in MOVE_KEYS:
            return self.move_player(*MOVE_KEYS[name])
        if name in THROW_KEYS:
            return self.throw(Side.PLAYER)
        return None

    def move_player(self, dx: int, dy: int) -> ActionResult:
        return self._apply(Action.move(Side.PLAYER, dx, dy))

    def move_enemy(self) -> ActionResult | None:
        """Enemy-move timer callback."""
        if self.state.game_over:
            return None
        decision = self.enemy_policy.select_move(self.state)
        logger.debug("Enemy decision: %s", decision.explanation)
        return self._apply(Action.move(Side.ENEMY, decision.dx, decision.dy))

    def enemy_throw(self) -> ActionResult | None:
        """Enemy-throw timer callback."""
        if self.state.game_over:
            return None
        return self.throw(Side.ENEMY)

    def throw(self, side: Side) -> ActionResult:
        """Release the ball and start its flight timer."""
        result = self._apply(Action.throw(side))
        if result.success:
            self.flight_timer = self.host.start_periodic(
                self.config.flight_interval, self._advance_flight
            )
        return result

    def stop(self) -> None:
        """Cancel every timer this loop started."""
        for attr in ("move_timer", "throw_timer", "flight_timer"):
            handle = getattr(self, attr)
            if handle is not None:
                self.host.stop_periodic(handle)
                setattr(self, attr, None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _advance_flight(self) -> None:
        """Flight timer callback: one ball step."""
        result = self._apply(Action.advance_ball())
        if not result.success:
            self._stop_flight_timer()
            return

        if result.hit:
            self.host.set_status_text(status_text(self.state))

        if result.landed:
            self._stop_flight_timer()

        if self.state.game_over:
            self._end_game()

    def _end_game(self) -> None:
        self.stop()
        self.host.set_status_text(outcome_text(self.state.winner))
        logger.info(
            "Game over: %s wins (%d-%d)",
            self.state.winner.value,
            self.state.player.score,
            self.state.enemy.score,
        )

    def _stop_flight_timer(self) -> None:
        if self.flight_timer is not None:
            self.host.stop_periodic(self.flight_timer)
            self.flight_timer = None

    def _apply(self, action: Action) -> ActionResult:
        result = self.reducer.apply(self.state, action)
        if not result.success:
            logger.debug(
                "Rejected %s: %s (%s)",
                action.action_type.value,
                result.error,
                result.error_code.value if result.error_code else "-",
            )
            return result

        self.state = result.new_state
        self.projection.sync(self.state)
        notable = (
            result.hit
            or result.landed
            or result.picked_up
            or action.action_type is ActionType.THROW
        )
        level = logging.INFO if notable else logging.DEBUG
        for change in result.state_changes:
            logger.log(level, change)
        return result
