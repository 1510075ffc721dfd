"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure
- Rejected transitions are results, never exceptions
"""

from __future__ import annotations

from .state import GameState, Side, Flight, WINNING_SCORE
from .action import Action, ActionType, ActionResult, ErrorCode


class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState. The rules (grid size,
    wall column, winning score) are fixed constants of the state module.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        if state.game_over:
            return ActionResult.failure(
                "Game is over - no actions allowed", error_code=ErrorCode.GAME_OVER
            )

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=ErrorCode.NO_HANDLER,
            )

        result = handler(state, action)
        if result.success and result.new_state:
            result.new_state.turn_number += 1
        return result

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.MOVE: self._handle_move,
            ActionType.THROW: self._handle_throw,
            ActionType.ADVANCE_BALL: self._handle_advance_ball,
        }
        return handlers.get(action_type)

    def _handle_move(self, state: GameState, action: Action) -> ActionResult:
        """
        Handle a one-cell move for either side.

        A zero step is allowed: the agent holds position but the
        pickup check still runs.
        """
        side = action.payload.side
        dx, dy = action.payload.dx, action.payload.dy
        if side is None or dx not in (-1, 0, 1) or dy not in (-1, 0, 1) or (dx and dy):
            return ActionResult.failure(
                f"Invalid step ({dx}, {dy})", error_code=ErrorCode.INVALID_STEP
            )

        target = state.agent(side).position.step(dx, dy)
        if not target.in_bounds:
            return ActionResult.failure(
                f"{target} is outside the grid", error_code=ErrorCode.OUT_OF_BOUNDS
            )
        if target.is_wall:
            return ActionResult.failure(
                f"{target} is on the wall column", error_code=ErrorCode.WALL
            )

        new_state = state.clone()
        agent = new_state.agent(side)
        agent.position = target
        if agent.has_ball:
            new_state.ball = target

        changes = [f"{side.value} moved to ({target.x}, {target.y})"]
        picked_up = False
        if agent.can_pick_up and target == new_state.ball:
            agent.has_ball = True
            agent.can_pick_up = False
            picked_up = True
            changes.append(f"{side.value} picked up the ball")

        return ActionResult.success_with_state(new_state, changes=changes, picked_up=picked_up)

    def _handle_throw(self, state: GameState, action: Action) -> ActionResult:
        """Handle a throw: the ball leaves the hand before the first flight tick."""
        side = action.payload.side
        if side is None or not state.agent(side).has_ball:
            return ActionResult.failure(
                f"{side.value if side else 'nobody'} does not hold the ball",
                error_code=ErrorCode.NO_BALL,
            )
        if state.flight is not None:
            return ActionResult.failure(
                "A throw is already in flight", error_code=ErrorCode.BALL_IN_FLIGHT
            )

        new_state = state.clone()
        new_state.agent(side).has_ball = False
        new_state.flight = Flight(
            thrower=side,
            direction=side.throw_direction,
            x=new_state.ball.x,
            y=new_state.ball.y,
        )

        return ActionResult.success_with_state(
            new_state,
            changes=[f"{side.value} threw from ({new_state.ball.x}, {new_state.ball.y})"],
        )

    def _handle_advance_ball(self, state: GameState, action: Action) -> ActionResult:
        """
        Handle one flight tick.

        The flight ends when the next cell would leave the grid; the
        opponent of the thrower may then pick the dead ball up. A hit
        does not stop the ball unless it wins the game.
        """
        if state.flight is None:
            return ActionResult.failure("No ball in flight", error_code=ErrorCode.NO_FLIGHT)

        new_state = state.clone()
        flight = new_state.flight
        thrower = new_state.agent(flight.thrower)
        target = new_state.opponent(flight.thrower)

        if not flight.next_position.in_bounds:
            new_state.ball = flight.position
            new_state.flight = None
            target.can_pick_up = True
            return ActionResult.success_with_state(
                new_state,
                changes=[f"ball landed at ({flight.x}, {flight.y}) on the {target.side.value} side"],
                landed=True,
            )

        flight.x += flight.direction
        changes = [f"ball at ({flight.x}, {flight.y})"]

        hit = target.position == flight.position
        if hit:
            thrower.score += 1
            changes.append(f"{thrower.side.value} hit {target.side.value}")
            if thrower.score >= WINNING_SCORE:
                new_state.ball = flight.position
                new_state.flight = None
                new_state.game_over = True
                new_state.winner = thrower.side
                changes.append(f"{thrower.side.value} wins")

        return ActionResult.success_with_state(new_state, changes=changes, hit=hit)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)


def status_text(state: GameState) -> str:
    """Score line shown after every hit."""
    return (
        f"Score: Player {state.player.score}/{WINNING_SCORE}, "
        f"Enemy {state.enemy.score}/{WINNING_SCORE}"
    )


def outcome_text(winner: Side) -> str:
    """Terminal message naming the winner."""
    if winner is Side.PLAYER:
        return "Game Over! You win!"
    return "Game Over! You lose!"
