"""
Tests for the host boundary.

Tests:
- FrameScheduler ordering and cancellation
- Projection pushes only changed cells
- TextHost rendering and randomness
"""

import pytest

from ..engine_core.action import Action
from ..engine_core.reducer import apply_action
from ..engine_core.state import GameState, Position, Side
from ..host import FrameScheduler, GridProjection, TextHost, Color, cell_appearance
from .conftest import make_state


class TestFrameScheduler:
    """Tests for the periodic timer primitive."""

    def test_fires_on_interval(self):
        scheduler = FrameScheduler()
        fired = []
        scheduler.start(3, lambda: fired.append(scheduler.frame))

        scheduler.advance(10)

        assert fired == [3, 6, 9]

    def test_fires_in_start_order(self):
        scheduler = FrameScheduler()
        order = []
        scheduler.start(2, lambda: order.append("a"))
        scheduler.start(2, lambda: order.append("b"))

        scheduler.advance(2)

        assert order == ["a", "b"]

    def test_stop_cancels(self):
        scheduler = FrameScheduler()
        fired = []
        handle = scheduler.start(1, lambda: fired.append(1))
        scheduler.advance(2)
        scheduler.stop(handle)
        scheduler.advance(5)

        assert fired == [1, 1]
        assert not scheduler.is_active(handle)

    def test_stopped_during_frame_does_not_fire(self):
        scheduler = FrameScheduler()
        fired = []
        second = None

        def first():
            scheduler.stop(second)

        scheduler.start(1, first)
        second = scheduler.start(1, lambda: fired.append("second"))
        scheduler.advance(3)

        assert fired == []

    def test_started_during_frame_waits_full_interval(self):
        scheduler = FrameScheduler()
        fired = []

        def spawn():
            scheduler.start(2, lambda: fired.append(scheduler.frame))

        handle = scheduler.start(1, spawn)
        scheduler.advance(1)
        scheduler.stop(handle)
        scheduler.advance(4)

        assert fired == [3, 5]

    def test_stop_unknown_handle_is_ignored(self):
        FrameScheduler().stop(99)

    @pytest.mark.parametrize("interval", [0, -5])
    def test_rejects_non_positive_interval(self, interval):
        with pytest.raises(ValueError):
            FrameScheduler().start(interval, lambda: None)


class TestProjection:
    """Tests for state -> cell appearance."""

    def test_appearance(self, initial_state):
        assert cell_appearance(initial_state, Position(4, 0)).color == Color.WALL
        assert cell_appearance(initial_state, Position(0, 0)).color == Color.FLOOR
        enemy_cell = cell_appearance(initial_state, Position(7, 4))
        assert enemy_cell.color == Color.ENEMY
        assert enemy_cell.glyph == "o"

    def test_ball_in_flight_over_wall(self):
        state = make_state(player=(3, 4), holder=Side.PLAYER, enemy=(8, 0))
        state = apply_action(state, Action.throw(Side.PLAYER)).new_state
        state = apply_action(state, Action.advance_ball()).new_state

        look = cell_appearance(state, Position(4, 4))
        assert look.color == Color.WALL
        assert look.glyph == "o"
        assert cell_appearance(state, Position(3, 4)).glyph == ""

    def test_sync_draws_only_changes(self, initial_state):
        host = TextHost()
        host.set_grid_dimensions(9, 9)
        projection = GridProjection(host)

        assert projection.sync(initial_state) == 81
        assert projection.sync(initial_state) == 0

        moved = apply_action(initial_state, Action.move(Side.PLAYER, 0, 1)).new_state
        assert projection.sync(moved) == 2

    def test_reset_redraws_everything(self, initial_state):
        host = TextHost()
        host.set_grid_dimensions(9, 9)
        projection = GridProjection(host)
        projection.sync(initial_state)

        projection.reset()
        assert projection.sync(initial_state) == 81


class TestTextHost:
    """Tests for the in-memory host."""

    def test_render(self, loop, host):
        lines = host.render().splitlines()

        assert len(lines) == 10
        assert lines[4].split() == [".", "P", ".", ".", "#", ".", ".", "e", "."]
        assert lines[0].split()[4] == "#"
        assert lines[-1] == "Press Space to throw a dodgeball!"

    def test_render_resting_ball(self):
        host = TextHost()
        host.set_grid_dimensions(3, 1)
        host.set_cell_glyph(1, 0, "o")
        assert host.render() == ". o ."

    def test_clearing_glyph_clears_its_color(self):
        host = TextHost()
        host.set_grid_dimensions(2, 1)
        host.set_cell_glyph(0, 0, "o")
        host.set_glyph_color(0, 0, Color.BALL)

        host.set_cell_glyph(0, 0, "")

        assert host.cell(0, 0).glyph_color is None

    def test_random_int_range(self):
        host = TextHost(seed=5)
        rolls = {host.random_int(5) for _ in range(200)}
        assert rolls == {1, 2, 3, 4, 5}

    def test_seeded_hosts_agree(self):
        a, b = TextHost(seed=11), TextHost(seed=11)
        assert [a.random_int(4) for _ in range(10)] == [b.random_int(4) for _ in range(10)]

    def test_timers_run_through_host(self):
        host = TextHost()
        fired = []
        handle = host.start_periodic(5, lambda: fired.append(1))
        host.advance(10)
        host.stop_periodic(handle)
        host.advance(10)
        assert fired == [1, 1]
