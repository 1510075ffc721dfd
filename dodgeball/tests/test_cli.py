"""
Tests for configuration, snapshots and the CLI.
"""

import argparse
import io
import json

import pytest
from pydantic import ValidationError

from ..cli import main, cmd_play
from ..config import GameConfig
from ..engine_core.state import GameState
from ..schemas import SessionSnapshot, snapshot_state


class TestGameConfig:
    """Tests for timer configuration."""

    def test_defaults(self):
        config = GameConfig()
        assert config.enemy_move_interval == 60
        assert config.enemy_throw_interval == 180
        assert config.flight_interval == 10
        assert config.seed is None

    def test_from_env(self):
        config = GameConfig.from_env({
            "DODGEBALL_ENEMY_MOVE_INTERVAL": "30",
            "DODGEBALL_SEED": "42",
            "DODGEBALL_FLIGHT_INTERVAL": "",
        })
        assert config.enemy_move_interval == 30
        assert config.seed == 42
        assert config.flight_interval == 10

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValidationError):
            GameConfig(flight_interval=0)

    def test_rejects_garbage_from_env(self):
        with pytest.raises(ValidationError):
            GameConfig.from_env({"DODGEBALL_ENEMY_THROW_INTERVAL": "soon"})


class TestSnapshot:
    """Tests for the JSON view."""

    def test_initial_snapshot(self):
        snapshot = snapshot_state(GameState.create(), status_text="hi")

        assert snapshot.phase.value == "idle"
        assert snapshot.enemy.has_ball
        assert snapshot.ball.direction is None
        assert snapshot.status_text == "hi"

    def test_round_trips_through_json(self):
        snapshot = snapshot_state(GameState.create())
        restored = SessionSnapshot.model_validate_json(snapshot.model_dump_json())
        assert restored == snapshot


class TestCli:
    """Tests for the command-line interface."""

    def test_simulate_json(self, capsys):
        assert main(["simulate", "--seed", "3", "--max-frames", "2000", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["player"]["side"] == "player"
        assert data["enemy"]["side"] == "enemy"
        assert data["frame"] <= 2000
        assert data["phase"] in {"idle", "in_flight", "game_over"}

    def test_simulate_summary(self, capsys):
        assert main(["simulate", "--seed", "3", "--max-frames", "200"]) == 0
        out = capsys.readouterr().out
        assert "Frames: 200" in out
        assert "Winner:" in out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_play_reads_commands(self):
        args = argparse.Namespace(seed=1, frames_per_command=1)
        stdin = io.StringIO("ddd\nq\n")
        stdout = io.StringIO()

        assert cmd_play(args, stdin=stdin, stdout=stdout) == 0

        # Two steps right, the third blocked by the wall
        assert ". . . P # " in stdout.getvalue()
