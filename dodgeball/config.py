"""
Configuration - Host cadence and randomness.

The rules themselves (grid size, wall, winning score) are fixed;
only the timer intervals and the seed are configurable.

Environment variables:
    DODGEBALL_ENEMY_MOVE_INTERVAL   frames between enemy moves (default 60)
    DODGEBALL_ENEMY_THROW_INTERVAL  frames between enemy throw attempts (default 180)
    DODGEBALL_FLIGHT_INTERVAL       frames per ball step (default 10)
    DODGEBALL_SEED                  random seed (default: unseeded)
"""

from __future__ import annotations
import os
from typing import Optional

from pydantic import BaseModel, Field


ENV_PREFIX = "DODGEBALL_"


class GameConfig(BaseModel):
    """Timer cadence in host frames, plus the random seed."""
    enemy_move_interval: int = Field(60, gt=0, description="Frames between enemy moves")
    enemy_throw_interval: int = Field(180, gt=0, description="Frames between enemy throw attempts")
    flight_interval: int = Field(10, gt=0, description="Frames per ball step")
    seed: Optional[int] = Field(None, description="Seed for the host random generator")

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "GameConfig":
        """Build a config from DODGEBALL_* variables; unset ones keep defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw not in (None, ""):
                values[name] = raw
        return cls(**values)
