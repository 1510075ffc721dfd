"""
Bots module - Agent decision policies.

Provides:
- BotPolicy: Interface for bot decision-making
- ReactiveEnemyPolicy: The enemy's heuristic
- RandomWalkPolicy: Wandering player for headless runs
"""

from .policy import BotPolicy, BotDecision, ReactiveEnemyPolicy, RandomWalkPolicy

__all__ = [
    "BotPolicy",
    "BotDecision",
    "ReactiveEnemyPolicy",
    "RandomWalkPolicy",
]
