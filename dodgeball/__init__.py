"""
Dodgeball - Two-agent grid dodgeball engine

A player and an enemy share a 9x9 grid split by a wall column and
throw a single ball at each other. The package provides:
- The game state machine (possession, flights, hits, win/loss)
- The enemy's reactive policy
- A host boundary for rendering and timers, with an in-memory text host
- A terminal CLI
"""

__version__ = "0.1.0"
