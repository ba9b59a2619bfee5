"""
Pocket Duel - Turn-based card battle rules engine

A deterministic, single-writer engine for two-player card battles.
The engine accepts one action at a time and provides:
- Action validation and translation into internal effects
- Step-by-step effect resolution with player prompts
- Per-player redacted views of the canonical state
- Reproducible randomness seeded inside the game state
"""

__version__ = "0.1.0"
