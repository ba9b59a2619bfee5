"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- GreedyPolicy: Registry-aware scoring policy
- RandomPolicy: Seeded baseline
"""

from .policy import POLICIES, BotDecision, BotPolicy, GreedyPolicy, RandomPolicy, create_policy

__all__ = [
    "BotPolicy",
    "BotDecision",
    "GreedyPolicy",
    "RandomPolicy",
    "create_policy",
    "POLICIES",
]
