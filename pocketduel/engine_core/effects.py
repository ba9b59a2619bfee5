"""
Effects - Internal instructions queued against the game state.

Effects are produced by the reducer (from actions) and by card
definitions, and consumed one at a time by the EffectResolver.
They are never accepted from outside the engine.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .state import Phase, Prompt, TargetRef, Zone


@dataclass(frozen=True)
class Draw:
    """Move up to `count` cards from the top of a deck to hand."""
    player_id: str
    count: int


@dataclass(frozen=True)
class MoveCard:
    """Move an instance from wherever it is to `to`."""
    instance_id: str
    to: Zone


@dataclass(frozen=True)
class DealDamage:
    source: TargetRef
    target: TargetRef
    amount: int


@dataclass(frozen=True)
class Heal:
    target: TargetRef
    amount: int


@dataclass(frozen=True)
class SetPhase:
    phase: Phase


@dataclass(frozen=True)
class CreatePrompt:
    """Install a prompt and suspend resolution."""
    prompt: Prompt


@dataclass(frozen=True)
class ClearPrompt:
    prompt_id: str


@dataclass(frozen=True)
class AdvanceTurn:
    """Rotate to the next player and bump the turn number."""


Effect = Union[
    Draw,
    MoveCard,
    DealDamage,
    Heal,
    SetPhase,
    CreatePrompt,
    ClearPrompt,
    AdvanceTurn,
]
