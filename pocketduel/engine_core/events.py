"""
Events - Externally observable record of what changed.

Exactly one event is emitted per applied effect, in application
order, plus ActionRejected for refused actions. A batch returned
by one apply call is the authoritative delta for that call.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .state import Phase, Prompt, TargetRef, Zone


class EventType(Enum):
    """Wire tags for events."""
    PHASE_CHANGED = "PHASE_CHANGED"
    CARD_MOVED = "CARD_MOVED"
    DAMAGE_DEALT = "DAMAGE_DEALT"
    HEALED = "HEALED"
    PROMPT_CREATED = "PROMPT_CREATED"
    PROMPT_CLEARED = "PROMPT_CLEARED"
    TURN_ADVANCED = "TURN_ADVANCED"
    ACTION_REJECTED = "ACTION_REJECTED"


@dataclass(frozen=True)
class PhaseChanged:
    phase: Phase

    @property
    def event_type(self) -> EventType:
        return EventType.PHASE_CHANGED


@dataclass(frozen=True)
class CardMoved:
    instance_id: str
    from_zone: Zone
    to_zone: Zone

    @property
    def event_type(self) -> EventType:
        return EventType.CARD_MOVED


@dataclass(frozen=True)
class DamageDealt:
    source: TargetRef
    target: TargetRef
    amount: int

    @property
    def event_type(self) -> EventType:
        return EventType.DAMAGE_DEALT


@dataclass(frozen=True)
class Healed:
    target: TargetRef
    amount: int

    @property
    def event_type(self) -> EventType:
        return EventType.HEALED


@dataclass(frozen=True)
class PromptCreated:
    prompt: Prompt

    @property
    def event_type(self) -> EventType:
        return EventType.PROMPT_CREATED


@dataclass(frozen=True)
class PromptCleared:
    prompt_id: str

    @property
    def event_type(self) -> EventType:
        return EventType.PROMPT_CLEARED


@dataclass(frozen=True)
class TurnAdvanced:
    active_player_id: str
    turn_number: int

    @property
    def event_type(self) -> EventType:
        return EventType.TURN_ADVANCED


@dataclass(frozen=True)
class ActionRejected:
    """An action failed validation. Carries a human-readable reason."""
    reason: str

    @property
    def event_type(self) -> EventType:
        return EventType.ACTION_REJECTED


GameEvent = Union[
    PhaseChanged,
    CardMoved,
    DamageDealt,
    Healed,
    PromptCreated,
    PromptCleared,
    TurnAdvanced,
    ActionRejected,
]
