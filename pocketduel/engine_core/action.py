"""
Action System - Actions and results.

Actions are the only input the engine accepts from outside.
Each variant carries the minimum fields needed to validate and
translate it. Results separate three outcomes:
1. Accepted - effects were resolved, events describe the delta
2. Rejected - a rule was broken, state is untouched
3. Fatal - the state itself is corrupt, the match should be aborted
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from .state import TargetRef
from .events import ActionRejected, GameEvent

if TYPE_CHECKING:
    from .state import GameState


class ActionType(Enum):
    """Types of actions in the system."""
    START_GAME = "START_GAME"
    END_TURN = "END_TURN"
    PLAY_CARD = "PLAY_CARD"
    ATTACK = "ATTACK"
    RESOLVE_PROMPT = "RESOLVE_PROMPT"
    NEXT_PHASE = "NEXT_PHASE"


@dataclass(frozen=True)
class StartGame:
    @property
    def action_type(self) -> ActionType:
        return ActionType.START_GAME


@dataclass(frozen=True)
class EndTurn:
    player_id: str

    @property
    def action_type(self) -> ActionType:
        return ActionType.END_TURN


@dataclass(frozen=True)
class PlayCard:
    player_id: str
    instance_id: str

    @property
    def action_type(self) -> ActionType:
        return ActionType.PLAY_CARD


@dataclass(frozen=True)
class Attack:
    player_id: str
    attacker_id: str
    move_id: str

    @property
    def action_type(self) -> ActionType:
        return ActionType.ATTACK


@dataclass(frozen=True)
class ResolvePrompt:
    player_id: str
    prompt_id: str
    choice: TargetRef

    @property
    def action_type(self) -> ActionType:
        return ActionType.RESOLVE_PROMPT


@dataclass(frozen=True)
class NextPhase:
    """Advance the active player's turn to its next phase."""
    player_id: str

    @property
    def action_type(self) -> ActionType:
        return ActionType.NEXT_PHASE


Action = Union[StartGame, EndTurn, PlayCard, Attack, ResolvePrompt, NextPhase]


class ResultKind(Enum):
    """Outcome of applying an action."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FATAL = "fatal"


@dataclass
class ActionResult:
    """
    Result of applying an action.

    `state` is always present. For REJECTED and FATAL it is the
    very object that was passed in, unchanged.
    """
    kind: ResultKind
    state: GameState
    events: list[GameEvent] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.kind == ResultKind.ACCEPTED

    @classmethod
    def accepted(cls, state: GameState, events: list[GameEvent]) -> ActionResult:
        """Create an accepted result with the new state."""
        return cls(kind=ResultKind.ACCEPTED, state=state, events=events)

    @classmethod
    def rejected(cls, state: GameState, reason: str) -> ActionResult:
        """Create a rejection carrying a single ActionRejected event."""
        return cls(
            kind=ResultKind.REJECTED,
            state=state,
            events=[ActionRejected(reason=reason)],
            error=reason,
        )

    @classmethod
    def fatal(cls, state: GameState, error: str) -> ActionResult:
        """Create an unrecoverable-state result."""
        return cls(kind=ResultKind.FATAL, state=state, error=error)
