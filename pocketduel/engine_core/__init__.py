"""
Engine Core - Deterministic game state management and effect resolution.

The engine is the runtime that:
1. Validates one external action against the GameState
2. Translates it into internal effects
3. Resolves effects step-by-step, pausing on prompts
4. Emits one event per applied effect
5. Projects redacted per-player views
"""

from .state import (
    CardInstance,
    CardType,
    Continuation,
    ContinuationKind,
    GameState,
    Phase,
    PlayerState,
    Prompt,
    PromptKind,
    RNGState,
    Status,
    TargetRef,
    TurnState,
    Zone,
)
from .errors import InvariantViolation
from .action import (
    Action,
    ActionResult,
    ActionType,
    Attack,
    EndTurn,
    NextPhase,
    PlayCard,
    ResolvePrompt,
    ResultKind,
    StartGame,
)
from .effect_resolver import EffectResolver, ResolverState, resolver_state
from .reducer import Reducer, apply_action
from .action_generator import ActionGenerator, legal_actions
from .game_setup import create_game
from .view import HIDDEN_CARD, view_for_player
from .rng import rand01

__all__ = [
    "CardInstance",
    "CardType",
    "Continuation",
    "ContinuationKind",
    "GameState",
    "Phase",
    "PlayerState",
    "Prompt",
    "PromptKind",
    "RNGState",
    "Status",
    "TargetRef",
    "TurnState",
    "Zone",
    "InvariantViolation",
    "Action",
    "ActionResult",
    "ActionType",
    "Attack",
    "EndTurn",
    "NextPhase",
    "PlayCard",
    "ResolvePrompt",
    "ResultKind",
    "StartGame",
    "EffectResolver",
    "ResolverState",
    "resolver_state",
    "Reducer",
    "apply_action",
    "ActionGenerator",
    "legal_actions",
    "create_game",
    "HIDDEN_CARD",
    "view_for_player",
    "rand01",
]
