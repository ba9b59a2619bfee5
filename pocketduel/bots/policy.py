"""
Bot Policy - Pick one action from the legal actions for a seat.

Prompt answers are ordinary RESOLVE_PROMPT actions, so a single
`select_action` covers both turn play and prompt resolution.
"""

from __future__ import annotations
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine_core.action import Attack, NextPhase, PlayCard, ResolvePrompt
from ..engine_core.state import CardType

if TYPE_CHECKING:
    from ..cards.registry import CardRegistry
    from ..engine_core.action import Action
    from ..engine_core.state import GameState


@dataclass
class BotDecision:
    """The chosen action and a short reason for the logs."""
    action: Action
    reason: str = ""


class BotPolicy(ABC):

    @abstractmethod
    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        """Choose from `legal_actions`, which must not be empty."""


class RandomPolicy(BotPolicy):
    """Uniform choice from a private seeded generator."""

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")
        action = self.rng.choice(legal_actions)
        return BotDecision(action=action, reason=f"random pick of {len(legal_actions)}")


class GreedyPolicy(BotPolicy):
    """
    Scores each legal action from the card registry and takes the best.

    Order of preference:
    1. Answer an outstanding prompt, hitting the most damaged target
    2. Attack with the strongest move
    3. Fill an empty ACTIVE slot, then the bench
    4. Potion on a damaged active, then other trainers
    5. Advance the phase, and only then end the turn

    Ties go to the earliest action in the list.
    """

    def __init__(self, registry: CardRegistry):
        self.registry = registry

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        best = max(legal_actions, key=lambda a: self.score(state, a))
        return BotDecision(action=best, reason=f"score {self.score(state, best)}")

    def score(self, state: GameState, action: Action) -> int:
        if isinstance(action, ResolvePrompt):
            return 1000 + state.get_card(action.choice.instance_id).damage_counters
        if isinstance(action, Attack):
            definition = self.registry[state.get_card(action.attacker_id).card_id]
            return 500 + definition.get_move(action.move_id).damage
        if isinstance(action, PlayCard):
            return self._score_play(state, action)
        if isinstance(action, NextPhase):
            return 1
        # END_TURN and START_GAME
        return 0

    def _score_play(self, state: GameState, action: PlayCard) -> int:
        definition = self.registry[state.get_card(action.instance_id).card_id]
        player = state.get_player(action.player_id)

        if definition.card_type == CardType.POKEMON:
            return 300 if player.active is None else 200 + (definition.hp or 0) // 10
        if definition.on_play is not None:
            active = state.get_card(player.active) if player.active else None
            if active is not None and active.damage_counters > 0:
                return 150
            return 5
        # No effect: discarding it only thins the hand
        return 2


def create_policy(name: str, registry: CardRegistry, seed: int | None = None) -> BotPolicy:
    """Build a policy by its CLI name."""
    if name == "greedy":
        return GreedyPolicy(registry)
    if name == "random":
        return RandomPolicy(seed)
    raise ValueError(f"Unknown policy: {name}")


POLICIES = ("greedy", "random")
