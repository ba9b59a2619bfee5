"""
Action Generator - Enumerates legal actions from a game state.

The action generator is used by:
1. Bots to enumerate possible moves
2. UI to show available actions
3. Tests (every generated action must be accepted)

Candidates are built from the state and filtered through the
reducer's own validation, so the two can never disagree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .action import Action, Attack, EndTurn, NextPhase, PlayCard, ResolvePrompt, StartGame
from .reducer import Reducer
from .state import GameState, Phase

if TYPE_CHECKING:
    from ..cards.registry import CardRegistry


@dataclass
class ActionGenerator:
    """Generates legal actions for one player."""
    reducer: Reducer

    def generate(self, state: GameState, player_id: str) -> list[Action]:
        """
        Generate every action `player_id` may submit right now.

        Returns fully-specified actions, none of which mutate `state`.
        """
        candidates = self._candidates(state, player_id)
        return [a for a in candidates if self.reducer.check(state, a) is None]

    def _candidates(self, state: GameState, player_id: str) -> list[Action]:
        if state.prompt is not None:
            return [
                ResolvePrompt(player_id=player_id, prompt_id=state.prompt.prompt_id, choice=c)
                for c in state.prompt.candidates
            ]

        if state.turn.phase == Phase.SETUP:
            return [StartGame()]

        player = state.players.get(player_id)
        if player is None:
            return []

        actions: list[Action] = []
        if state.turn.phase == Phase.MAIN:
            actions.extend(PlayCard(player_id=player_id, instance_id=i) for i in player.hand)

        if state.turn.phase == Phase.ATTACK and player.active is not None:
            definition = self.reducer.registry.get(state.get_card(player.active).card_id)
            if definition is not None:
                actions.extend(
                    Attack(player_id=player_id, attacker_id=player.active, move_id=m.move_id)
                    for m in definition.moves
                )

        actions.append(NextPhase(player_id=player_id))
        actions.append(EndTurn(player_id=player_id))
        return actions


def legal_actions(registry: CardRegistry, state: GameState, player_id: str) -> list[Action]:
    """
    Convenience function to get legal actions.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator(reducer=Reducer(registry=registry))
    return generator.generate(state, player_id)
