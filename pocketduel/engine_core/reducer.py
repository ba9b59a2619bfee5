"""
Reducer - Validates actions and translates them into effects.

The reducer is the single entry point for state changes.
All state changes must go through apply_action().

Design principles:
- Validation order is fixed: prompt gate, turn, phase, ownership,
  zone, definition, targets
- A rejected action never mutates state
- Translation-time checks make every enqueued effect applicable
- Invariant violations surface as FATAL results, not exceptions
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, TYPE_CHECKING

from .action import (
    Action, ActionResult, Attack, EndTurn, NextPhase, PlayCard,
    ResolvePrompt, StartGame,
)
from .effect_resolver import EffectResolver
from .effects import (
    AdvanceTurn, ClearPrompt, CreatePrompt, DealDamage, Draw, Effect,
    MoveCard, SetPhase,
)
from .errors import InvariantViolation
from .state import (
    CardType, Continuation, ContinuationKind, GameState, Phase, Prompt,
    TargetRef, Zone,
)

if TYPE_CHECKING:
    from ..cards.registry import CardRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rejection:
    """A rule violation found during translation."""
    reason: str


Translation = list[Effect] | Rejection


# Phase progression driven by NEXT_PHASE
_NEXT_PHASE = {
    Phase.DRAW: Phase.MAIN,
    Phase.MAIN: Phase.ATTACK,
    Phase.ATTACK: Phase.END,
}


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    The registry provides card behaviour for validation and translation.
    """
    registry: CardRegistry
    opening_hand_size: int = 0
    resolver: EffectResolver = field(default_factory=EffectResolver)

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Accepted actions are resolved on a copy, which becomes the
        result state. Rejected and fatal results hand back the
        original state object untouched.
        """
        working = state.clone()
        try:
            translation = self._translate(working, action)
            if isinstance(translation, Rejection):
                logger.info(f"Rejected {action.action_type.value}: {translation.reason}")
                return ActionResult.rejected(state, translation.reason)

            if isinstance(action, ResolvePrompt):
                # Resumption runs ahead of anything frozen behind the prompt
                working.effect_queue[:0] = translation
            else:
                working.effect_queue.extend(translation)

            events = self.resolver.resolve(working)
        except InvariantViolation as e:
            logger.error(f"Invariant violated in game {state.game_id}: {e.message}")
            return ActionResult.fatal(state, e.message)

        working.history.extend(events)
        logger.info(
            f"Applied {action.action_type.value} in game {state.game_id}: "
            f"{len(events)} event(s)"
        )
        return ActionResult.accepted(working, events)

    def check(self, state: GameState, action: Action) -> str | None:
        """
        Validate an action without applying it.

        Returns the rejection reason, or None if the action is legal.
        An action that would end FATAL is reported by its violation
        message, so callers enumerating actions never see it raise.
        """
        try:
            translation = self._translate(state.clone(), action)
        except InvariantViolation as e:
            logger.error(f"Invariant violated while checking {action.action_type.value}: {e.message}")
            return e.message
        if isinstance(translation, Rejection):
            return translation.reason
        return None

    def _translate(self, state: GameState, action: Action) -> Translation:
        """Validate an action and turn it into initial effects."""
        # If a prompt exists, only the prompted player may answer it
        if state.prompt is not None:
            if not isinstance(action, ResolvePrompt):
                return Rejection("A prompt is awaiting resolution.")
            if action.player_id != state.prompt.player_id:
                return Rejection("Only the prompted player may respond.")

        handler = self._get_handler(action)
        return handler(state, action)

    def _get_handler(self, action: Action) -> Callable[[GameState, Action], Translation]:
        """Get the handler function for an action type."""
        handlers = {
            StartGame: self._handle_start_game,
            EndTurn: self._handle_end_turn,
            PlayCard: self._handle_play_card,
            Attack: self._handle_attack,
            ResolvePrompt: self._handle_resolve_prompt,
            NextPhase: self._handle_next_phase,
        }
        handler = handlers.get(type(action))
        if handler is None:
            raise TypeError(f"No handler for action type: {type(action).__name__}")
        return handler

    def _handle_start_game(self, state: GameState, action: StartGame) -> Translation:
        if state.turn.phase != Phase.SETUP:
            return Rejection("Game already started.")

        effects: list[Effect] = []
        if self.opening_hand_size > 0:
            for player_id in state.player_ids:
                effects.append(Draw(player_id=player_id, count=self.opening_hand_size))
        effects.append(SetPhase(phase=Phase.DRAW))
        return effects

    def _handle_end_turn(self, state: GameState, action: EndTurn) -> Translation:
        if not _is_players_turn(state, action.player_id):
            return Rejection("Not your turn.")
        if state.turn.phase == Phase.SETUP:
            return Rejection("Game has not started.")
        return [AdvanceTurn(), SetPhase(phase=Phase.DRAW)]

    def _handle_next_phase(self, state: GameState, action: NextPhase) -> Translation:
        if not _is_players_turn(state, action.player_id):
            return Rejection("Not your turn.")

        phase = state.turn.phase
        if phase == Phase.SETUP:
            return Rejection("Game has not started.")
        if phase == Phase.END:
            return Rejection("Turn is over; end your turn.")

        next_phase = _NEXT_PHASE.get(phase)
        if next_phase is None:
            return Rejection(f"Cannot advance from {phase.value} phase.")

        effects: list[Effect] = []
        if phase == Phase.DRAW:
            effects.append(Draw(player_id=action.player_id, count=1))
        effects.append(SetPhase(phase=next_phase))
        return effects

    def _handle_play_card(self, state: GameState, action: PlayCard) -> Translation:
        """
        Play a card from hand.

        - Pokémon go to ACTIVE if the slot is empty, else BENCH
        - Trainers apply their on-play effects, then are discarded
        """
        if not _is_players_turn(state, action.player_id):
            return Rejection("Not your turn.")
        if state.turn.phase != Phase.MAIN:
            return Rejection("You can only play cards during MAIN phase.")

        card = state.get_card(action.instance_id)
        if card.owner_id != action.player_id:
            return Rejection("You do not own that card.")
        if card.zone != Zone.HAND:
            return Rejection("That card is not in your hand.")

        definition = self.registry.get(card.card_id)
        if definition is None:
            return Rejection("Unknown card definition.")

        player = state.get_player(action.player_id)

        if definition.card_type == CardType.POKEMON:
            to_zone = Zone.BENCH if player.active is not None else Zone.ACTIVE
            return [MoveCard(instance_id=card.instance_id, to=to_zone)]

        if definition.card_type == CardType.TRAINER:
            source = TargetRef(instance_id=card.instance_id)
            discard = MoveCard(instance_id=card.instance_id, to=Zone.DISCARD)
            if definition.on_play is None:
                return [discard]
            if definition.can_play is not None:
                reason = definition.can_play(state, source)
                if reason:
                    return Rejection(reason)
            return [*definition.on_play(state, source), discard]

        return Rejection("Cannot play this card type yet.")

    def _handle_attack(self, state: GameState, action: Attack) -> Translation:
        """
        Declare an attack.

        Damage is not dealt here: a CHOOSE_TARGET prompt is created
        and its continuation carries the pending damage.
        """
        if not _is_players_turn(state, action.player_id):
            return Rejection("Not your turn.")
        if state.turn.phase != Phase.ATTACK:
            return Rejection("You can only attack during ATTACK phase.")

        attacker = state.get_card(action.attacker_id)
        if attacker.owner_id != action.player_id:
            return Rejection("You do not own that attacker.")
        if attacker.zone != Zone.ACTIVE:
            return Rejection("Only your ACTIVE Pokémon can attack.")

        definition = self.registry.get(attacker.card_id)
        move = definition.get_move(action.move_id) if definition else None
        if move is None:
            return Rejection("Unknown move.")

        opponent = state.get_player(_other_player_id(state, action.player_id))
        if opponent.active is None:
            return Rejection("Opponent has no active Pokémon.")

        attacker_ref = TargetRef(instance_id=attacker.instance_id)
        prompt = Prompt(
            prompt_id=state.create_id("prompt"),
            player_id=action.player_id,
            message="Choose an opponent Pokémon to attack.",
            candidates=(TargetRef(instance_id=opponent.active),),
            continuation=Continuation(
                kind=ContinuationKind.ATTACK_DAMAGE,
                source=attacker_ref,
                damage=move.damage,
            ),
        )
        return [*move.effects(state, attacker_ref), CreatePrompt(prompt=prompt)]

    def _handle_resolve_prompt(self, state: GameState, action: ResolvePrompt) -> Translation:
        prompt = state.prompt
        if prompt is None:
            return Rejection("No prompt to resolve.")
        if prompt.prompt_id != action.prompt_id:
            return Rejection("Prompt id mismatch.")
        if action.choice not in prompt.candidates:
            return Rejection("Invalid choice.")

        effects: list[Effect] = [ClearPrompt(prompt_id=prompt.prompt_id)]
        continuation = prompt.continuation
        if continuation.kind in (ContinuationKind.ATTACK_DAMAGE, ContinuationKind.CARD_EFFECT_DAMAGE):
            effects.append(DealDamage(
                source=continuation.source,
                target=action.choice,
                amount=continuation.damage,
            ))
            effects.append(SetPhase(phase=Phase.END))
        return effects


def _is_players_turn(state: GameState, player_id: str) -> bool:
    return state.turn.active_player_id == player_id


def _other_player_id(state: GameState, player_id: str) -> str:
    """The single opponent of `player_id`."""
    others = [pid for pid in state.player_ids if pid != player_id]
    if len(others) != 1:
        raise InvariantViolation(f"Expected exactly one opponent, found {len(others)}")
    return others[0]


def apply_action(registry: CardRegistry, state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(registry=registry)
    return reducer.apply(state, action)
