"""
Effect Resolver - Drains the effect queue one effect at a time.

The resolver:
- Applies queued effects strictly in FIFO order
- Emits exactly one event per applied effect
- Suspends as soon as a prompt is installed

While a prompt is outstanding the queue is frozen: the only effect
that may run is a CLEAR_PROMPT sitting at the head of the queue.
All waiting is represented in GameState, never as a suspended call.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .effects import (
    AdvanceTurn, ClearPrompt, CreatePrompt, DealDamage, Draw, Effect,
    Heal, MoveCard, SetPhase,
)
from .errors import InvariantViolation
from .events import (
    CardMoved, DamageDealt, GameEvent, Healed, PhaseChanged,
    PromptCleared, PromptCreated, TurnAdvanced,
)
from .state import GameState, Zone
from .zones import move_instance

logger = logging.getLogger(__name__)


class ResolverState(Enum):
    """Prompt state machine."""
    IDLE = "idle"  # No prompt, resolver may drain freely
    AWAITING_CHOICE = "awaiting_choice"  # Prompt installed, queue frozen


def resolver_state(state: GameState) -> ResolverState:
    if state.prompt is None:
        return ResolverState.IDLE
    return ResolverState.AWAITING_CHOICE


@dataclass
class EffectResolver:
    """
    Applies effects to a game state.

    Stateless - the queue and the prompt live in GameState.
    """

    def resolve(self, state: GameState) -> list[GameEvent]:
        """
        Drain the queue until it is empty or a prompt suspends it.

        Returns the events emitted, in application order.
        """
        events: list[GameEvent] = []
        while state.effect_queue:
            if state.prompt is not None and not isinstance(state.effect_queue[0], ClearPrompt):
                logger.debug(
                    f"Resolution suspended on prompt {state.prompt.prompt_id}, "
                    f"{len(state.effect_queue)} effect(s) frozen"
                )
                break
            effect = state.effect_queue.pop(0)
            self.apply_effect(state, effect, events)
        return events

    def apply_effect(self, state: GameState, effect: Effect, events: list[GameEvent]) -> None:
        """Apply a single effect and record its event."""
        handler = self._get_handler(effect)
        logger.debug(f"Applying {type(effect).__name__}")
        handler(state, effect, events)

    def _get_handler(self, effect: Effect) -> Callable[[GameState, Effect, list[GameEvent]], None]:
        handlers = {
            SetPhase: self._apply_set_phase,
            Draw: self._apply_draw,
            MoveCard: self._apply_move_card,
            DealDamage: self._apply_deal_damage,
            Heal: self._apply_heal,
            CreatePrompt: self._apply_create_prompt,
            ClearPrompt: self._apply_clear_prompt,
            AdvanceTurn: self._apply_advance_turn,
        }
        handler = handlers.get(type(effect))
        if handler is None:
            raise TypeError(f"No handler for effect type: {type(effect).__name__}")
        return handler

    def _apply_set_phase(self, state: GameState, effect: SetPhase, events: list[GameEvent]) -> None:
        state.turn.phase = effect.phase
        events.append(PhaseChanged(phase=effect.phase))

    def _apply_draw(self, state: GameState, effect: Draw, events: list[GameEvent]) -> None:
        """Draw from the top of the deck, stopping quietly when it runs out."""
        player = state.get_player(effect.player_id)
        for _ in range(effect.count):
            if not player.deck:
                break
            top = player.deck.pop(0)
            player.hand.append(top)
            state.get_card(top).zone = Zone.HAND
            events.append(CardMoved(instance_id=top, from_zone=Zone.DECK, to_zone=Zone.HAND))

    def _apply_move_card(self, state: GameState, effect: MoveCard, events: list[GameEvent]) -> None:
        from_zone = state.zone_of(effect.instance_id)
        move_instance(state, effect.instance_id, from_zone, effect.to)
        events.append(CardMoved(instance_id=effect.instance_id, from_zone=from_zone, to_zone=effect.to))

    def _apply_deal_damage(self, state: GameState, effect: DealDamage, events: list[GameEvent]) -> None:
        target = state.get_card(effect.target.instance_id)
        # No cap: knock-outs are not modelled yet
        target.damage_counters += effect.amount
        events.append(DamageDealt(source=effect.source, target=effect.target, amount=effect.amount))

    def _apply_heal(self, state: GameState, effect: Heal, events: list[GameEvent]) -> None:
        target = state.get_card(effect.target.instance_id)
        target.damage_counters = max(0, target.damage_counters - effect.amount)
        events.append(Healed(target=effect.target, amount=effect.amount))

    def _apply_create_prompt(self, state: GameState, effect: CreatePrompt, events: list[GameEvent]) -> None:
        if state.prompt is not None:
            raise InvariantViolation(
                f"Prompt {state.prompt.prompt_id} is still outstanding, "
                f"cannot create {effect.prompt.prompt_id}"
            )
        state.prompt = effect.prompt
        events.append(PromptCreated(prompt=effect.prompt))

    def _apply_clear_prompt(self, state: GameState, effect: ClearPrompt, events: list[GameEvent]) -> None:
        # Stale clears are ignored
        if state.prompt is None or state.prompt.prompt_id != effect.prompt_id:
            return
        state.prompt = None
        events.append(PromptCleared(prompt_id=effect.prompt_id))

    def _apply_advance_turn(self, state: GameState, effect: AdvanceTurn, events: list[GameEvent]) -> None:
        ids = state.player_ids
        if len(ids) < 2:
            raise InvariantViolation(f"Cannot rotate turns with {len(ids)} player(s)")
        if state.turn.active_player_id not in ids:
            raise InvariantViolation(f"Missing PlayerState for {state.turn.active_player_id}")
        idx = ids.index(state.turn.active_player_id)
        next_player = ids[(idx + 1) % len(ids)]
        state.turn.active_player_id = next_player
        state.turn.number += 1
        events.append(TurnAdvanced(active_player_id=next_player, turn_number=state.turn.number))
