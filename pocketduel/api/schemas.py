"""
Pydantic Schemas - Wire contract between clients and the engine.

Inbound: action requests, discriminated on `type`.
Outbound: one message per event, and per-viewer state snapshots.

All JSON keys are camelCase. Internal effects never appear on the
wire; the history log is exposed through the event messages.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from ..engine_core.action import (
    Action, Attack, EndTurn, NextPhase, PlayCard, ResolvePrompt, StartGame,
)
from ..engine_core.events import (
    ActionRejected, CardMoved, DamageDealt, GameEvent, Healed, PhaseChanged,
    PromptCleared, PromptCreated, TurnAdvanced,
)
from ..engine_core.state import (
    CardInstance, ContinuationKind, GameState, Phase, PlayerState, Prompt,
    PromptKind, Status, TargetRef, Zone,
)


class WireModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


# =============================================================================
# Shared Models
# =============================================================================

class TargetRefModel(WireModel):
    """Reference to a card instance."""
    kind: Literal["card"] = "card"
    instance_id: str

    @classmethod
    def from_ref(cls, ref: TargetRef) -> "TargetRefModel":
        return cls(kind=ref.kind, instance_id=ref.instance_id)

    def to_ref(self) -> TargetRef:
        return TargetRef(instance_id=self.instance_id, kind=self.kind)


class ContinuationModel(WireModel):
    kind: ContinuationKind = Field(alias="type")
    source: TargetRefModel
    damage: int


class PromptModel(WireModel):
    """An outstanding question for one player."""
    prompt_id: str = Field(alias="id")
    kind: PromptKind
    player_id: str
    message: str
    candidates: list[TargetRefModel]
    continuation: ContinuationModel

    @classmethod
    def from_prompt(cls, prompt: Prompt) -> "PromptModel":
        return cls(
            prompt_id=prompt.prompt_id,
            kind=prompt.kind,
            player_id=prompt.player_id,
            message=prompt.message,
            candidates=[TargetRefModel.from_ref(c) for c in prompt.candidates],
            continuation=ContinuationModel(
                kind=prompt.continuation.kind,
                source=TargetRefModel.from_ref(prompt.continuation.source),
                damage=prompt.continuation.damage,
            ),
        )


# =============================================================================
# Request Models
# =============================================================================

class StartGameRequest(WireModel):
    type: Literal["START_GAME"]

    def to_action(self) -> Action:
        return StartGame()


class EndTurnRequest(WireModel):
    type: Literal["END_TURN"]
    player_id: str

    def to_action(self) -> Action:
        return EndTurn(player_id=self.player_id)


class PlayCardRequest(WireModel):
    type: Literal["PLAY_CARD"]
    player_id: str
    instance_id: str

    def to_action(self) -> Action:
        return PlayCard(player_id=self.player_id, instance_id=self.instance_id)


class AttackRequest(WireModel):
    type: Literal["ATTACK"]
    player_id: str
    attacker_id: str
    move_id: str

    def to_action(self) -> Action:
        return Attack(player_id=self.player_id, attacker_id=self.attacker_id, move_id=self.move_id)


class ResolvePromptRequest(WireModel):
    type: Literal["RESOLVE_PROMPT"]
    player_id: str
    prompt_id: str
    choice: TargetRefModel

    def to_action(self) -> Action:
        return ResolvePrompt(
            player_id=self.player_id,
            prompt_id=self.prompt_id,
            choice=self.choice.to_ref(),
        )


class NextPhaseRequest(WireModel):
    type: Literal["NEXT_PHASE"]
    player_id: str

    def to_action(self) -> Action:
        return NextPhase(player_id=self.player_id)


ActionRequest = Annotated[
    Union[
        StartGameRequest,
        EndTurnRequest,
        PlayCardRequest,
        AttackRequest,
        ResolvePromptRequest,
        NextPhaseRequest,
    ],
    Field(discriminator="type"),
]

_ACTION_ADAPTER = TypeAdapter(ActionRequest)


def parse_action(data: Any) -> Action:
    """
    Parse an inbound JSON object into an engine Action.

    Raises pydantic.ValidationError for malformed payloads.
    """
    return _ACTION_ADAPTER.validate_python(data).to_action()


def parse_action_json(raw: str | bytes) -> Action:
    return _ACTION_ADAPTER.validate_json(raw).to_action()


# =============================================================================
# Event Messages
# =============================================================================

class PhaseChangedMessage(WireModel):
    type: Literal["PHASE_CHANGED"] = "PHASE_CHANGED"
    phase: Phase


class CardMovedMessage(WireModel):
    type: Literal["CARD_MOVED"] = "CARD_MOVED"
    instance_id: str
    from_zone: Zone = Field(alias="from")
    to_zone: Zone = Field(alias="to")


class DamageDealtMessage(WireModel):
    type: Literal["DAMAGE_DEALT"] = "DAMAGE_DEALT"
    source: TargetRefModel
    target: TargetRefModel
    amount: int


class HealedMessage(WireModel):
    type: Literal["HEALED"] = "HEALED"
    target: TargetRefModel
    amount: int


class PromptCreatedMessage(WireModel):
    type: Literal["PROMPT_CREATED"] = "PROMPT_CREATED"
    prompt: PromptModel


class PromptClearedMessage(WireModel):
    type: Literal["PROMPT_CLEARED"] = "PROMPT_CLEARED"
    prompt_id: str


class TurnAdvancedMessage(WireModel):
    type: Literal["TURN_ADVANCED"] = "TURN_ADVANCED"
    active_player_id: str
    turn_number: int


class ActionRejectedMessage(WireModel):
    type: Literal["ACTION_REJECTED"] = "ACTION_REJECTED"
    reason: str


def event_message(event: GameEvent) -> WireModel:
    """Build the wire message for an engine event."""
    if isinstance(event, PhaseChanged):
        return PhaseChangedMessage(phase=event.phase)
    if isinstance(event, CardMoved):
        return CardMovedMessage(
            instance_id=event.instance_id,
            from_zone=event.from_zone,
            to_zone=event.to_zone,
        )
    if isinstance(event, DamageDealt):
        return DamageDealtMessage(
            source=TargetRefModel.from_ref(event.source),
            target=TargetRefModel.from_ref(event.target),
            amount=event.amount,
        )
    if isinstance(event, Healed):
        return HealedMessage(target=TargetRefModel.from_ref(event.target), amount=event.amount)
    if isinstance(event, PromptCreated):
        return PromptCreatedMessage(prompt=PromptModel.from_prompt(event.prompt))
    if isinstance(event, PromptCleared):
        return PromptClearedMessage(prompt_id=event.prompt_id)
    if isinstance(event, TurnAdvanced):
        return TurnAdvancedMessage(
            active_player_id=event.active_player_id,
            turn_number=event.turn_number,
        )
    if isinstance(event, ActionRejected):
        return ActionRejectedMessage(reason=event.reason)
    raise TypeError(f"Unknown event type: {type(event).__name__}")


def event_to_wire(event: GameEvent) -> dict[str, Any]:
    return event_message(event).to_wire()


def history_to_wire(state: GameState) -> list[dict[str, Any]]:
    """The full append-only event log, for replay and audit."""
    return [event_to_wire(e) for e in state.history]


# =============================================================================
# Snapshot Models
# =============================================================================

class CardInstanceModel(WireModel):
    instance_id: str
    card_id: str
    owner_id: str
    zone: Zone
    statuses: list[Status] = Field(default_factory=list)
    damage_counters: int = 0
    hp: Optional[int] = None
    max_hp: Optional[int] = None

    @classmethod
    def from_instance(cls, card: CardInstance) -> "CardInstanceModel":
        return cls(
            instance_id=card.instance_id,
            card_id=card.card_id,
            owner_id=card.owner_id,
            zone=card.zone,
            statuses=sorted(card.statuses, key=lambda s: s.value),
            damage_counters=card.damage_counters,
            hp=card.hp,
            max_hp=card.max_hp,
        )


class PlayerStateModel(WireModel):
    """A player's zones. Hidden entries appear as UNKNOWN_CARD."""
    player_id: str
    deck: list[str]
    hand: list[str]
    discard: list[str]
    bench: list[str]
    active: Optional[str] = None

    @classmethod
    def from_player(cls, player: PlayerState) -> "PlayerStateModel":
        return cls(
            player_id=player.player_id,
            deck=player.deck,
            hand=player.hand,
            discard=player.discard,
            bench=player.bench,
            active=player.active,
        )


class TurnStateModel(WireModel):
    number: int
    active_player_id: str
    phase: Phase


class GameSnapshot(WireModel):
    """State pushed to one connected player."""
    game_id: str
    players: dict[str, PlayerStateModel]
    turn: TurnStateModel
    cards: dict[str, CardInstanceModel]
    prompt: Optional[PromptModel] = None
    rng_seed: int
    next_id: int

    @classmethod
    def from_view(cls, view: GameState) -> "GameSnapshot":
        return cls(
            game_id=view.game_id,
            players={pid: PlayerStateModel.from_player(p) for pid, p in view.players.items()},
            turn=TurnStateModel(
                number=view.turn.number,
                active_player_id=view.turn.active_player_id,
                phase=view.turn.phase,
            ),
            cards={cid: CardInstanceModel.from_instance(c) for cid, c in view.cards.items()},
            prompt=PromptModel.from_prompt(view.prompt) if view.prompt else None,
            rng_seed=view.rng.seed,
            next_id=view.next_id,
        )


def snapshot_to_wire(view: GameState) -> dict[str, Any]:
    """Serialize a redacted view produced by view_for_player."""
    return GameSnapshot.from_view(view).to_wire()
