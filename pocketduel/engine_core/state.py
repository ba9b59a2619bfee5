"""
Game State - Canonical state container for one match.

Design principles:
- Single source of truth: the engine is the only writer
- Serializable: plain dataclasses, enums with wire-format values
- Cloneable: explicit structural copy, immutable parts are shared
- Card instances are never destroyed, they only change zone
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import InvariantViolation


class Zone(Enum):
    """Named locations a card instance can occupy."""
    DECK = "DECK"
    HAND = "HAND"
    DISCARD = "DISCARD"
    ACTIVE = "ACTIVE"
    BENCH = "BENCH"


class Phase(Enum):
    """Phases of a turn."""
    SETUP = "SETUP"
    DRAW = "DRAW"
    MAIN = "MAIN"
    ATTACK = "ATTACK"
    END = "END"
    PROMPT = "PROMPT"


class CardType(Enum):
    """Card categories."""
    POKEMON = "POKEMON"
    TRAINER = "TRAINER"
    ENERGY = "ENERGY"


class Status(Enum):
    """Special conditions a card in play can carry."""
    ASLEEP = "ASLEEP"
    PARALYZED = "PARALYZED"
    POISONED = "POISONED"
    BURNED = "BURNED"


class PromptKind(Enum):
    """Kinds of questions the engine can ask a player."""
    CHOOSE_TARGET = "CHOOSE_TARGET"


class ContinuationKind(Enum):
    """What to synthesize once a prompt is answered."""
    ATTACK_DAMAGE = "ATTACK_DAMAGE"
    CARD_EFFECT_DAMAGE = "CARD_EFFECT_DAMAGE"


@dataclass(frozen=True)
class TargetRef:
    """Reference to a card instance used as a source or target."""
    instance_id: str
    kind: str = "card"


@dataclass
class CardInstance:
    """
    A concrete card in a match.

    Identity fields never change. The definition lives in the
    CardRegistry and is looked up by card_id.
    """
    instance_id: str
    card_id: str
    owner_id: str
    zone: Zone = Zone.DECK
    statuses: set[Status] = field(default_factory=set)
    damage_counters: int = 0
    hp: int | None = None
    max_hp: int | None = None

    def copy(self) -> CardInstance:
        return CardInstance(
            instance_id=self.instance_id,
            card_id=self.card_id,
            owner_id=self.owner_id,
            zone=self.zone,
            statuses=set(self.statuses),
            damage_counters=self.damage_counters,
            hp=self.hp,
            max_hp=self.max_hp,
        )


@dataclass
class PlayerState:
    """
    Zones owned by one player.

    Deck order is draw order (front = top). Hand, discard and
    bench order is display order.
    """
    player_id: str
    deck: list[str] = field(default_factory=list)
    hand: list[str] = field(default_factory=list)
    discard: list[str] = field(default_factory=list)
    bench: list[str] = field(default_factory=list)
    active: str | None = None

    def zone_list(self, zone: Zone) -> list[str]:
        """Get the ordered collection backing a multi-card zone."""
        if zone == Zone.DECK:
            return self.deck
        if zone == Zone.HAND:
            return self.hand
        if zone == Zone.DISCARD:
            return self.discard
        if zone == Zone.BENCH:
            return self.bench
        raise ValueError(f"{zone.value} is a single-slot zone")

    def card_count(self) -> int:
        """Total instances across every zone."""
        count = len(self.deck) + len(self.hand) + len(self.discard) + len(self.bench)
        return count + (1 if self.active is not None else 0)

    def copy(self) -> PlayerState:
        return PlayerState(
            player_id=self.player_id,
            deck=list(self.deck),
            hand=list(self.hand),
            discard=list(self.discard),
            bench=list(self.bench),
            active=self.active,
        )


@dataclass
class TurnState:
    """Turn counter, whose turn it is and the current phase."""
    number: int
    active_player_id: str
    phase: Phase = Phase.SETUP


@dataclass
class RNGState:
    """Seed of the deterministic generator."""
    seed: int


@dataclass(frozen=True)
class Continuation:
    """Effect template instantiated when a prompt is resolved."""
    kind: ContinuationKind
    source: TargetRef
    damage: int


@dataclass(frozen=True)
class Prompt:
    """
    A suspended decision point.

    Only `player_id` may answer, and only with one of `candidates`.
    """
    prompt_id: str
    player_id: str
    message: str
    candidates: tuple[TargetRef, ...]
    continuation: Continuation
    kind: PromptKind = PromptKind.CHOOSE_TARGET


@dataclass
class GameState:
    """
    Complete match state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer.
    """
    game_id: str
    players: dict[str, PlayerState]
    turn: TurnState
    cards: dict[str, CardInstance] = field(default_factory=dict)

    # Effect resolution
    effect_queue: list[Any] = field(default_factory=list)
    prompt: Prompt | None = None

    # Determinism
    rng: RNGState = field(default_factory=lambda: RNGState(seed=0))
    next_id: int = 1

    # Append-only event log, never pruned by the engine
    history: list[Any] = field(default_factory=list)

    @property
    def player_ids(self) -> list[str]:
        """Players in their fixed turn order."""
        return list(self.players)

    def get_player(self, player_id: str) -> PlayerState:
        """Get player by ID."""
        player = self.players.get(player_id)
        if player is None:
            raise InvariantViolation(f"Missing PlayerState for {player_id}")
        return player

    def get_card(self, instance_id: str) -> CardInstance:
        """Get card instance by ID."""
        card = self.cards.get(instance_id)
        if card is None:
            raise InvariantViolation(f"Missing card instance: {instance_id}")
        return card

    def zone_of(self, instance_id: str) -> Zone:
        return self.get_card(instance_id).zone

    def create_id(self, prefix: str) -> str:
        """Allocate the next identifier from the match counter."""
        new_id = f"{prefix}_{self.next_id}"
        self.next_id += 1
        return new_id

    def clone(self) -> GameState:
        """
        Structural copy of the state.

        Mutable containers are copied. Effects, events and prompts
        are immutable and shared between the copies.
        """
        return GameState(
            game_id=self.game_id,
            players={pid: p.copy() for pid, p in self.players.items()},
            turn=TurnState(
                number=self.turn.number,
                active_player_id=self.turn.active_player_id,
                phase=self.turn.phase,
            ),
            cards={cid: c.copy() for cid, c in self.cards.items()},
            effect_queue=list(self.effect_queue),
            prompt=self.prompt,
            rng=RNGState(seed=self.rng.seed),
            next_id=self.next_id,
            history=list(self.history),
        )
