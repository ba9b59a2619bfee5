"""
Card Registry - Read-only lookup from card id to gameplay behaviour.

Definitions never touch state. Move and on-play builders only
describe effects; the EffectResolver is the single writer.
The registry is built once and injected into the Reducer.
"""

from __future__ import annotations
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, TYPE_CHECKING

from ..engine_core.state import CardType, TargetRef

if TYPE_CHECKING:
    from ..engine_core.effects import Effect
    from ..engine_core.state import GameState

EffectBuilder = Callable[["GameState", TargetRef], "list[Effect]"]
PlayCheck = Callable[["GameState", TargetRef], "str | None"]


@dataclass(frozen=True)
class MoveDefinition:
    """
    An attack a Pokémon can use.

    `damage` is dealt to the target chosen through the CHOOSE_TARGET
    prompt. `build_effects(state, attacker)` may add effects that
    resolve before the target is chosen.
    """
    move_id: str
    name: str
    damage: int
    build_effects: EffectBuilder | None = None

    def effects(self, state: GameState, attacker: TargetRef) -> list[Effect]:
        if self.build_effects is None:
            return []
        return self.build_effects(state, attacker)


@dataclass(frozen=True)
class CardDefinition:
    """
    Static card data.

    Pokémon carry `hp` and `moves`. Trainers may carry `on_play`,
    plus `can_play` which returns a rejection reason or None.
    """
    card_id: str
    name: str
    card_type: CardType
    hp: int | None = None
    moves: tuple[MoveDefinition, ...] = ()
    on_play: EffectBuilder | None = None
    can_play: PlayCheck | None = None

    def get_move(self, move_id: str) -> MoveDefinition | None:
        for move in self.moves:
            if move.move_id == move_id:
                return move
        return None


class CardRegistry(Mapping[str, CardDefinition]):
    """Immutable mapping of card id to definition."""

    def __init__(self, definitions: Iterable[CardDefinition]):
        table: dict[str, CardDefinition] = {}
        for definition in definitions:
            if definition.card_id in table:
                raise ValueError(f"Duplicate card id: {definition.card_id}")
            table[definition.card_id] = definition
        self._table = MappingProxyType(table)

    def __getitem__(self, card_id: str) -> CardDefinition:
        return self._table[card_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"CardRegistry({sorted(self._table)})"
