"""
Built-in card catalog.

A small vocabulary of attacks, heals and trainer plays. Catalog
loading from external stores is the caller's job; this module only
provides the default definitions and their effect builders.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.effects import Heal
from ..engine_core.state import CardType, TargetRef
from .registry import CardDefinition, CardRegistry, MoveDefinition

if TYPE_CHECKING:
    from ..engine_core.effects import Effect
    from ..engine_core.state import GameState

POTION_HEAL = 20


def _owner_active(state: GameState, source: TargetRef) -> str | None:
    owner = state.get_card(source.instance_id).owner_id
    return state.get_player(owner).active


def _require_active(state: GameState, source: TargetRef) -> str | None:
    if _owner_active(state, source) is None:
        return "No active Pokémon to heal."
    return None


def _potion(state: GameState, source: TargetRef) -> list[Effect]:
    """Heal your active Pokémon."""
    active = _owner_active(state, source)
    return [Heal(target=TargetRef(instance_id=active), amount=POTION_HEAL)]


def _leech_seed(state: GameState, attacker: TargetRef) -> list[Effect]:
    """Attacker heals 10 before choosing its target."""
    return [Heal(target=attacker, amount=10)]


PIKACHU = CardDefinition(
    card_id="pikachu-basic",
    name="Pikachu",
    card_type=CardType.POKEMON,
    hp=60,
    moves=(MoveDefinition(move_id="thunder-jolt", name="Thunder Jolt", damage=20),),
)

CHARMANDER = CardDefinition(
    card_id="charmander-basic",
    name="Charmander",
    card_type=CardType.POKEMON,
    hp=50,
    moves=(
        MoveDefinition(move_id="scratch", name="Scratch", damage=10),
        MoveDefinition(move_id="ember", name="Ember", damage=30),
    ),
)

BULBASAUR = CardDefinition(
    card_id="bulbasaur-basic",
    name="Bulbasaur",
    card_type=CardType.POKEMON,
    hp=60,
    moves=(
        MoveDefinition(
            move_id="leech-seed",
            name="Leech Seed",
            damage=20,
            build_effects=_leech_seed,
        ),
    ),
)

POTION = CardDefinition(
    card_id="potion",
    name="Potion",
    card_type=CardType.TRAINER,
    on_play=_potion,
    can_play=_require_active,
)

POKE_BALL = CardDefinition(
    card_id="poke-ball",
    name="Poké Ball",
    card_type=CardType.TRAINER,
)

LIGHTNING_ENERGY = CardDefinition(
    card_id="lightning-energy",
    name="Lightning Energy",
    card_type=CardType.ENERGY,
)

ALL_CARDS: tuple[CardDefinition, ...] = (
    PIKACHU,
    CHARMANDER,
    BULBASAUR,
    POTION,
    POKE_BALL,
    LIGHTNING_ENERGY,
)


def default_registry() -> CardRegistry:
    """Registry holding every built-in card."""
    return CardRegistry(ALL_CARDS)
