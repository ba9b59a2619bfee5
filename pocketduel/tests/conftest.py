"""
Pytest fixtures for Pocket Duel tests.

Card ids created by the fixtures are stable:
    p1: card_1 pikachu, card_2 potion, card_3 charmander,
        card_4 poke-ball, card_5 lightning-energy, card_6 bulbasaur
    p2: card_7 pikachu, card_8 charmander, card_9 potion
The next identifier handed out is 10.
"""

import pytest

from ..cards import CardRegistry, default_registry
from ..engine_core.game_setup import create_game
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState, Phase, Zone
from ..engine_core.zones import move_instance

P1_DECK = [
    "pikachu-basic",
    "potion",
    "charmander-basic",
    "poke-ball",
    "lightning-energy",
    "bulbasaur-basic",
]
P2_DECK = ["pikachu-basic", "charmander-basic", "potion"]


def place(state: GameState, instance_id: str, zone: Zone) -> None:
    """Put a card somewhere without going through an action."""
    move_instance(state, instance_id, state.get_card(instance_id).zone, zone)


@pytest.fixture
def registry() -> CardRegistry:
    return default_registry()


@pytest.fixture
def reducer(registry: CardRegistry) -> Reducer:
    return Reducer(registry=registry)


@pytest.fixture
def setup_state(registry: CardRegistry) -> GameState:
    """Fresh match in SETUP phase, decks unshuffled."""
    return create_game(
        game_id="test_game",
        decks={"p1": P1_DECK, "p2": P2_DECK},
        registry=registry,
        seed=42,
    )


@pytest.fixture
def main_phase_state(setup_state: GameState) -> GameState:
    """p1's MAIN phase: whole deck in hand, no active. p2 has card_7 active."""
    state = setup_state
    for instance_id in list(state.players["p1"].deck):
        place(state, instance_id, Zone.HAND)
    place(state, "card_7", Zone.ACTIVE)
    state.turn.phase = Phase.MAIN
    return state


@pytest.fixture
def attack_state(main_phase_state: GameState) -> GameState:
    """p1's ATTACK phase with card_1 (Pikachu) active."""
    state = main_phase_state
    place(state, "card_1", Zone.ACTIVE)
    state.turn.phase = Phase.ATTACK
    return state
