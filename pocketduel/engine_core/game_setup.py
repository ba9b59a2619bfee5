"""
Game setup - Build the initial state for a match.

Creates one CardInstance per deck entry, all in DECK, and leaves
the match in SETUP phase waiting for START_GAME.
"""

from __future__ import annotations
import logging
from typing import Mapping, Sequence, TYPE_CHECKING

from .. import config
from .errors import InvariantViolation
from .rng import shuffle as rng_shuffle
from .state import CardInstance, CardType, GameState, Phase, PlayerState, RNGState, TurnState, Zone

if TYPE_CHECKING:
    from ..cards.registry import CardRegistry

logger = logging.getLogger(__name__)

NUM_PLAYERS = 2


def create_game(
    game_id: str,
    decks: Mapping[str, Sequence[str]],
    registry: CardRegistry,
    seed: int | None = None,
    shuffle: bool = False,
    first_player: str | None = None,
) -> GameState:
    """
    Create a two-player match.

    Args:
        game_id: Identifier of the match
        decks: Player id -> card ids, top of deck first. Iteration
            order fixes the turn order.
        registry: Card definitions used to validate ids and set hp
        seed: Initial RNG seed (defaults to config.DEFAULT_SEED)
        shuffle: Shuffle each deck with the engine RNG
        first_player: Player who takes turn 1 (defaults to the first)

    Returns:
        GameState in SETUP phase
    """
    player_ids = list(decks)
    if len(player_ids) != NUM_PLAYERS:
        raise InvariantViolation(f"A match needs {NUM_PLAYERS} players, got {len(player_ids)}")
    if first_player is None:
        first_player = player_ids[0]
    elif first_player not in decks:
        raise InvariantViolation(f"Missing PlayerState for {first_player}")

    state = GameState(
        game_id=game_id,
        players={pid: PlayerState(player_id=pid) for pid in player_ids},
        turn=TurnState(number=1, active_player_id=first_player, phase=Phase.SETUP),
        rng=RNGState(seed=config.DEFAULT_SEED if seed is None else seed),
    )

    for player_id, card_ids in decks.items():
        player = state.players[player_id]
        for card_id in card_ids:
            definition = registry.get(card_id)
            if definition is None:
                raise InvariantViolation(f"Unknown card id in deck of {player_id}: {card_id}")
            hp = definition.hp if definition.card_type == CardType.POKEMON else None
            instance = CardInstance(
                instance_id=state.create_id("card"),
                card_id=card_id,
                owner_id=player_id,
                zone=Zone.DECK,
                hp=hp,
                max_hp=hp,
            )
            state.cards[instance.instance_id] = instance
            player.deck.append(instance.instance_id)
        if shuffle:
            rng_shuffle(state, player.deck)

    logger.info(
        f"Created game {game_id} for {', '.join(player_ids)} "
        f"({len(state.cards)} cards, seed {state.rng.seed})"
    )
    return state
