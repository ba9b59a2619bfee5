"""
Zone Transition Manager - Moves card instances between zones.

Keeps each instance's `zone` field in sync with membership in its
owner's collections. Insertion policy:
- DECK: front (put on top)
- HAND, DISCARD, BENCH: end (arrival order)
- ACTIVE: single slot, must be empty
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .errors import InvariantViolation
from .state import Zone

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


def move_instance(state: GameState, instance_id: str, from_zone: Zone, to_zone: Zone) -> None:
    """
    Move an instance from `from_zone` to `to_zone`.

    Removal is tolerant: an id already missing from the source is
    ignored. Moving into an occupied ACTIVE slot would orphan the
    occupant, so it is treated as an invariant violation.
    """
    card = state.get_card(instance_id)
    player = state.get_player(card.owner_id)

    if to_zone == Zone.ACTIVE and player.active not in (None, instance_id):
        raise InvariantViolation(
            f"ACTIVE slot of {player.player_id} is occupied by {player.active}"
        )

    # Remove from previous zone
    if from_zone == Zone.ACTIVE:
        if player.active == instance_id:
            player.active = None
    else:
        source = player.zone_list(from_zone)
        if instance_id in source:
            source.remove(instance_id)

    # Add to next zone
    if to_zone == Zone.ACTIVE:
        player.active = instance_id
    elif to_zone == Zone.DECK:
        player.deck.insert(0, instance_id)
    else:
        player.zone_list(to_zone).append(instance_id)

    card.zone = to_zone
    logger.debug(f"Moved {instance_id} {from_zone.value} -> {to_zone.value}")
