"""
Tests for the view redactor.
"""

from ..engine_core.action import PlayCard
from ..engine_core.view import HIDDEN_CARD, view_for_player
from ..engine_core.state import Zone
from .conftest import place


class TestViewForPlayer:
    """Tests for per-player redaction."""

    def test_opponent_hand_and_deck_hidden(self, main_phase_state):
        """Opponent zones keep their length but lose identity."""
        place(main_phase_state, "card_8", Zone.HAND)
        view = view_for_player(main_phase_state, "p1")

        p2 = view.players["p2"]
        assert p2.hand == [HIDDEN_CARD]
        assert p2.deck == [HIDDEN_CARD]

    def test_own_zones_visible(self, main_phase_state):
        view = view_for_player(main_phase_state, "p1")

        assert view.players["p1"].hand == main_phase_state.players["p1"].hand

    def test_public_zones_unredacted(self, main_phase_state):
        """Active, bench and discard are public."""
        place(main_phase_state, "card_9", Zone.DISCARD)
        view = view_for_player(main_phase_state, "p1")

        p2 = view.players["p2"]
        assert p2.active == "card_7"
        assert p2.discard == ["card_9"]
        assert view.turn == main_phase_state.turn
        assert view.cards == main_phase_state.cards

    def test_source_not_mutated(self, main_phase_state):
        before = main_phase_state.clone()
        view = view_for_player(main_phase_state, "p2")
        view.players["p2"].hand.append("card_x")
        view.cards["card_1"].damage_counters = 99

        assert main_phase_state == before
        assert main_phase_state.players["p1"].hand == before.players["p1"].hand

    def test_cards_and_history_stay_unredacted(self, main_phase_state, reducer):
        """Only the zone lists are masked; transports strip the rest."""
        place(main_phase_state, "card_8", Zone.HAND)
        state = reducer.apply(main_phase_state, PlayCard(player_id="p1", instance_id="card_1")).state
        view = view_for_player(state, "p2")

        assert view.players["p2"].hand == ["card_8"]
        assert view.players["p1"].hand == [HIDDEN_CARD] * 5
        assert view.cards["card_3"].card_id == "charmander-basic"
        assert view.cards["card_3"].zone == Zone.HAND
        assert view.history == state.history
