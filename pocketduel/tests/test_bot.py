"""
Tests for bot action selection and legality.

Tests:
- Bots only select legal actions
- The greedy policy follows the card registry
- Seeded random bots are reproducible
"""

import pytest

from ..bots import POLICIES, GreedyPolicy, RandomPolicy, create_policy
from ..engine_core.action import Attack, EndTurn, NextPhase, PlayCard, ResolvePrompt
from ..engine_core.action_generator import legal_actions
from ..engine_core.state import Phase, Zone
from .conftest import place


class TestGreedyPolicy:
    """Tests for registry-driven scoring."""

    def test_fills_empty_active_first(self, main_phase_state, registry):
        """Pikachu goes to ACTIVE before any trainer is played."""
        legal = legal_actions(registry, main_phase_state, "p1")
        decision = GreedyPolicy(registry).select_action(main_phase_state, legal)

        assert decision.action == PlayCard(player_id="p1", instance_id="card_1")

    def test_bench_prefers_sturdier_pokemon(self, main_phase_state, registry):
        """With ACTIVE filled, the 60 HP Bulbasaur beats the 50 HP Charmander."""
        place(main_phase_state, "card_1", Zone.ACTIVE)
        legal = legal_actions(registry, main_phase_state, "p1")
        decision = GreedyPolicy(registry).select_action(main_phase_state, legal)

        assert decision.action == PlayCard(player_id="p1", instance_id="card_6")

    def test_potion_on_damaged_active(self, main_phase_state, registry):
        place(main_phase_state, "card_1", Zone.ACTIVE)
        place(main_phase_state, "card_3", Zone.DISCARD)
        place(main_phase_state, "card_6", Zone.DISCARD)
        main_phase_state.cards["card_1"].damage_counters = 20
        legal = legal_actions(registry, main_phase_state, "p1")
        decision = GreedyPolicy(registry).select_action(main_phase_state, legal)

        assert decision.action == PlayCard(player_id="p1", instance_id="card_2")

    def test_attacks_with_strongest_move(self, attack_state, registry):
        place(attack_state, "card_1", Zone.DISCARD)
        place(attack_state, "card_3", Zone.ACTIVE)
        legal = legal_actions(registry, attack_state, "p1")
        decision = GreedyPolicy(registry).select_action(attack_state, legal)

        assert decision.action == Attack(player_id="p1", attacker_id="card_3", move_id="ember")

    def test_answers_prompt(self, attack_state, reducer, registry):
        state = reducer.apply(
            attack_state, Attack(player_id="p1", attacker_id="card_1", move_id="thunder-jolt")
        ).state
        legal = legal_actions(registry, state, "p1")
        decision = GreedyPolicy(registry).select_action(state, legal)

        assert isinstance(decision.action, ResolvePrompt)

    def test_advances_before_ending(self, main_phase_state, registry):
        """With nothing worth doing, NEXT_PHASE wins over END_TURN."""
        main_phase_state.turn.phase = Phase.ATTACK
        legal = legal_actions(registry, main_phase_state, "p1")
        decision = GreedyPolicy(registry).select_action(main_phase_state, legal)

        assert legal == [NextPhase(player_id="p1"), EndTurn(player_id="p1")]
        assert decision.action == NextPhase(player_id="p1")


class TestRandomPolicy:
    """Tests for the seeded baseline."""

    def test_selects_legal(self, main_phase_state, registry):
        legal = legal_actions(registry, main_phase_state, "p1")
        bot = RandomPolicy(seed=42)

        for _ in range(10):
            assert bot.select_action(main_phase_state, legal).action in legal

    def test_reproducible(self, main_phase_state, registry):
        legal = legal_actions(registry, main_phase_state, "p1")
        a, b = RandomPolicy(seed=7), RandomPolicy(seed=7)

        picks_a = [a.select_action(main_phase_state, legal).action for _ in range(20)]
        picks_b = [b.select_action(main_phase_state, legal).action for _ in range(20)]

        assert picks_a == picks_b


class TestCreatePolicy:
    """Tests for the factory used by the CLI."""

    @pytest.mark.parametrize("name", POLICIES)
    def test_no_legal_actions(self, main_phase_state, registry, name):
        policy = create_policy(name, registry, seed=1)
        with pytest.raises(ValueError):
            policy.select_action(main_phase_state, [])

    def test_names(self, registry):
        assert isinstance(create_policy("greedy", registry), GreedyPolicy)
        assert isinstance(create_policy("random", registry, seed=3), RandomPolicy)

    def test_unknown_name(self, registry):
        with pytest.raises(ValueError):
            create_policy("minimax", registry)
