"""
Integration tests - End-to-end workflow tests.

Tests the complete flow:
1. Create a match from decks
2. Drive it with bots through the reducer
3. Serialize events and views
4. Run the CLI
"""

import json

import pytest

from ..api.schemas import history_to_wire, snapshot_to_wire
from ..bots import GreedyPolicy, RandomPolicy
from ..cli import STARTER_DECK, main
from ..engine_core import (
    ActionGenerator, EndTurn, InvariantViolation, NextPhase, Phase, Reducer, ResultKind,
    StartGame, create_game, view_for_player,
)
from ..engine_core.events import TurnAdvanced


def _new_game(registry, seed=99):
    return create_game(
        game_id="integration",
        decks={"p1": STARTER_DECK, "p2": STARTER_DECK},
        registry=registry,
        seed=seed,
        shuffle=True,
    )


def _play(registry, bots, turns, opening_hand=3):
    reducer = Reducer(registry=registry, opening_hand_size=opening_hand)
    generator = ActionGenerator(reducer=reducer)
    state = _new_game(registry)
    totals = {pid: p.card_count() for pid, p in state.players.items()}

    while state.turn.number <= turns:
        actor = state.prompt.player_id if state.prompt else state.turn.active_player_id
        decision = bots[actor].select_action(state, generator.generate(state, actor))
        result = reducer.apply(state, decision.action)

        assert result.kind == ResultKind.ACCEPTED, result.error
        state = result.state
        for pid, player in state.players.items():
            assert player.card_count() == totals[pid]
    return state


class TestCreateGame:
    """Tests for match setup."""

    def test_instances_in_deck_order(self, setup_state):
        assert setup_state.players["p1"].deck == [f"card_{i}" for i in range(1, 7)]
        assert setup_state.players["p2"].deck == ["card_7", "card_8", "card_9"]
        assert setup_state.next_id == 10
        assert setup_state.turn.phase == Phase.SETUP
        assert setup_state.cards["card_1"].hp == 60
        assert setup_state.cards["card_2"].hp is None

    def test_shuffle_is_seeded(self, registry):
        a = _new_game(registry, seed=5)
        b = _new_game(registry, seed=5)

        assert a.players["p1"].deck == b.players["p1"].deck
        assert a.rng.seed == b.rng.seed
        assert sorted(a.players["p1"].deck, key=lambda i: int(i.split("_")[1])) == [
            f"card_{i}" for i in range(1, 11)
        ]

    def test_requires_two_players(self, registry):
        with pytest.raises(InvariantViolation):
            create_game("solo", {"p1": STARTER_DECK}, registry)

    def test_unknown_card_id(self, registry):
        with pytest.raises(InvariantViolation):
            create_game("bad", {"p1": ["missingno"], "p2": STARTER_DECK}, registry)


class TestFullGameFlow:
    """Tests for complete bot-driven matches."""

    def test_opening_turn(self, registry):
        reducer = Reducer(registry=registry, opening_hand_size=3)
        state = _new_game(registry)

        state = reducer.apply(state, StartGame()).state
        assert len(state.players["p1"].hand) == 3
        assert len(state.players["p2"].hand) == 3
        assert state.turn.phase == Phase.DRAW

        state = reducer.apply(state, NextPhase(player_id="p1")).state
        assert len(state.players["p1"].hand) == 4
        assert state.turn.phase == Phase.MAIN

        result = reducer.apply(state, EndTurn(player_id="p1"))
        assert result.events[0] == TurnAdvanced(active_player_id="p2", turn_number=2)
        assert result.state.turn.phase == Phase.DRAW

    def test_greedy_match(self, registry):
        """Greedy bots play out a match without rejections or invariant failures."""
        state = _play(registry, {"p1": GreedyPolicy(registry), "p2": GreedyPolicy(registry)}, turns=6)

        assert state.turn.number == 7
        damaged = [c for c in state.cards.values() if c.damage_counters > 0]
        assert damaged
        assert state.history

    def test_random_match(self, registry):
        bots = {"p1": RandomPolicy(seed=1), "p2": RandomPolicy(seed=2)}
        state = _play(registry, bots, turns=8)

        assert state.turn.number == 9

    def test_views_serialize(self, registry):
        state = _play(registry, {"p1": GreedyPolicy(registry), "p2": GreedyPolicy(registry)}, turns=2)

        for pid in state.player_ids:
            json.dumps(snapshot_to_wire(view_for_player(state, pid)))
        assert len(history_to_wire(state)) == len(state.history)


class TestCli:
    """Tests for the command-line interface."""

    def test_cards(self, capsys):
        main(["cards"])
        out = capsys.readouterr().out

        assert "pikachu-basic" in out
        assert "thunder-jolt" in out

    def test_simulate(self, capsys):
        main(["simulate", "--turns", "3", "--seed", "7"])
        lines = capsys.readouterr().out.strip().splitlines()
        records = [json.loads(line) for line in lines]

        assert records[0]["action"] == "START_GAME"
        assert all(r["result"] == "accepted" for r in records[:-1])
        assert records[-1]["turns"] == 3

    def test_simulate_is_deterministic(self, capsys):
        main(["simulate", "--turns", "2", "--policy", "random", "--seed", "11"])
        first = capsys.readouterr().out
        main(["simulate", "--turns", "2", "--policy", "random", "--seed", "11"])
        second = capsys.readouterr().out

        assert first == second

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
