"""
Pocket Duel CLI - Command-line interface for the engine.

Usage:
    pocketduel cards                  List the built-in card catalog
    pocketduel simulate [options]     Play a bot-vs-bot match, print events
"""

import argparse
import json
import logging
import sys

from . import config
from .bots import POLICIES, create_policy

logger = logging.getLogger(__name__)

STARTER_DECK = [
    "pikachu-basic",
    "potion",
    "charmander-basic",
    "poke-ball",
    "bulbasaur-basic",
    "lightning-energy",
    "pikachu-basic",
    "potion",
    "charmander-basic",
    "bulbasaur-basic",
]


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pocket Duel - Card battle rules engine",
        prog="pocketduel",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("cards", help="List the built-in card catalog")

    simulate_parser = subparsers.add_parser("simulate", help="Play a bot-vs-bot match")
    simulate_parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="RNG seed")
    simulate_parser.add_argument("--turns", type=int, default=config.MAX_TURNS, help="Turn limit")
    simulate_parser.add_argument(
        "--policy", choices=POLICIES, default="greedy", help="Bot policy"
    )
    simulate_parser.add_argument(
        "--opening-hand",
        type=int,
        default=config.OPENING_HAND_SIZE or 3,
        help="Cards drawn by each player on START_GAME",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=config.LOG_FORMAT,
    )

    if args.command == "cards":
        cmd_cards(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_cards(args):
    """List the built-in card catalog."""
    from .cards import default_registry

    for definition in default_registry().values():
        line = f"{definition.card_id:<20} {definition.name:<18} {definition.card_type.value}"
        if definition.hp is not None:
            line += f"  HP {definition.hp}"
        print(line)
        for move in definition.moves:
            print(f"    {move.move_id:<16} {move.name:<16} {move.damage}")


def cmd_simulate(args):
    """Play a bot-vs-bot match and print one JSON line per action."""
    from .api.schemas import event_to_wire
    from .cards import default_registry
    from .engine_core import Reducer, ResultKind, create_game
    from .engine_core.action_generator import ActionGenerator

    registry = default_registry()
    reducer = Reducer(registry=registry, opening_hand_size=args.opening_hand)
    generator = ActionGenerator(reducer=reducer)

    state = create_game(
        game_id=f"sim_{args.seed}",
        decks={"p1": STARTER_DECK, "p2": STARTER_DECK},
        registry=registry,
        seed=args.seed,
        shuffle=True,
    )

    bots = {
        pid: create_policy(args.policy, registry, seed=args.seed + i)
        for i, pid in enumerate(state.player_ids)
    }

    while state.turn.number <= args.turns:
        actor = state.prompt.player_id if state.prompt else state.turn.active_player_id
        legal = generator.generate(state, actor)
        decision = bots[actor].select_action(state, legal)
        logger.debug(f"{actor} chose {decision.action.action_type.value} ({decision.reason})")
        result = reducer.apply(state, decision.action)

        print(json.dumps({
            "actor": actor,
            "action": decision.action.action_type.value,
            "result": result.kind.value,
            "events": [event_to_wire(e) for e in result.events],
        }))

        if result.kind == ResultKind.FATAL:
            print(f"Error: {result.error}", file=sys.stderr)
            sys.exit(2)
        state = result.state

    print(json.dumps({"turns": state.turn.number - 1, "events": len(state.history)}))


if __name__ == "__main__":
    main()
