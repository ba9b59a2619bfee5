"""
View Redactor - Per-player projection of the full state.

Other players' hand and deck entries are replaced one-for-one with
an opaque marker: counts stay visible, identity and order do not.
Every other field is copied as-is. The source state is never touched.

The `cards` mapping and the event `history` are not redacted, so a
hidden entry can still be identified there (its instance carries
`zone` and `card_id`, and CardMoved events name it). A transport that
must not leak hand contents has to strip those before sending.
"""

from __future__ import annotations

from .state import GameState, PlayerState, RNGState, TurnState

HIDDEN_CARD = "UNKNOWN_CARD"


def _hidden(ids: list[str]) -> list[str]:
    return [HIDDEN_CARD] * len(ids)


def _player_view(player: PlayerState, visible: bool) -> PlayerState:
    return PlayerState(
        player_id=player.player_id,
        deck=list(player.deck) if visible else _hidden(player.deck),
        hand=list(player.hand) if visible else _hidden(player.hand),
        discard=list(player.discard),
        bench=list(player.bench),
        active=player.active,
    )


def view_for_player(full: GameState, viewer_id: str) -> GameState:
    """Build the snapshot `viewer_id` is allowed to see."""
    return GameState(
        game_id=full.game_id,
        players={
            pid: _player_view(player, visible=(pid == viewer_id))
            for pid, player in full.players.items()
        },
        turn=TurnState(
            number=full.turn.number,
            active_player_id=full.turn.active_player_id,
            phase=full.turn.phase,
        ),
        cards={cid: card.copy() for cid, card in full.cards.items()},
        effect_queue=list(full.effect_queue),
        prompt=full.prompt,
        rng=RNGState(seed=full.rng.seed),
        next_id=full.next_id,
        history=list(full.history),
    )
