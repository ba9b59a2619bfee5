"""
API Module - Wire format for an external transport.

The engine does not own a network layer. A transport:
1. Parses inbound JSON with parse_action
2. Serializes the returned events with event_to_wire
3. Pushes snapshot_to_wire(view_for_player(...)) to each player
"""

from .schemas import (
    ActionRequest,
    GameSnapshot,
    PromptModel,
    TargetRefModel,
    event_message,
    event_to_wire,
    history_to_wire,
    parse_action,
    parse_action_json,
    snapshot_to_wire,
)

__all__ = [
    "ActionRequest",
    "GameSnapshot",
    "PromptModel",
    "TargetRefModel",
    "event_message",
    "event_to_wire",
    "history_to_wire",
    "parse_action",
    "parse_action_json",
    "snapshot_to_wire",
]
