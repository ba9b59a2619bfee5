"""Card definitions and the registry the engine consults."""

from .registry import CardDefinition, CardRegistry, MoveDefinition
from .catalog import ALL_CARDS, default_registry

__all__ = [
    "CardDefinition",
    "CardRegistry",
    "MoveDefinition",
    "ALL_CARDS",
    "default_registry",
]
