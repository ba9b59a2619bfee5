"""
Deterministic RNG - Linear congruential generator stored in game state.

Every draw is a pure function of `state.rng.seed`, so replaying the
same actions from the same initial seed gives identical results.
Nothing here may consult external entropy.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .state import GameState

T = TypeVar("T")

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


def rand01(state: GameState) -> float:
    """Advance the seed and return a float in [0, 1)."""
    state.rng.seed = (LCG_MULTIPLIER * state.rng.seed + LCG_INCREMENT) % LCG_MODULUS
    return state.rng.seed / LCG_MODULUS


def rand_int(state: GameState, upper: int) -> int:
    """Uniform integer in [0, upper)."""
    if upper <= 0:
        raise ValueError("upper must be positive")
    return int(rand01(state) * upper)


def shuffle(state: GameState, items: list[T]) -> None:
    """Fisher-Yates shuffle in place, consuming the state RNG."""
    for i in range(len(items) - 1, 0, -1):
        j = rand_int(state, i + 1)
        items[i], items[j] = items[j], items[i]
