"""Seedable die roller.

    rng = RandomSource(seed=123)  # deterministic
    v = rng.roll_die()

Pass an instance to a DiceContainer so tests can replay roll sequences.
"""

from __future__ import annotations
import random

from farkle.settings import FACE_MAX, FACE_MIN


class RandomSource:
    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def roll_die(self) -> int:
        return self._rng.randint(FACE_MIN, FACE_MAX)
