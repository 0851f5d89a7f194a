"""Seedable randomness shared by every combat and exploration roll."""
from __future__ import annotations

from random import Random
from typing import MutableSequence, Sequence, Tuple, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random so a whole session replays from one seed."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll(self, bounds: Tuple[int, int]) -> int:
        """Roll within an inclusive ``(low, high)`` pair as stored in EncounterRules."""
        low, high = bounds
        return self.randint(low, high)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability (crits, panic, ambushes)."""
        return self.random() < probability

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def shuffle(self, seq: MutableSequence[T_co]) -> None:
        """Shuffle the sequence in-place."""
        self._random.shuffle(seq)
