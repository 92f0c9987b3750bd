"""Random source for circle battles.

A battle draws randomness in two places only: the deck shuffle in
``initialize`` and the damage multiplier of every hit.  Production battles
use an unseeded ``BattleRNG``; tests and simulations pass a seed and split
it with :meth:`BattleRNG.fork` so that, for instance, a simulated player
deciding to retreat does not shift the damage rolls that follow.
"""

from __future__ import annotations

import hashlib
import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


class BattleRNG:
    """Seedable wrapper around ``random.Random``.

    The engine only calls ``uniform`` and ``shuffle``; player agents also
    use ``random_int`` and ``random_float``.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def uniform(self, low: float, high: float) -> float:
        """Damage multiplier draw, ``low <= N <= high``."""
        return self._rng.uniform(low, high)

    def shuffle(self, cards: MutableSequence[T]) -> None:
        """Shuffle *cards* in place."""
        self._rng.shuffle(cards)

    def random_int(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        return self._rng.random()

    def fork(self, stream: str) -> BattleRNG:
        """Derive the generator for *stream* (``"deck"``, ``"combat"``,
        ``"agent"`` in the simulation runner).

        The child seed is the first 8 bytes of ``sha256("<seed>:<stream>")``,
        so a battle seed always yields the same deck and the same rolls.
        An unseeded RNG forks into unseeded children.
        """
        if self._seed is None:
            return BattleRNG()
        digest = hashlib.sha256(f"{self._seed}:{stream}".encode()).digest()
        return BattleRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"BattleRNG(seed={self._seed})"
