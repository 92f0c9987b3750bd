"""Shared fixtures for battle tests."""

from __future__ import annotations

from typing import Iterable

import pytest


class ScriptedRNG:
    """RNG with a fixed sequence of damage multipliers.

    ``uniform`` ignores its bounds and returns the next scripted value
    (the last one repeats); ``shuffle`` leaves lists in order.
    """

    def __init__(self, multipliers: Iterable[float] = (1.0,)) -> None:
        self._multipliers = list(multipliers)
        self.uniform_calls: list[tuple[float, float]] = []
        self.shuffle_calls = 0

    def uniform(self, low: float, high: float) -> float:
        self.uniform_calls.append((low, high))
        if len(self._multipliers) > 1:
            return self._multipliers.pop(0)
        return self._multipliers[0]

    def shuffle(self, lst: list) -> None:
        self.shuffle_calls += 1


@pytest.fixture
def scripted_rng():
    """Factory: ``scripted_rng(0.9, 1.1)`` -> ``ScriptedRNG``."""

    def _make(*multipliers: float) -> ScriptedRNG:
        return ScriptedRNG(multipliers or (1.0,))

    return _make
