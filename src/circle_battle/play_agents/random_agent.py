"""Player-side agents for batch simulation.

``AlwaysAttackAgent`` mirrors the default opponent policy and gives the
baseline matchup of two rosters.  ``RandomAgent`` occasionally retreats to
a random bench slot, which exercises the retreat path under simulation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from circle_battle.core.rng import BattleRNG
from circle_battle.play_agents.base import PlayAgent, PlayerAction

if TYPE_CHECKING:
    from circle_battle.core.battle_state import BattleState


class AlwaysAttackAgent(PlayAgent):
    """Agent that attacks every turn."""

    def __init__(self, rng: BattleRNG | None = None) -> None:
        # Accepts an rng so the runner can build every agent the same way.
        self._rng = rng

    def choose_action(self, state: BattleState) -> PlayerAction:
        return PlayerAction.attack()


class RandomAgent(PlayAgent):
    """Agent that attacks, with a chance to retreat instead.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``BattleRNG(seed=0)`` is created.
    retreat_chance:
        Probability (0.0 -- 1.0) of retreating when a bench exists.
        Default is 0.10 (10 %).
    """

    def __init__(
        self,
        rng: BattleRNG | None = None,
        retreat_chance: float = 0.10,
    ) -> None:
        self._rng = rng or BattleRNG(seed=0)
        self._retreat_chance = retreat_chance

    def choose_action(self, state: BattleState) -> PlayerAction:
        bench_size = len(state.my_bench)
        if bench_size and self._rng.random_float() < self._retreat_chance:
            return PlayerAction.retreat(self._rng.random_int(0, bench_size - 1))
        return PlayerAction.attack()
