"""Battle simulation runner -- plays whole battles with a player agent.

Provides:

- **BattleRunner**: runs one battle or a batch of seeded battles between two
  rosters and records ``BattleTelemetry`` for each.

Each battle forks its master seed into independent streams (``"deck"``,
``"combat"``, ``"agent"``) so changing the agent does not change the decks.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import Sequence

from circle_battle.core.battle_state import BattleState, Winner
from circle_battle.core.config import BattleConfig
from circle_battle.core.entities import Combatant
from circle_battle.core.rng import BattleRNG
from circle_battle.engine import ActionOutcome, BattleEngine
from circle_battle.mechanics.deck import is_placeholder
from circle_battle.play_agents.base import (
    ActionKind,
    OpponentPolicy,
    PlayAgent,
    PlayerAction,
)
from circle_battle.play_agents.opponent_policies import AlwaysAttackPolicy
from circle_battle.play_agents.random_agent import AlwaysAttackAgent
from circle_battle.sim.telemetry import BattleTelemetry

logger = logging.getLogger(__name__)

_MAX_TURNS = 200


def _total_hp(deck: Sequence[Combatant]) -> int:
    return sum(c.current_hp for c in deck)


class BattleRunner:
    """Runs simulated battles.

    Parameters
    ----------
    policy_class:
        Opponent policy class, built with the config.
    agent_class:
        Player agent class, built with a forked ``rng`` keyword.
    config:
        Rule constants shared by engine and policy.
    max_turns:
        Turn limit after which a battle is recorded as a draw.
    """

    def __init__(
        self,
        policy_class: type[OpponentPolicy] = AlwaysAttackPolicy,
        agent_class: type[PlayAgent] = AlwaysAttackAgent,
        config: BattleConfig | None = None,
        max_turns: int = _MAX_TURNS,
    ) -> None:
        self.policy_class = policy_class
        self.agent_class = agent_class
        self.config = config or BattleConfig()
        self.max_turns = max_turns

    # ------------------------------------------------------------------
    # Single battle
    # ------------------------------------------------------------------

    def run_battle(
        self,
        seed: int,
        my_roster: Sequence[Combatant],
        opponent_roster: Sequence[Combatant],
        my_side_name: str = "Mine",
        opponent_side_name: str = "Opponent",
    ) -> BattleTelemetry:
        """Play one battle to completion (or to the turn limit)."""
        root = BattleRNG(seed)
        engine = BattleEngine(
            policy=self.policy_class(self.config),  # type: ignore[call-arg]
            rng=root.fork("deck"),
            config=self.config,
        )
        state = engine.initialize(
            my_side_name, my_roster, opponent_side_name, opponent_roster,
        )
        # Decks are dealt; damage rolls get their own stream.
        engine.rng = root.fork("combat")
        agent = self.agent_class(rng=root.fork("agent"))  # type: ignore[call-arg]

        telemetry = BattleTelemetry(
            seed=seed,
            winner=Winner.NONE.value,
            turns=0,
            my_lives_left=state.my_lives,
            opponent_lives_left=state.opponent_lives,
            placeholders_used=sum(
                1 for c in state.my_deck if is_placeholder(c, self.config)
            ),
        )

        while not state.is_over and telemetry.turns < self.max_turns:
            action = agent.choose_action(state)
            outcome = self._dispatch(engine, state, action)
            if not outcome.applied:
                # Agents only get live states, so this means a dead end
                # (e.g. an empty deck); stop instead of spinning.
                logger.debug("Seed %d: agent action rejected (%s)", seed, outcome.reason)
                break
            self._record_step(telemetry, state, outcome.state, action)
            state = outcome.state

        telemetry.winner = state.winner.value
        telemetry.my_lives_left = state.my_lives
        telemetry.opponent_lives_left = state.opponent_lives
        logger.debug(
            "Seed %d finished after %d turns: %s", seed, telemetry.turns, telemetry.winner,
        )
        return telemetry

    @staticmethod
    def _dispatch(
        engine: BattleEngine, state: BattleState, action: PlayerAction,
    ) -> ActionOutcome:
        if action.kind is ActionKind.ATTACK:
            return engine.try_attack(state)
        if action.kind is ActionKind.RETREAT:
            return engine.try_retreat(state, action.bench_index)
        raise ValueError(f"Unknown action kind: {action.kind!r}")

    @staticmethod
    def _record_step(
        telemetry: BattleTelemetry,
        before: BattleState,
        after: BattleState,
        action: PlayerAction,
    ) -> None:
        # A knocked-out combatant is at 0 HP whether it was dropped from the
        # deck or, on the final knockout, left in place, so HP totals drop by
        # exactly the damage applied.
        telemetry.turns += 1
        telemetry.damage_dealt += _total_hp(before.opponent_deck) - _total_hp(after.opponent_deck)
        telemetry.damage_taken += _total_hp(before.my_deck) - _total_hp(after.my_deck)
        telemetry.knockouts_dealt += before.opponent_lives - after.opponent_lives
        telemetry.knockouts_taken += before.my_lives - after.my_lives
        if action.kind is ActionKind.RETREAT:
            telemetry.retreats += 1

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def run_batch(
        self,
        n_battles: int,
        my_roster: Sequence[Combatant],
        opponent_roster: Sequence[Combatant],
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[BattleTelemetry]:
        """Run *n_battles* battles with seeds ``base_seed .. base_seed+n-1``."""
        seeds = [base_seed + i for i in range(n_battles)]

        if parallel and n_battles > 1:
            work_items = [
                (self, seed, list(my_roster), list(opponent_roster))
                for seed in seeds
            ]
            n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)
            with multiprocessing.Pool(processes=n_workers) as pool:
                return pool.map(_worker_run_battle, work_items)

        return [
            self.run_battle(seed, my_roster, opponent_roster) for seed in seeds
        ]


def _worker_run_battle(args: tuple) -> BattleTelemetry:
    """Top-level worker so it can be pickled by multiprocessing."""
    runner, seed, my_roster, opponent_roster = args
    return runner.run_battle(seed, my_roster, opponent_roster)
