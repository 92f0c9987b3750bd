"""Battle session -- the command surface for a single battle.

A ``BattleSession`` owns the current ``BattleState`` of one battle and
exposes the three commands a UI or RPC layer sends: ``start``, ``attack``
and ``retreat``.  Commands are never rejected with an exception for
well-typed input; the returned ``ActionOutcome`` says whether they were
applied.

Persistence and fan-out stay outside: pass ``on_transition`` to receive
every new state (after ``start`` and after each applied command).
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from circle_battle.content.card_pool import (
    CardPool,
    RosterUnavailableError,
    generate_mock_roster,
)
from circle_battle.core.battle_state import BattleState
from circle_battle.core.entities import Combatant
from circle_battle.engine import ActionOutcome, BattleEngine, RejectReason

logger = logging.getLogger(__name__)

TransitionHook = Callable[[BattleState], None]


class BattleSession:
    """Single-writer wrapper around ``BattleEngine`` for one battle.

    Parameters
    ----------
    engine:
        Engine running the transitions.  Defaults to ``BattleEngine()``.
    on_transition:
        Called with each new state.  Exceptions it raises propagate to the
        caller of the command.
    """

    def __init__(
        self,
        engine: BattleEngine | None = None,
        on_transition: TransitionHook | None = None,
    ) -> None:
        self.engine = engine or BattleEngine()
        self._on_transition = on_transition
        self._state: BattleState | None = None

    # -- queries -------------------------------------------------------------

    @property
    def state(self) -> BattleState:
        if self._state is None:
            raise RuntimeError("battle has not been started")
        return self._state

    @property
    def started(self) -> bool:
        return self._state is not None

    # -- commands ------------------------------------------------------------

    def start(
        self,
        my_side_name: str,
        my_roster: Sequence[Combatant],
        opponent_side_name: str,
        opponent_roster: Sequence[Combatant],
    ) -> BattleState:
        """Start (or restart) the battle from two rosters."""
        state = self.engine.initialize(
            my_side_name, my_roster, opponent_side_name, opponent_roster,
        )
        logger.info("Battle started: %s vs %s", my_side_name, opponent_side_name)
        self._commit(state)
        return state

    def start_from_pool(
        self,
        pool: CardPool,
        my_side_id: str,
        opponent_side_id: str,
    ) -> BattleState:
        """Start a battle between two sides fetched from *pool*.

        A missing roster raises ``RosterUnavailableError`` unless the
        engine config enables the mock fallback; a missing name falls back
        to ``"Circle <id>"``.
        """
        my_roster = self._fetch_roster(pool, my_side_id)
        opponent_roster = self._fetch_roster(pool, opponent_side_id)
        return self.start(
            self._fetch_name(pool, my_side_id),
            my_roster,
            self._fetch_name(pool, opponent_side_id),
            opponent_roster,
        )

    def attack(self, expected_turn: int | None = None) -> ActionOutcome:
        """Attack with the active combatant.

        If *expected_turn* is given and does not match the current turn the
        command is rejected as stale.
        """
        state = self.state
        if self._is_stale(state, expected_turn):
            return ActionOutcome.rejected(state, RejectReason.STALE_TURN)
        return self._apply(self.engine.try_attack(state))

    def retreat(self, bench_index: int, expected_turn: int | None = None) -> ActionOutcome:
        """Swap the active combatant with bench slot *bench_index*."""
        state = self.state
        if self._is_stale(state, expected_turn):
            return ActionOutcome.rejected(state, RejectReason.STALE_TURN)
        return self._apply(self.engine.try_retreat(state, bench_index))

    # -- internal helpers ----------------------------------------------------

    @staticmethod
    def _is_stale(state: BattleState, expected_turn: int | None) -> bool:
        if expected_turn is None or expected_turn == state.turn:
            return False
        logger.debug(
            "Stale command: expected turn %d, battle is on turn %d",
            expected_turn, state.turn,
        )
        return True

    def _apply(self, outcome: ActionOutcome) -> ActionOutcome:
        if outcome.applied:
            self._commit(outcome.state)
            if outcome.state.is_over:
                logger.info(
                    "Battle finished on turn %d: winner=%s",
                    outcome.state.turn, outcome.state.winner.value,
                )
        return outcome

    def _commit(self, state: BattleState) -> None:
        self._state = state
        if self._on_transition is not None:
            self._on_transition(state)

    def _fetch_roster(self, pool: CardPool, side_id: str) -> list[Combatant]:
        try:
            return pool.get_roster(side_id)
        except RosterUnavailableError:
            config = self.engine.config
            if not config.enable_mock_fallback:
                raise
            logger.warning("Falling back to mock cards for side %s", side_id)
            return generate_mock_roster(side_id, config.mock_roster_size)

    @staticmethod
    def _fetch_name(pool: CardPool, side_id: str) -> str:
        try:
            return pool.get_side_name(side_id)
        except RosterUnavailableError:
            logger.warning("No name for side %s, using its id", side_id)
            return f"Circle {side_id}"
