"""Battle engine -- the state machine of a circle battle.

A battle is ``Active`` while ``winner`` is ``Winner.NONE`` and
``Concluded`` afterwards.  Every operation is a pure function of the input
state (plus the injected random source) and returns a new ``BattleState``:

- ``initialize`` builds both decks and the opening state.
- ``attack`` resolves the player's hit *and* the opponent's counter in one
  transition.
- ``retreat`` swaps the player's active combatant with a bench combatant,
  then lets the opponent counter.

Commands whose preconditions do not hold are not errors: they return the
input state unchanged.  ``try_attack`` / ``try_retreat`` say so explicitly
through an ``ActionOutcome``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from pydantic import BaseModel

from circle_battle.core.battle_state import BattleState, Side, Winner
from circle_battle.core.config import BattleConfig
from circle_battle.core.entities import Combatant
from circle_battle.core.rng import BattleRNG
from circle_battle.mechanics.deck import PLACEHOLDER_ID_PREFIX, build_deck, swap_active
from circle_battle.mechanics.strike import can_strike, resolve_strike
from circle_battle.play_agents.base import OpponentPolicy
from circle_battle.play_agents.opponent_policies import AlwaysAttackPolicy

logger = logging.getLogger(__name__)

BATTLE_START_LOG = "Battle start!"


class RejectReason(str, Enum):
    """Why a command was ignored."""

    BATTLE_OVER = "battle_over"
    NO_ACTIVE_COMBATANT = "no_active_combatant"
    INVALID_BENCH_INDEX = "invalid_bench_index"
    STALE_TURN = "stale_turn"


class ActionOutcome(BaseModel):
    """Result of a command: the resulting state and whether it was applied.

    When ``applied`` is ``False`` the ``state`` is the input state, untouched.
    """

    model_config = {"frozen": True}

    state: BattleState
    applied: bool
    reason: RejectReason | None = None

    @classmethod
    def rejected(cls, state: BattleState, reason: RejectReason) -> ActionOutcome:
        return cls(state=state, applied=False, reason=reason)


class BattleEngine:
    """Runs battle transitions.

    Parameters
    ----------
    policy:
        Opponent policy.  Defaults to ``AlwaysAttackPolicy``.
    rng:
        Random source for shuffles and damage rolls.  Anything with
        ``uniform(low, high)`` and ``shuffle(list)`` works.  Defaults to an
        unseeded ``BattleRNG``.
    config:
        Rule constants.  Defaults to ``BattleConfig()``.
    """

    def __init__(
        self,
        policy: OpponentPolicy | None = None,
        rng: BattleRNG | None = None,
        config: BattleConfig | None = None,
    ) -> None:
        self.config = config or BattleConfig()
        self.policy = policy or AlwaysAttackPolicy(self.config)
        self.rng = rng or BattleRNG()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def initialize(
        self,
        my_side_name: str,
        my_roster: Sequence[Combatant],
        opponent_side_name: str,
        opponent_roster: Sequence[Combatant],
    ) -> BattleState:
        """Create the opening state of a battle between two rosters.

        Placeholder ids are prefixed with the side and skip every real card
        id, so ids stay unique across both decks.
        """
        my_deck = build_deck(
            my_roster, self.rng, self.config,
            id_prefix=f"{PLACEHOLDER_ID_PREFIX}-{Side.MINE.value}",
            reserved_ids={c.id for c in opponent_roster},
        )
        opponent_deck = build_deck(
            opponent_roster, self.rng, self.config,
            id_prefix=f"{PLACEHOLDER_ID_PREFIX}-{Side.OPPONENT.value}",
            reserved_ids={c.id for c in my_deck},
        )
        return BattleState(
            my_side_name=my_side_name,
            opponent_side_name=opponent_side_name,
            my_deck=my_deck,
            opponent_deck=opponent_deck,
            my_lives=self.config.starting_lives,
            opponent_lives=self.config.starting_lives,
            turn=1,
            logs=(BATTLE_START_LOG,),
            winner=Winner.NONE,
        )

    def attack(self, state: BattleState) -> BattleState:
        """Attack with my active combatant; the opponent counters unless the
        attack ended the battle."""
        return self.try_attack(state).state

    def retreat(self, state: BattleState, bench_index: int) -> BattleState:
        """Swap my active combatant with bench slot *bench_index*; the
        opponent counters against the newly active combatant."""
        return self.try_retreat(state, bench_index).state

    def try_attack(self, state: BattleState) -> ActionOutcome:
        if state.is_over:
            return self._reject(state, RejectReason.BATTLE_OVER)
        if not can_strike(state):
            return self._reject(state, RejectReason.NO_ACTIVE_COMBATANT)

        new_state = resolve_strike(state, Side.MINE, self.rng, self.config)
        if not new_state.is_over:
            new_state = self.policy.resolve_counter(new_state, self.rng)
        return self._accept(new_state)

    def try_retreat(self, state: BattleState, bench_index: int) -> ActionOutcome:
        if state.is_over:
            return self._reject(state, RejectReason.BATTLE_OVER)
        if bench_index < 0 or bench_index + 1 >= len(state.my_deck):
            return self._reject(state, RejectReason.INVALID_BENCH_INDEX)

        outgoing = state.my_deck[0]
        incoming = state.my_deck[bench_index + 1]
        new_state = state.with_side(
            Side.MINE, deck=swap_active(state.my_deck, bench_index)
        ).with_log(f"{outgoing.name} swapped out for {incoming.name}.")
        new_state = self.policy.resolve_counter(new_state, self.rng)
        return self._accept(new_state)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _accept(state: BattleState) -> ActionOutcome:
        state = state.model_copy(update={"turn": state.turn + 1})
        if state.is_over:
            logger.debug("Battle concluded on turn %d: %s", state.turn, state.winner.value)
        return ActionOutcome(state=state, applied=True)

    @staticmethod
    def _reject(state: BattleState, reason: RejectReason) -> ActionOutcome:
        logger.debug("Ignoring command on turn %d: %s", state.turn, reason.value)
        return ActionOutcome.rejected(state, reason)
