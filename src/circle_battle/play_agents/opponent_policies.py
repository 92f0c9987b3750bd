"""Opponent policies.

``AlwaysAttackPolicy`` is the production policy: the opponent's active
combatant hits the player's active combatant every turn, using the same
damage and knockout rules as a player attack.

``CautiousPolicy`` is a slightly smarter tier: when its active combatant
is in range of a knockout it brings in the healthiest bench combatant
instead of attacking.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from circle_battle.core.battle_state import Side
from circle_battle.core.config import DEFAULT_CONFIG, BattleConfig
from circle_battle.mechanics.damage import damage_bounds
from circle_battle.mechanics.deck import swap_active
from circle_battle.mechanics.strike import can_strike, resolve_strike
from circle_battle.play_agents.base import OpponentPolicy

if TYPE_CHECKING:
    from circle_battle.core.battle_state import BattleState
    from circle_battle.core.rng import BattleRNG

logger = logging.getLogger(__name__)


class AlwaysAttackPolicy(OpponentPolicy):
    """Attack with the active combatant, every time."""

    def __init__(self, config: BattleConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def resolve_counter(self, state: BattleState, rng: BattleRNG) -> BattleState:
        return resolve_strike(state, Side.OPPONENT, rng, self._config)


class CautiousPolicy(OpponentPolicy):
    """Retreat a combatant that the player could knock out this turn.

    The swap target is the bench combatant with the most remaining HP, and
    only if it has more HP than the current active one.  Otherwise the
    policy attacks like ``AlwaysAttackPolicy``.
    """

    def __init__(self, config: BattleConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def resolve_counter(self, state: BattleState, rng: BattleRNG) -> BattleState:
        if not can_strike(state):
            return state

        active = state.opponent_deck[0]
        _, max_incoming = damage_bounds(state.my_deck[0], self._config)
        if active.current_hp <= max_incoming and state.opponent_bench:
            best_index, best = max(
                enumerate(state.opponent_bench),
                key=lambda pair: pair[1].current_hp,
            )
            if best.current_hp > active.current_hp:
                logger.debug(
                    "Cautious retreat: %s (%d HP) -> %s (%d HP)",
                    active.name, active.current_hp, best.name, best.current_hp,
                )
                deck = swap_active(state.opponent_deck, best_index)
                return state.with_side(Side.OPPONENT, deck=deck).with_log(
                    f"{active.name} swapped out for {best.name}."
                )

        return resolve_strike(state, Side.OPPONENT, rng, self._config)
