"""One attack from one side's active combatant against the other's.

Shared by the player's attack and the opponent's counter-attack so that
both directions follow the same damage, knockout, life and promotion rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from circle_battle.core.battle_state import BattleState, Side
from circle_battle.core.config import DEFAULT_CONFIG, BattleConfig
from circle_battle.mechanics.damage import apply_damage, calculate_damage

if TYPE_CHECKING:
    from circle_battle.core.rng import BattleRNG


def can_strike(state: BattleState) -> bool:
    """True while the battle is running and both active slots are filled."""
    return (
        not state.is_over
        and state.my_active is not None
        and state.opponent_active is not None
    )


def resolve_strike(
    state: BattleState,
    attacker_side: Side,
    rng: BattleRNG,
    config: BattleConfig = DEFAULT_CONFIG,
) -> BattleState:
    """Resolve a hit by *attacker_side*'s active combatant.

    Steps:
        1. Roll damage and log it.
        2. Damage the defending active combatant (HP clamped at 0).
        3. On knockout: log it and take a life from the defending side.
           No lives left -> attacker wins, nothing else happens.
           Otherwise the next bench combatant is promoted; an empty deck
           after promotion also ends the battle in the attacker's favour.

    Returns *state* unchanged if a strike is not possible.
    """
    if not can_strike(state):
        return state

    defender_side = attacker_side.other
    attacker = state.deck_of(attacker_side)[0]
    defender = state.deck_of(defender_side)[0]

    damage = calculate_damage(attacker, rng, config)
    deck = apply_damage(state.deck_of(defender_side), damage)
    state = state.with_side(defender_side, deck=deck).with_log(
        f"{attacker.name} attacked {defender.name} for {damage} damage."
    )

    if not deck[0].is_knocked_out:
        return state

    lives = state.lives_of(defender_side) - 1
    state = state.with_side(defender_side, lives=lives).with_log(
        f"{defender.name} fell!"
    )
    if lives <= 0:
        return _declare_winner(state, attacker_side)

    deck = deck[1:]
    state = state.with_side(defender_side, deck=deck)
    if not deck:
        return _declare_winner(state, attacker_side)
    return state.with_log(
        f"{deck[0].name} steps forward for {state.name_of(defender_side)}."
    )


def _declare_winner(state: BattleState, side: Side) -> BattleState:
    return state.model_copy(update={"winner": side.as_winner}).with_log(
        f"{state.name_of(side)} wins!"
    )
