"""Damage calculation and application.

A hit deals ``floor(attack * v)`` where ``v`` is drawn uniformly from the
configured variance band (0.9 - 1.1 by default).  Applying damage replaces
the defender's active combatant with a copy whose HP is clamped at 0.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from circle_battle.core.config import DEFAULT_CONFIG, BattleConfig

if TYPE_CHECKING:
    from circle_battle.core.entities import Combatant
    from circle_battle.core.rng import BattleRNG


def calculate_damage(
    attacker: Combatant,
    rng: BattleRNG,
    config: BattleConfig = DEFAULT_CONFIG,
) -> int:
    """Roll the damage of one hit by *attacker*."""
    variance = rng.uniform(config.damage_variance_low, config.damage_variance_high)
    return max(0, math.floor(attacker.attack * variance))


def damage_bounds(
    attacker: Combatant,
    config: BattleConfig = DEFAULT_CONFIG,
) -> tuple[int, int]:
    """Return the ``(min, max)`` damage a single hit by *attacker* can deal."""
    return (
        math.floor(attacker.attack * config.damage_variance_low),
        math.floor(attacker.attack * config.damage_variance_high),
    )


def apply_damage(
    deck: tuple[Combatant, ...],
    amount: int,
) -> tuple[Combatant, ...]:
    """Return *deck* with its active combatant hit for *amount*."""
    if not deck:
        return deck
    return (deck[0].take_damage(amount),) + deck[1:]
