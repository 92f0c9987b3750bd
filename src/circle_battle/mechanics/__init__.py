"""Battle mechanics.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from circle_battle.mechanics import (
        build_deck, create_placeholder, is_placeholder, swap_active,
        calculate_damage, damage_bounds, apply_damage,
        can_strike, resolve_strike,
        generate_battle_stats,
    )
"""

# -- deck --------------------------------------------------------------------
from .deck import build_deck, create_placeholder, is_placeholder, swap_active

# -- damage ------------------------------------------------------------------
from .damage import apply_damage, calculate_damage, damage_bounds

# -- strike ------------------------------------------------------------------
from .strike import can_strike, resolve_strike

# -- stats -------------------------------------------------------------------
from .stats import BattleStats, generate_battle_stats

__all__ = [
    # deck
    "build_deck",
    "create_placeholder",
    "is_placeholder",
    "swap_active",
    # damage
    "calculate_damage",
    "damage_bounds",
    "apply_damage",
    # strike
    "can_strike",
    "resolve_strike",
    # stats
    "BattleStats",
    "generate_battle_stats",
]
