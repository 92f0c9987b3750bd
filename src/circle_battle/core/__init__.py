"""Core battle primitives."""

from circle_battle.core.battle_state import BattleState, Side, Winner
from circle_battle.core.config import DEFAULT_CONFIG, BattleConfig
from circle_battle.core.entities import Combatant
from circle_battle.core.rng import BattleRNG

__all__ = [
    # rng
    "BattleRNG",
    # config
    "BattleConfig",
    "DEFAULT_CONFIG",
    # entities
    "Combatant",
    # battle_state
    "BattleState",
    "Side",
    "Winner",
]
