"""circle-battle: turn-based card battles between circle member decks."""

from circle_battle.core import (
    DEFAULT_CONFIG,
    BattleConfig,
    BattleRNG,
    BattleState,
    Combatant,
    Side,
    Winner,
)
from circle_battle.engine import ActionOutcome, BattleEngine, RejectReason
from circle_battle.session import BattleSession

__all__ = [
    "DEFAULT_CONFIG",
    "ActionOutcome",
    "BattleConfig",
    "BattleEngine",
    "BattleRNG",
    "BattleSession",
    "BattleState",
    "Combatant",
    "RejectReason",
    "Side",
    "Winner",
]
