"""Telemetry data models for simulated battles.

These lightweight dataclasses capture what is needed to compare rosters
and policies without storing the whole state history.  They are plain
``dataclass`` instances (not Pydantic models) to keep collection cheap
during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BattleTelemetry:
    """Stats from a single simulated battle.

    Attributes
    ----------
    seed:
        Master seed of the battle.
    winner:
        ``"mine"``, ``"opponent"``, or ``"none"`` if the turn limit was hit.
    turns:
        Number of accepted player actions.
    my_lives_left / opponent_lives_left:
        Lives remaining at the end.
    knockouts_dealt / knockouts_taken:
        Combatants knocked out on the opponent's / my side.
    damage_dealt / damage_taken:
        Total HP removed from the opponent's / my combatants.
    retreats:
        Accepted player retreats.
    placeholders_used:
        Placeholder combatants in my starting deck.
    """

    seed: int
    winner: str
    turns: int
    my_lives_left: int
    opponent_lives_left: int
    knockouts_dealt: int = 0
    knockouts_taken: int = 0
    damage_dealt: int = 0
    damage_taken: int = 0
    retreats: int = 0
    placeholders_used: int = 0
