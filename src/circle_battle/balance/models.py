"""Pydantic v2 models for matchup analysis.

Aggregate statistics computed from batch-simulated battles, serializable
to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel


class BattleMetrics(BaseModel):
    """Aggregate statistics over a batch of battles."""

    total_battles: int
    wins: int
    losses: int
    draws: int
    """Battles that hit the turn limit."""
    win_rate: float
    """wins / total_battles."""
    avg_turns: float
    avg_damage_dealt: float
    avg_damage_taken: float
    avg_lives_left: float
    """Average of my remaining lives, over won battles only."""
