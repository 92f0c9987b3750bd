"""Matchup analysis: metrics and reports over simulated battles."""

from circle_battle.balance.metrics import compute_battle_metrics
from circle_battle.balance.models import BattleMetrics
from circle_battle.balance.report import generate_text_report

__all__ = [
    "BattleMetrics",
    "compute_battle_metrics",
    "generate_text_report",
]
