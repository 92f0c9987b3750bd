"""Batch simulation of battles."""

from circle_battle.sim.runner import BattleRunner
from circle_battle.sim.telemetry import BattleTelemetry

__all__ = ["BattleRunner", "BattleTelemetry"]
