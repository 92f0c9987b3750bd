"""Pure metric computation over battle telemetry.  No side effects, no I/O."""

from __future__ import annotations

from typing import TYPE_CHECKING

from circle_battle.balance.models import BattleMetrics
from circle_battle.core.battle_state import Winner

if TYPE_CHECKING:
    from circle_battle.sim.telemetry import BattleTelemetry


def compute_battle_metrics(results: list[BattleTelemetry]) -> BattleMetrics:
    """Compute aggregate statistics for a batch."""
    total = len(results)
    if total == 0:
        return BattleMetrics(
            total_battles=0, wins=0, losses=0, draws=0, win_rate=0.0,
            avg_turns=0.0, avg_damage_dealt=0.0, avg_damage_taken=0.0,
            avg_lives_left=0.0,
        )

    won = [r for r in results if r.winner == Winner.MINE.value]
    losses = sum(1 for r in results if r.winner == Winner.OPPONENT.value)
    avg_lives = sum(r.my_lives_left for r in won) / len(won) if won else 0.0

    return BattleMetrics(
        total_battles=total,
        wins=len(won),
        losses=losses,
        draws=total - len(won) - losses,
        win_rate=len(won) / total,
        avg_turns=sum(r.turns for r in results) / total,
        avg_damage_dealt=sum(r.damage_dealt for r in results) / total,
        avg_damage_taken=sum(r.damage_taken for r in results) / total,
        avg_lives_left=avg_lives,
    )
