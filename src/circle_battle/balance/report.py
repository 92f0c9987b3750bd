"""Text report for a simulated matchup."""

from __future__ import annotations

from circle_battle.balance.models import BattleMetrics


def generate_text_report(metrics: BattleMetrics, label: str) -> str:
    """Generate a human-readable summary of *metrics*."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"Matchup Report -- {label}")
    lines.append(f"Battles: {metrics.total_battles:,}")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Outcomes")
    lines.append(f"  Win rate:        {metrics.win_rate:.1%} ({metrics.wins}/{metrics.total_battles})")
    lines.append(f"  Losses:          {metrics.losses}")
    lines.append(f"  Draws:           {metrics.draws}")
    lines.append(f"  Avg lives left:  {metrics.avg_lives_left:.2f} (wins only)")

    lines.append("")
    lines.append("## Pace")
    lines.append(f"  Avg turns:        {metrics.avg_turns:.1f}")
    lines.append(f"  Avg damage dealt: {metrics.avg_damage_dealt:.0f}")
    lines.append(f"  Avg damage taken: {metrics.avg_damage_taken:.0f}")

    return "\n".join(lines)
