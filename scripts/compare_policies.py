"""Compare opponent policies against each player agent over many battles.

Usage:
    python scripts/compare_policies.py [--runs N] [--out policy_comparison.png]
"""

from __future__ import annotations

import argparse
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from circle_battle.balance import compute_battle_metrics
from circle_battle.content import generate_mock_roster
from circle_battle.play_agents import (
    AlwaysAttackAgent,
    AlwaysAttackPolicy,
    CautiousPolicy,
    RandomAgent,
)
from circle_battle.sim import BattleRunner

_MATCHUPS = [
    ("attack vs always", AlwaysAttackAgent, AlwaysAttackPolicy),
    ("attack vs cautious", AlwaysAttackAgent, CautiousPolicy),
    ("random vs always", RandomAgent, AlwaysAttackPolicy),
    ("random vs cautious", RandomAgent, CautiousPolicy),
]
_COLORS = ["#3498db", "#9b59b6", "#e67e22", "#e74c3c"]


def run_comparison(n_runs: int, out_path: str) -> None:
    my_roster = generate_mock_roster("circle-a", 5)
    opponent_roster = generate_mock_roster("circle-b", 5)

    results = {}
    for label, agent_class, policy_class in _MATCHUPS:
        print(f"\nRunning {n_runs} battles: {label}...")
        runner = BattleRunner(policy_class=policy_class, agent_class=agent_class)
        t0 = time.time()
        telemetry = runner.run_batch(n_runs, my_roster, opponent_roster, base_seed=0)
        elapsed = time.time() - t0

        metrics = compute_battle_metrics(telemetry)
        turns = [r.turns for r in telemetry]
        results[label] = {
            "metrics": metrics,
            "turns": turns,
            "damage_dealt": [r.damage_dealt for r in telemetry],
            "elapsed": elapsed,
        }

        print(f"  Time: {elapsed:.1f}s ({elapsed / n_runs * 1000:.1f}ms/battle)")
        print(f"  Win rate: {metrics.wins}/{n_runs} ({metrics.win_rate:.1%})")
        print(f"  Avg turns: {np.mean(turns):.1f} (median {np.median(turns):.0f})")

    generate_charts(results, n_runs, out_path)


def generate_charts(results: dict, n_runs: int, out_path: str) -> None:
    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    fig.suptitle(f"Opponent policy comparison -- {n_runs} battles each", fontsize=16, fontweight="bold")
    labels = list(results.keys())

    # --- Win rate ---
    ax = axes[0]
    win_rates = [results[l]["metrics"].win_rate * 100 for l in labels]
    bars = ax.bar(labels, win_rates, color=_COLORS, edgecolor="black", linewidth=0.5)
    for bar, rate in zip(bars, win_rates):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.5,
                f"{rate:.1f}%", ha="center", va="bottom", fontsize=10)
    ax.set_ylabel("Win Rate (%)")
    ax.set_title("Player win rate")
    ax.set_ylim(0, 110)
    ax.tick_params(axis="x", rotation=20)

    # --- Turns ---
    ax = axes[1]
    max_turns = max(max(results[l]["turns"]) for l in labels)
    bins = np.arange(0.5, max_turns + 1.5, 1)
    for label, color in zip(labels, _COLORS):
        turns = results[label]["turns"]
        ax.hist(turns, bins=bins, alpha=0.5, label=f"{label} (avg={np.mean(turns):.1f})",
                color=color, edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Turns")
    ax.set_ylabel("Count")
    ax.set_title("Battle length")
    ax.legend()

    # --- Damage dealt ---
    ax = axes[2]
    ax.boxplot([results[l]["damage_dealt"] for l in labels])
    ax.set_xticks(range(1, len(labels) + 1), labels)
    ax.set_ylabel("Damage dealt")
    ax.set_title("Damage dealt per battle")
    ax.tick_params(axis="x", rotation=20)

    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=500, help="Battles per matchup")
    parser.add_argument("--out", type=str, default="policy_comparison.png")
    args = parser.parse_args()
    run_comparison(args.runs, args.out)
